from __future__ import annotations
from typing import Any

from src.core.error_codes import ErrorCode


class ApplicationError(Exception):
    def __init__(self, message, extra=None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}


class OperationError(ApplicationError):
    """
    Terminal rejection of a single DID operation.
    Callers branch on `code`; `message` is for humans only.
    """

    def __init__(self, code: ErrorCode, message: str | None = None, extra: dict[str, Any] | None = None):
        super().__init__(message or code.value, extra=extra)
        self.code = code

    def __eq__(self, other):
        if not isinstance(other, OperationError):
            return NotImplemented
        return self.code is other.code

    def __hash__(self):
        return hash(self.code)

    def __repr__(self):
        return f"{type(self).__name__}({self.code.value})"


class CodecError(OperationError):
    """Input is not a valid unpadded base64url string."""
    pass
