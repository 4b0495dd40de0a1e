from pydantic import BaseModel, ConfigDict

from src.core.error_codes import ErrorCode
from src.core.exceptions import OperationError
from src.dids.proof_crypto_engine import encoder
from src.dids.proof_crypto_engine.alg_policy import ALLOWED_ALGS
from src.dids.proof_crypto_engine.canonical.json_values import FrozenJsonObject, loads_strict

REQUIRED_HEADER_PROPERTIES = frozenset({"alg"})
OPTIONAL_HEADER_PROPERTIES = frozenset({"kid"})


class Jws(BaseModel):
    """A parsed compact JWS. Parts are kept in their encoded form."""

    model_config = ConfigDict(frozen=True)

    protected: str
    payload: str
    signature: str
    header: FrozenJsonObject

    @property
    def signing_input(self) -> bytes:
        return f"{self.protected}.{self.payload}".encode("ascii")

    @property
    def signature_bytes(self) -> bytes:
        return encoder.decode(self.signature)

    def to_compact(self) -> str:
        return f"{self.protected}.{self.payload}.{self.signature}"


def _parse_protected_header(protected: str) -> dict:
    try:
        header = loads_strict(encoder.decode(protected))
    except (OperationError, ValueError) as e:
        raise OperationError(ErrorCode.JWS_PROTECTED_HEADER_NOT_JSON) from e
    if not isinstance(header, dict):
        raise OperationError(ErrorCode.JWS_PROTECTED_HEADER_NOT_JSON)

    properties = set(header)
    if not REQUIRED_HEADER_PROPERTIES <= properties or properties - REQUIRED_HEADER_PROPERTIES - OPTIONAL_HEADER_PROPERTIES:
        raise OperationError(
            ErrorCode.JWS_PROTECTED_HEADER_MISSING_OR_UNKNOWN_PROPERTY,
            extra={"properties": sorted(properties)},
        )
    if "kid" in header and not isinstance(header["kid"], str):
        raise OperationError(ErrorCode.JWS_PROTECTED_HEADER_MISSING_OR_UNKNOWN_PROPERTY)
    if header["alg"] not in ALLOWED_ALGS:
        raise OperationError(ErrorCode.JWS_PROTECTED_HEADER_MISSING_OR_INCORRECT_ALGORITHM)
    return header


def parse_compact_jws(value) -> Jws:
    if not isinstance(value, str):
        raise OperationError(ErrorCode.JWS_COMPACT_JWS_NOT_STRING)

    parts = value.split(".")
    if len(parts) != 3:
        raise OperationError(ErrorCode.JWS_COMPACT_JWS_INVALID, extra={"parts": len(parts)})
    protected, payload, signature = parts

    header = _parse_protected_header(protected)
    if not encoder.is_base64url_string(payload):
        raise OperationError(ErrorCode.JWS_PAYLOAD_NOT_BASE64URL)
    try:
        encoder.decode(signature)
    except OperationError as e:
        raise OperationError(ErrorCode.JWS_SIGNATURE_NOT_BASE64URL) from e

    return Jws(protected=protected, payload=payload, signature=signature, header=header)
