"""
Transport codec: unpadded base64url over raw bytes.

Every string segment of an operation (signed data parts, delta, suffix data,
hashes and commitments) goes through this module, so decoding is strict:
only the base64url alphabet, no padding, no dangling sextet and no
non-zero trailing bits.
"""
import base64
import binascii
import re

from src.core.error_codes import ErrorCode
from src.core.exceptions import CodecError

_BASE64URL = re.compile(r"\A[A-Za-z0-9_-]*\Z")


def encode(content: bytes | str) -> str:
    if isinstance(content, str):
        content = content.encode("utf-8")
    return base64.urlsafe_b64encode(content).rstrip(b"=").decode("ascii")


def is_base64url_string(value) -> bool:
    return isinstance(value, str) and _BASE64URL.match(value) is not None


def decode(encoded: str) -> bytes:
    if not is_base64url_string(encoded):
        raise CodecError(ErrorCode.ENCODER_INPUT_NOT_BASE64URL)

    # A single character in the last group carries fewer than 8 bits.
    if len(encoded) % 4 == 1:
        raise CodecError(ErrorCode.ENCODER_INPUT_INVALID_GROUPING, extra={"length": len(encoded)})

    pad = "=" * (-len(encoded) % 4)
    try:
        decoded = base64.urlsafe_b64decode(encoded + pad)
    except binascii.Error as e:
        raise CodecError(ErrorCode.ENCODER_INPUT_INVALID_GROUPING) from e

    # Two encodings of the same bytes would let one operation take several wire forms.
    if encode(decoded) != encoded:
        raise CodecError(ErrorCode.ENCODER_INPUT_INVALID_GROUPING, message="non-canonical trailing bits")
    return decoded

