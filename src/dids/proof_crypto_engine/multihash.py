import hashlib

from src.core.error_codes import ErrorCode
from src.core.exceptions import OperationError
from src.dids.proof_crypto_engine import encoder

# multihash code -> hashlib constructor
HASH_ALGORITHMS = {
    18: hashlib.sha256,  # sha2-256
    19: hashlib.sha512,  # sha2-512
}


def digest(data: bytes, code: int) -> bytes:
    algorithm = HASH_ALGORITHMS.get(code)
    if algorithm is None:
        raise OperationError(ErrorCode.MULTIHASH_UNSUPPORTED_HASH_ALGORITHM, extra={"code": code})
    return algorithm(data).digest()


def wrap(raw_digest: bytes, code: int) -> bytes:
    return bytes([code, len(raw_digest)]) + raw_digest


def compute(data: bytes, code: int) -> bytes:
    return wrap(digest(data, code), code)


def hash_then_encode(data: bytes, code: int) -> str:
    return encoder.encode(compute(data, code))


def decode(multihash: bytes) -> tuple[int, bytes]:
    """Split a multihash into (code, digest). Only single-byte varints are in use."""
    if len(multihash) < 2:
        raise OperationError(ErrorCode.MULTIHASH_INVALID, message="multihash too short")
    code, length = multihash[0], multihash[1]
    if code not in HASH_ALGORITHMS:
        raise OperationError(ErrorCode.MULTIHASH_UNSUPPORTED_HASH_ALGORITHM, extra={"code": code})
    raw_digest = multihash[2:]
    if len(raw_digest) != length or length != HASH_ALGORITHMS[code]().digest_size:
        raise OperationError(ErrorCode.MULTIHASH_INVALID, message="digest length mismatch")
    return code, raw_digest


def validate_encoded(value, code: int) -> bytes:
    """
    Check that `value` is an encoded multihash produced with `code`.
    Returns the raw digest.
    """
    if not isinstance(value, str):
        raise OperationError(ErrorCode.MULTIHASH_INVALID, message="encoded multihash must be a string")
    actual_code, raw_digest = decode(encoder.decode(value))
    if actual_code != code:
        raise OperationError(
            ErrorCode.MULTIHASH_UNSUPPORTED_HASH_ALGORITHM,
            extra={"code": actual_code, "expected": code},
        )
    return raw_digest
