from __future__ import annotations
from cryptography.hazmat.primitives.asymmetric import ec

from src.core.error_codes import ErrorCode
from src.core.exceptions import OperationError
from src.dids.proof_crypto_engine import encoder

ES256K_CURVE = "secp256k1"
ES256K_PUBLIC_KEY_PROPERTIES = frozenset({"kty", "crv", "x", "y"})
ES256K_PRIVATE_KEY_PROPERTIES = ES256K_PUBLIC_KEY_PROPERTIES | {"d"}
# 32-byte coordinate, base64url without padding
ES256K_COORDINATE_LENGTH = 43


def _int_to_b64u(n: int, length: int = 32) -> str:
    # fixed width: a short x or y would change the key's canonical form and its commitment
    return encoder.encode(n.to_bytes(length, "big"))


def _b64u_to_int(s: str) -> int:
    return int.from_bytes(encoder.decode(s), "big")


def jwk_from_public_key(pub: ec.EllipticCurvePublicKey) -> dict:
    if not isinstance(pub.curve, ec.SECP256K1):
        raise ValueError("Unsupported public key type")
    nums = pub.public_numbers()
    return {
        "kty": "EC",
        "crv": ES256K_CURVE,
        "x": _int_to_b64u(nums.x),
        "y": _int_to_b64u(nums.y),
    }


def jwk_from_private_key(priv: ec.EllipticCurvePrivateKey) -> dict:
    jwk = jwk_from_public_key(priv.public_key())
    jwk["d"] = _int_to_b64u(priv.private_numbers().private_value)
    return jwk


def generate_es256k_key_pair() -> tuple[dict, dict]:
    """Returns (public_jwk, private_jwk)."""
    priv = ec.generate_private_key(ec.SECP256K1())
    return jwk_from_public_key(priv.public_key()), jwk_from_private_key(priv)


def public_key_from_jwk(jwk: dict) -> ec.EllipticCurvePublicKey:
    validate_es256k_public_key(jwk)
    x = _b64u_to_int(jwk["x"])
    y = _b64u_to_int(jwk["y"])
    # raises ValueError when the point is not on the curve
    return ec.EllipticCurvePublicNumbers(x, y, ec.SECP256K1()).public_key()


def private_key_from_jwk(jwk: dict) -> ec.EllipticCurvePrivateKey:
    if not isinstance(jwk, dict) or set(jwk) != ES256K_PRIVATE_KEY_PROPERTIES:
        raise OperationError(ErrorCode.JWK_ES256K_MISSING_OR_UNKNOWN_PROPERTY)
    d = jwk["d"]
    if not isinstance(d, str) or len(d) != ES256K_COORDINATE_LENGTH or not encoder.is_base64url_string(d):
        raise OperationError(ErrorCode.JWK_ES256K_MISSING_OR_INVALID_D)
    public_jwk = {k: v for k, v in jwk.items() if k != "d"}
    validate_es256k_public_key(public_jwk)
    return ec.derive_private_key(_b64u_to_int(d), ec.SECP256K1())


def _is_coordinate(value) -> bool:
    return (
        isinstance(value, str)
        and len(value) == ES256K_COORDINATE_LENGTH
        and encoder.is_base64url_string(value)
    )


def validate_es256k_public_key(jwk) -> None:
    """
    Exactly {kty, crv, x, y}. A private `d` or any extension member is rejected,
    since the key is hashed into commitments and must have one canonical form.
    """
    if not isinstance(jwk, dict) or set(jwk) != ES256K_PUBLIC_KEY_PROPERTIES:
        raise OperationError(ErrorCode.JWK_ES256K_MISSING_OR_UNKNOWN_PROPERTY)
    if jwk["kty"] != "EC":
        raise OperationError(ErrorCode.JWK_ES256K_MISSING_OR_INVALID_KTY)
    if jwk["crv"] != ES256K_CURVE:
        raise OperationError(ErrorCode.JWK_ES256K_MISSING_OR_INVALID_CRV)
    if not _is_coordinate(jwk["x"]):
        raise OperationError(ErrorCode.JWK_ES256K_MISSING_OR_INVALID_X)
    if not _is_coordinate(jwk["y"]):
        raise OperationError(ErrorCode.JWK_ES256K_MISSING_OR_INVALID_Y)
