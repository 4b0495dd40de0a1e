from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import encode_dss_signature

from src.core.exceptions import OperationError
from src.dids.proof_crypto_engine.jwk import public_key_from_jwk

ES256K_SIGNATURE_LENGTH = 64


def verify_signature(signing_input: bytes, signature: bytes, public_jwk: dict) -> bool:
    """
    ES256K verification over a raw r||s signature.
    Returns False for a bad signature and for an unusable key; never raises.
    """
    if len(signature) != ES256K_SIGNATURE_LENGTH:
        return False
    try:
        pub = public_key_from_jwk(public_jwk)
    except (OperationError, ValueError):
        return False

    half = ES256K_SIGNATURE_LENGTH // 2
    r = int.from_bytes(signature[:half], "big")
    s = int.from_bytes(signature[half:], "big")
    try:
        pub.verify(encode_dss_signature(r, s), signing_input, ec.ECDSA(hashes.SHA256()))
    except InvalidSignature:
        return False
    return True
