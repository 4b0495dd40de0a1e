import json

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

from src.dids.proof_crypto_engine import encoder
from src.dids.proof_crypto_engine.alg_policy import choose_alg_from_jwk
from src.dids.proof_crypto_engine.jwk import private_key_from_jwk


def sign_compact(payload: dict, private_jwk: dict, kid: str | None = None) -> str:
    """
    Sign `payload` as a compact JWS (ES256K, raw r||s signature).
    Returns "protected.payload.signature".
    """
    alg = choose_alg_from_jwk(private_jwk)
    if alg is None:
        raise ValueError("Unsupported JWK")
    header = {"alg": alg}
    if kid:
        header["kid"] = kid

    protected_b64 = encoder.encode(json.dumps(header, separators=(",", ":")))
    payload_b64 = encoder.encode(json.dumps(payload, separators=(",", ":"), ensure_ascii=False))
    signing_input = f"{protected_b64}.{payload_b64}".encode("ascii")

    priv = private_key_from_jwk(private_jwk)
    der = priv.sign(signing_input, ec.ECDSA(hashes.SHA256()))
    r, s = decode_dss_signature(der)
    signature = r.to_bytes(32, "big") + s.to_bytes(32, "big")
    return f"{protected_b64}.{payload_b64}.{encoder.encode(signature)}"
