ALLOWED_ALGS = {"ES256K"}


def choose_alg_from_jwk(jwk: dict) -> str | None:
    kty = jwk.get("kty")
    crv = jwk.get("crv")
    if kty == "EC" and crv == "secp256k1":
        return "ES256K"
    return None
