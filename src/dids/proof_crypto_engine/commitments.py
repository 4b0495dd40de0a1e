"""
Commit-reveal chain.

An operation publishes a commitment to the key that must sign the next
operation of the same kind. The next operation redeems it by revealing the
hash of that key:

    reveal_value = encode(multihash(JCS(jwk)))
    commitment   = encode(multihash(digest(JCS(jwk))))

so the commitment is the hash of the digest carried by the reveal value.
Which commitment is current, and that it is redeemed only once, is tracked
by the resolver consuming parsed operations.
"""
import hmac

from config.settings.protocol import get_protocol_parameters
from src.core.exceptions import OperationError
from src.dids.proof_crypto_engine import encoder, multihash
from src.dids.proof_crypto_engine.canonical.jcs import dumps_bytes


def compute_reveal_value(public_key_jwk: dict, code: int | None = None) -> str:
    if code is None:
        code = get_protocol_parameters().hash_algorithm_in_multihash_code
    return multihash.hash_then_encode(dumps_bytes(public_key_jwk), code)


def derive_commitment(public_key_jwk: dict, code: int | None = None) -> str:
    if code is None:
        code = get_protocol_parameters().hash_algorithm_in_multihash_code
    intermediate = multihash.digest(dumps_bytes(public_key_jwk), code)
    return multihash.hash_then_encode(intermediate, code)


def redeem(reveal_value: str, expected_commitment: str) -> bool:
    """
    True iff `reveal_value` is the preimage behind `expected_commitment`.
    The commitment's own hash algorithm is used; malformed input is simply not a match.
    """
    try:
        commitment_code, _ = multihash.decode(encoder.decode(expected_commitment))
        reveal_code, revealed_digest = multihash.decode(encoder.decode(reveal_value))
    except OperationError:
        return False
    if reveal_code != commitment_code:
        return False

    recomputed = multihash.compute(revealed_digest, commitment_code)
    return hmac.compare_digest(recomputed, encoder.decode(expected_commitment))


def is_key_revealed(public_key_jwk: dict, reveal_value: str) -> bool:
    """True iff `reveal_value` was computed from `public_key_jwk`."""
    if not isinstance(reveal_value, str):
        return False
    try:
        code, _ = multihash.decode(encoder.decode(reveal_value))
    except OperationError:
        return False
    expected = compute_reveal_value(public_key_jwk, code)
    return hmac.compare_digest(expected.encode("ascii"), reveal_value.encode("ascii"))
