import pytest

from src.core.error_codes import ErrorCode
from src.core.exceptions import OperationError
from src.dids.proof_crypto_engine import encoder, multihash
from src.dids.proof_crypto_engine.canonical.jcs import dumps_bytes
from src.dids.proof_crypto_engine.commitments import (
    compute_reveal_value,
    derive_commitment,
    is_key_revealed,
    redeem,
)
from src.dids.proof_crypto_engine.jwk import generate_es256k_key_pair

SHA2_256 = 18


def _flip_bit(encoded: str, bit: int) -> str:
    raw = bytearray(encoder.decode(encoded))
    raw[bit // 8] ^= 1 << (bit % 8)
    return encoder.encode(bytes(raw))


def test_multihash_prefix_and_decode():
    mh = multihash.compute(b"abc", SHA2_256)
    assert mh[:2] == bytes([0x12, 0x20])
    code, digest = multihash.decode(mh)
    assert code == SHA2_256
    assert len(digest) == 32


def test_multihash_rejects_unknown_algorithm():
    with pytest.raises(OperationError) as exc:
        multihash.compute(b"abc", 0x99)
    assert exc.value.code is ErrorCode.MULTIHASH_UNSUPPORTED_HASH_ALGORITHM


@pytest.mark.parametrize("value", [b"", b"\x12", b"\x12\x20" + b"\x00" * 31, b"\x12\x10" + b"\x00" * 16])
def test_multihash_rejects_malformed(value):
    with pytest.raises(OperationError) as exc:
        multihash.decode(value)
    assert exc.value.code is ErrorCode.MULTIHASH_INVALID


def test_validate_encoded_requires_expected_algorithm():
    sha512 = multihash.hash_then_encode(b"abc", 19)
    with pytest.raises(OperationError) as exc:
        multihash.validate_encoded(sha512, SHA2_256)
    assert exc.value.code is ErrorCode.MULTIHASH_UNSUPPORTED_HASH_ALGORITHM


def test_reveal_value_fits_protocol_bound():
    public_jwk, _ = generate_es256k_key_pair()
    assert len(compute_reveal_value(public_jwk, SHA2_256)) == 46


def test_commitment_is_hash_of_reveal_digest():
    public_jwk, _ = generate_es256k_key_pair()
    reveal_value = compute_reveal_value(public_jwk, SHA2_256)
    _, digest = multihash.decode(encoder.decode(reveal_value))
    assert digest == multihash.digest(dumps_bytes(public_jwk), SHA2_256)
    assert derive_commitment(public_jwk, SHA2_256) == multihash.hash_then_encode(digest, SHA2_256)


def test_redeem_accepts_correct_reveal_value():
    public_jwk, _ = generate_es256k_key_pair()
    commitment = derive_commitment(public_jwk, SHA2_256)
    assert redeem(compute_reveal_value(public_jwk, SHA2_256), commitment) is True


def test_redeem_rejects_other_key():
    public_jwk, _ = generate_es256k_key_pair()
    other_jwk, _ = generate_es256k_key_pair()
    commitment = derive_commitment(public_jwk, SHA2_256)
    assert redeem(compute_reveal_value(other_jwk, SHA2_256), commitment) is False


@pytest.mark.parametrize("bit", [16, 17, 100, 200, 271])
def test_redeem_rejects_single_bit_alteration(bit):
    public_jwk, _ = generate_es256k_key_pair()
    commitment = derive_commitment(public_jwk, SHA2_256)
    reveal_value = compute_reveal_value(public_jwk, SHA2_256)
    assert redeem(_flip_bit(reveal_value, bit), commitment) is False
    assert redeem(reveal_value, _flip_bit(commitment, bit)) is False


@pytest.mark.parametrize("reveal_value", ["", "not base64!", "AAAA", 123, None])
def test_redeem_returns_false_for_malformed_reveal_value(reveal_value):
    public_jwk, _ = generate_es256k_key_pair()
    assert redeem(reveal_value, derive_commitment(public_jwk, SHA2_256)) is False


def test_redeem_rejects_commitment_used_as_reveal_value():
    public_jwk, _ = generate_es256k_key_pair()
    commitment = derive_commitment(public_jwk, SHA2_256)
    assert redeem(commitment, commitment) is False


def test_is_key_revealed():
    public_jwk, _ = generate_es256k_key_pair()
    other_jwk, _ = generate_es256k_key_pair()
    reveal_value = compute_reveal_value(public_jwk, SHA2_256)
    assert is_key_revealed(public_jwk, reveal_value)
    assert not is_key_revealed(other_jwk, reveal_value)
    assert not is_key_revealed(public_jwk, "reveal1")
