import pytest

from src.dids.operations import generator
from src.dids.proof_crypto_engine.commitments import derive_commitment
from src.dids.proof_crypto_engine.jwk import generate_es256k_key_pair

DID_SUFFIX = "EiDahaOGH-liLLdDtTxEAdc8i-cfCz-WUcQdRJheMVNn3A"


def build_request(operation_type: str) -> tuple[dict, dict]:
    """A valid request of `operation_type` and the keys behind it."""
    signing_public, _ = generate_es256k_key_pair()
    next_public, _ = generate_es256k_key_pair()
    patches = [generator.generate_add_public_keys_patch(signing_public)]

    if operation_type == "create":
        created = generator.generate_create_operation()
        return created["request"], created

    if operation_type == "update":
        update_public, update_private = generate_es256k_key_pair()
        request = generator.create_update_operation_request(
            DID_SUFFIX, update_private, derive_commitment(next_public), patches
        )
        return request, {"public_key": update_public, "private_key": update_private}

    recovery_public, recovery_private = generate_es256k_key_pair()
    keys = {"public_key": recovery_public, "private_key": recovery_private}
    if operation_type == "recover":
        next_recovery_public, _ = generate_es256k_key_pair()
        request = generator.create_recover_operation_request(
            DID_SUFFIX,
            recovery_private,
            derive_commitment(next_recovery_public),
            derive_commitment(next_public),
            patches,
        )
        return request, keys

    if operation_type == "deactivate":
        request = generator.create_deactivate_operation_request(DID_SUFFIX, "unused-recovery-reveal-value", recovery_private)
        return request, keys

    raise ValueError(operation_type)


@pytest.fixture
def make_request():
    return build_request
