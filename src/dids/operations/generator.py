"""
Builders for well-formed operation requests.

Used by producers of operations (wallets, test fixtures); the parsers never
call into this module.
"""
import json

from config.settings.protocol import ProtocolParameters, get_protocol_parameters
from src.dids.operations.create import compute_did_unique_suffix
from src.dids.operations.delta import compute_delta_hash
from src.dids.operations.models import OperationType
from src.dids.proof_crypto_engine import encoder
from src.dids.proof_crypto_engine.commitments import compute_reveal_value, derive_commitment
from src.dids.proof_crypto_engine.jwk import generate_es256k_key_pair
from src.dids.proof_crypto_engine.jws.prepare import sign_compact


def _dumps(obj) -> str:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def public_jwk_of(private_jwk: dict) -> dict:
    return {k: v for k, v in private_jwk.items() if k != "d"}


def to_operation_buffer(request: dict) -> bytes:
    return _dumps(request).encode("utf-8")


def generate_add_public_keys_patch(public_jwk: dict, key_id: str = "signing-key") -> dict:
    return {
        "action": "add-public-keys",
        "public_keys": [
            {
                "id": key_id,
                "type": "EcdsaSecp256k1VerificationKey2019",
                "jwk": public_jwk,
                "purpose": ["general", "auth"],
            }
        ],
    }


def create_encoded_delta(patches: list[dict], next_update_commitment: str) -> str:
    return encoder.encode(_dumps({"patches": patches, "update_commitment": next_update_commitment}))


def create_create_operation_request(
    recovery_public_jwk: dict,
    update_public_jwk: dict,
    patches: list[dict],
    parameters: ProtocolParameters | None = None,
) -> dict:
    parameters = parameters or get_protocol_parameters()
    code = parameters.hash_algorithm_in_multihash_code
    delta = create_encoded_delta(patches, derive_commitment(update_public_jwk, code))
    suffix_data = encoder.encode(
        _dumps(
            {
                "delta_hash": compute_delta_hash(delta, parameters),
                "recovery_commitment": derive_commitment(recovery_public_jwk, code),
            }
        )
    )
    return {"type": OperationType.CREATE.value, "suffix_data": suffix_data, "delta": delta}


def generate_create_operation(parameters: ProtocolParameters | None = None) -> dict:
    """
    Fresh keys plus a Create request committing to them.
    Returns the request, the derived DID unique suffix and every key pair.
    """
    parameters = parameters or get_protocol_parameters()
    recovery_public, recovery_private = generate_es256k_key_pair()
    update_public, update_private = generate_es256k_key_pair()
    signing_public, signing_private = generate_es256k_key_pair()

    request = create_create_operation_request(
        recovery_public, update_public, [generate_add_public_keys_patch(signing_public)], parameters
    )
    return {
        "request": request,
        "did_unique_suffix": compute_did_unique_suffix(request["suffix_data"], parameters),
        "recovery_public_key": recovery_public,
        "recovery_private_key": recovery_private,
        "update_public_key": update_public,
        "update_private_key": update_private,
        "signing_public_key": signing_public,
        "signing_private_key": signing_private,
    }


def create_update_operation_request(
    did_suffix: str,
    update_private_jwk: dict,
    next_update_commitment: str,
    patches: list[dict],
    parameters: ProtocolParameters | None = None,
) -> dict:
    parameters = parameters or get_protocol_parameters()
    update_public_jwk = public_jwk_of(update_private_jwk)
    reveal_value = compute_reveal_value(update_public_jwk, parameters.hash_algorithm_in_multihash_code)
    delta = create_encoded_delta(patches, next_update_commitment)
    signed_data = sign_compact(
        {
            "did_suffix": did_suffix,
            "update_reveal_value": reveal_value,
            "update_key": update_public_jwk,
            "delta_hash": compute_delta_hash(delta, parameters),
        },
        update_private_jwk,
    )
    return {
        "type": OperationType.UPDATE.value,
        "did_suffix": did_suffix,
        "update_reveal_value": reveal_value,
        "signed_data": signed_data,
        "delta": delta,
    }


def create_recover_operation_request(
    did_suffix: str,
    recovery_private_jwk: dict,
    next_recovery_commitment: str,
    next_update_commitment: str,
    patches: list[dict],
    parameters: ProtocolParameters | None = None,
) -> dict:
    parameters = parameters or get_protocol_parameters()
    recovery_public_jwk = public_jwk_of(recovery_private_jwk)
    reveal_value = compute_reveal_value(recovery_public_jwk, parameters.hash_algorithm_in_multihash_code)
    delta = create_encoded_delta(patches, next_update_commitment)
    signed_data = sign_compact(
        {
            "did_suffix": did_suffix,
            "recovery_reveal_value": reveal_value,
            "recovery_key": recovery_public_jwk,
            "recovery_commitment": next_recovery_commitment,
            "delta_hash": compute_delta_hash(delta, parameters),
        },
        recovery_private_jwk,
    )
    return {
        "type": OperationType.RECOVER.value,
        "did_suffix": did_suffix,
        "recovery_reveal_value": reveal_value,
        "signed_data": signed_data,
        "delta": delta,
    }


def create_deactivate_operation_request(
    did_suffix: str, recovery_reveal_value: str, recovery_private_jwk: dict
) -> dict:
    signed_data = sign_compact(
        {"did_suffix": did_suffix, "recovery_reveal_value": recovery_reveal_value},
        recovery_private_jwk,
    )
    return {
        "type": OperationType.DEACTIVATE.value,
        "did_suffix": did_suffix,
        "recovery_reveal_value": recovery_reveal_value,
        "signed_data": signed_data,
    }
