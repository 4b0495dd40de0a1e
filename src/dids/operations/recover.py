from config.settings.protocol import ProtocolParameters, get_protocol_parameters
from src.core.error_codes import ErrorCode
from src.core.exceptions import OperationError
from src.dids.operations.delta import check_delta_hash, parse_delta
from src.dids.operations.models import OperationType, RecoverOperation, RecoverSignedData
from src.dids.operations.schema import (
    OperationSchema,
    parse_json,
    parse_signed_data,
    parse_signed_data_payload,
    validate_operation_object,
)
from src.dids.proof_crypto_engine import multihash
from src.dids.proof_crypto_engine.jwk import validate_es256k_public_key

RECOVER_SCHEMA = OperationSchema(
    operation_type=OperationType.RECOVER,
    error_prefix="RECOVER_OPERATION",
    properties=frozenset({"type", "did_suffix", "recovery_reveal_value", "signed_data", "delta"}),
    did_suffix_property="did_suffix",
    reveal_value_property="recovery_reveal_value",
    signed_claims=frozenset(
        {"did_suffix", "recovery_reveal_value", "recovery_key", "recovery_commitment", "delta_hash"}
    ),
)


def parse_recover_signed_data(
    encoded_payload: str,
    expected_did_suffix: str,
    expected_recovery_reveal_value: str,
    parameters: ProtocolParameters | None = None,
) -> RecoverSignedData:
    parameters = parameters or get_protocol_parameters()
    payload = parse_signed_data_payload(
        RECOVER_SCHEMA, encoded_payload, expected_did_suffix, expected_recovery_reveal_value
    )
    validate_es256k_public_key(payload["recovery_key"])
    try:
        multihash.validate_encoded(payload["recovery_commitment"], parameters.hash_algorithm_in_multihash_code)
    except OperationError as e:
        raise OperationError(
            ErrorCode.RECOVER_OPERATION_RECOVERY_COMMITMENT_INVALID, extra={"cause": e.code.value}
        ) from e
    if not isinstance(payload["delta_hash"], str):
        raise OperationError(ErrorCode.RECOVER_OPERATION_DELTA_HASH_MISSING_OR_INVALID_TYPE)
    return RecoverSignedData(**payload)


def recover_operation_from_object(
    operation: dict, operation_buffer: bytes, parameters: ProtocolParameters
) -> RecoverOperation:
    validate_operation_object(RECOVER_SCHEMA, operation, parameters)
    did_suffix = operation["did_suffix"]
    reveal_value = operation["recovery_reveal_value"]

    signed_data = parse_signed_data(RECOVER_SCHEMA, operation["signed_data"])
    signed_data_payload = parse_recover_signed_data(signed_data.payload, did_suffix, reveal_value, parameters)

    delta = parse_delta(operation["delta"], parameters)
    check_delta_hash(
        signed_data_payload.delta_hash, operation["delta"], parameters, ErrorCode.RECOVER_OPERATION_DELTA_HASH_MISMATCH
    )

    return RecoverOperation(
        did_unique_suffix=did_suffix,
        reveal_value=reveal_value,
        signed_data=signed_data,
        signed_data_payload=signed_data_payload,
        encoded_delta=operation["delta"],
        delta=delta,
        operation_buffer=bytes(operation_buffer),
    )


def parse_recover_operation(operation_buffer: bytes, parameters: ProtocolParameters | None = None) -> RecoverOperation:
    parameters = parameters or get_protocol_parameters()
    operation = parse_json(operation_buffer, ErrorCode.NOT_JSON)
    return recover_operation_from_object(operation, operation_buffer, parameters)
