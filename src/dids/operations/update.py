from config.settings.protocol import ProtocolParameters, get_protocol_parameters
from src.core.error_codes import ErrorCode
from src.core.exceptions import OperationError
from src.dids.operations.delta import check_delta_hash, parse_delta
from src.dids.operations.models import OperationType, UpdateOperation, UpdateSignedData
from src.dids.operations.schema import (
    OperationSchema,
    parse_json,
    parse_signed_data,
    parse_signed_data_payload,
    validate_operation_object,
)
from src.dids.proof_crypto_engine.jwk import validate_es256k_public_key

UPDATE_SCHEMA = OperationSchema(
    operation_type=OperationType.UPDATE,
    error_prefix="UPDATE_OPERATION",
    properties=frozenset({"type", "did_suffix", "update_reveal_value", "signed_data", "delta"}),
    did_suffix_property="did_suffix",
    reveal_value_property="update_reveal_value",
    signed_claims=frozenset({"did_suffix", "update_reveal_value", "update_key", "delta_hash"}),
)


def parse_update_signed_data(
    encoded_payload: str, expected_did_suffix: str, expected_update_reveal_value: str
) -> UpdateSignedData:
    payload = parse_signed_data_payload(
        UPDATE_SCHEMA, encoded_payload, expected_did_suffix, expected_update_reveal_value
    )
    validate_es256k_public_key(payload["update_key"])
    if not isinstance(payload["delta_hash"], str):
        raise OperationError(ErrorCode.UPDATE_OPERATION_DELTA_HASH_MISSING_OR_INVALID_TYPE)
    return UpdateSignedData(**payload)


def update_operation_from_object(
    operation: dict, operation_buffer: bytes, parameters: ProtocolParameters
) -> UpdateOperation:
    validate_operation_object(UPDATE_SCHEMA, operation, parameters)
    did_suffix = operation["did_suffix"]
    reveal_value = operation["update_reveal_value"]

    signed_data = parse_signed_data(UPDATE_SCHEMA, operation["signed_data"])
    signed_data_payload = parse_update_signed_data(signed_data.payload, did_suffix, reveal_value)

    delta = parse_delta(operation["delta"], parameters)
    check_delta_hash(
        signed_data_payload.delta_hash, operation["delta"], parameters, ErrorCode.UPDATE_OPERATION_DELTA_HASH_MISMATCH
    )

    return UpdateOperation(
        did_unique_suffix=did_suffix,
        reveal_value=reveal_value,
        signed_data=signed_data,
        signed_data_payload=signed_data_payload,
        encoded_delta=operation["delta"],
        delta=delta,
        operation_buffer=bytes(operation_buffer),
    )


def parse_update_operation(operation_buffer: bytes, parameters: ProtocolParameters | None = None) -> UpdateOperation:
    parameters = parameters or get_protocol_parameters()
    operation = parse_json(operation_buffer, ErrorCode.NOT_JSON)
    return update_operation_from_object(operation, operation_buffer, parameters)
