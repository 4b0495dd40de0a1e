from config.settings.protocol import ProtocolParameters, get_protocol_parameters
from src.core.error_codes import ErrorCode
from src.dids.operations.models import DeactivateOperation, DeactivateSignedData, OperationType
from src.dids.operations.schema import (
    OperationSchema,
    parse_json,
    parse_signed_data,
    parse_signed_data_payload,
    validate_operation_object,
)

DEACTIVATE_SCHEMA = OperationSchema(
    operation_type=OperationType.DEACTIVATE,
    error_prefix="DEACTIVATE_OPERATION",
    properties=frozenset({"type", "did_suffix", "recovery_reveal_value", "signed_data"}),
    did_suffix_property="did_suffix",
    reveal_value_property="recovery_reveal_value",
    signed_claims=frozenset({"did_suffix", "recovery_reveal_value"}),
)


def parse_deactivate_signed_data(
    encoded_payload: str, expected_did_suffix: str, expected_recovery_reveal_value: str
) -> DeactivateSignedData:
    payload = parse_signed_data_payload(
        DEACTIVATE_SCHEMA, encoded_payload, expected_did_suffix, expected_recovery_reveal_value
    )
    return DeactivateSignedData(**payload)


def deactivate_operation_from_object(
    operation: dict, operation_buffer: bytes, parameters: ProtocolParameters
) -> DeactivateOperation:
    validate_operation_object(DEACTIVATE_SCHEMA, operation, parameters)
    did_suffix = operation["did_suffix"]
    reveal_value = operation["recovery_reveal_value"]

    signed_data = parse_signed_data(DEACTIVATE_SCHEMA, operation["signed_data"])
    signed_data_payload = parse_deactivate_signed_data(signed_data.payload, did_suffix, reveal_value)

    return DeactivateOperation(
        did_unique_suffix=did_suffix,
        reveal_value=reveal_value,
        signed_data=signed_data,
        signed_data_payload=signed_data_payload,
        operation_buffer=bytes(operation_buffer),
    )


def parse_deactivate_operation(
    operation_buffer: bytes, parameters: ProtocolParameters | None = None
) -> DeactivateOperation:
    parameters = parameters or get_protocol_parameters()
    operation = parse_json(operation_buffer, ErrorCode.NOT_JSON)
    return deactivate_operation_from_object(operation, operation_buffer, parameters)
