from config.settings.protocol import ProtocolParameters, get_protocol_parameters
from src.core.error_codes import ErrorCode
from src.core.exceptions import OperationError
from src.dids.operations.delta import check_delta_hash, parse_delta
from src.dids.operations.models import CreateOperation, OperationType, SuffixData
from src.dids.operations.schema import (
    OperationSchema,
    decode_json_segment,
    parse_json,
    require_exact_properties,
    validate_operation_object,
)
from src.dids.proof_crypto_engine import multihash

CREATE_SCHEMA = OperationSchema(
    operation_type=OperationType.CREATE,
    error_prefix="CREATE_OPERATION",
    properties=frozenset({"type", "suffix_data", "delta"}),
)
SUFFIX_DATA_PROPERTIES = frozenset({"delta_hash", "recovery_commitment"})


def compute_did_unique_suffix(encoded_suffix_data: str, parameters: ProtocolParameters) -> str:
    """The DID unique suffix is the hash of the suffix data exactly as it appears on the wire."""
    return multihash.hash_then_encode(
        encoded_suffix_data.encode("ascii"), parameters.hash_algorithm_in_multihash_code
    )


def parse_suffix_data(encoded_suffix_data, parameters: ProtocolParameters) -> SuffixData:
    if not isinstance(encoded_suffix_data, str):
        raise OperationError(ErrorCode.CREATE_OPERATION_SUFFIX_DATA_MISSING_OR_INVALID)
    suffix_data = decode_json_segment(encoded_suffix_data, ErrorCode.CREATE_OPERATION_SUFFIX_DATA_MISSING_OR_INVALID)
    require_exact_properties(
        suffix_data, SUFFIX_DATA_PROPERTIES, ErrorCode.CREATE_OPERATION_SUFFIX_DATA_MISSING_OR_UNKNOWN_PROPERTY
    )

    if not isinstance(suffix_data["delta_hash"], str):
        raise OperationError(ErrorCode.CREATE_OPERATION_DELTA_HASH_MISSING_OR_INVALID_TYPE)
    try:
        multihash.validate_encoded(suffix_data["recovery_commitment"], parameters.hash_algorithm_in_multihash_code)
    except OperationError as e:
        raise OperationError(
            ErrorCode.CREATE_OPERATION_RECOVERY_COMMITMENT_INVALID, extra={"cause": e.code.value}
        ) from e
    return SuffixData(**suffix_data)


def create_operation_from_object(
    operation: dict, operation_buffer: bytes, parameters: ProtocolParameters
) -> CreateOperation:
    validate_operation_object(CREATE_SCHEMA, operation, parameters)

    encoded_suffix_data = operation["suffix_data"]
    suffix_data = parse_suffix_data(encoded_suffix_data, parameters)
    delta = parse_delta(operation["delta"], parameters)
    check_delta_hash(
        suffix_data.delta_hash, operation["delta"], parameters, ErrorCode.CREATE_OPERATION_DELTA_HASH_MISMATCH
    )

    return CreateOperation(
        did_unique_suffix=compute_did_unique_suffix(encoded_suffix_data, parameters),
        encoded_suffix_data=encoded_suffix_data,
        suffix_data=suffix_data,
        encoded_delta=operation["delta"],
        delta=delta,
        operation_buffer=bytes(operation_buffer),
    )


def parse_create_operation(operation_buffer: bytes, parameters: ProtocolParameters | None = None) -> CreateOperation:
    parameters = parameters or get_protocol_parameters()
    operation = parse_json(operation_buffer, ErrorCode.NOT_JSON)
    return create_operation_from_object(operation, operation_buffer, parameters)
