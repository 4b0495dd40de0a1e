from config.settings.protocol import ProtocolParameters
from src.core.error_codes import ErrorCode
from src.core.exceptions import OperationError
from src.dids.operations.models import Delta
from src.dids.operations.patches import validate_document_patches
from src.dids.operations.schema import decode_json_segment, require_exact_properties
from src.dids.proof_crypto_engine import multihash

DELTA_PROPERTIES = frozenset({"patches", "update_commitment"})


def parse_delta(encoded_delta, parameters: ProtocolParameters) -> Delta:
    if not isinstance(encoded_delta, str):
        raise OperationError(ErrorCode.DELTA_MISSING_OR_NOT_JSON_OBJECT)
    if len(encoded_delta) > parameters.max_delta_size_in_bytes:
        raise OperationError(
            ErrorCode.DELTA_EXCEEDS_MAXIMUM_SIZE,
            extra={"size": len(encoded_delta), "max": parameters.max_delta_size_in_bytes},
        )

    delta = decode_json_segment(encoded_delta, ErrorCode.DELTA_MISSING_OR_NOT_JSON_OBJECT)
    if not isinstance(delta, dict):
        raise OperationError(ErrorCode.DELTA_MISSING_OR_NOT_JSON_OBJECT)
    require_exact_properties(delta, DELTA_PROPERTIES, ErrorCode.DELTA_MISSING_OR_UNKNOWN_PROPERTY)

    try:
        multihash.validate_encoded(delta["update_commitment"], parameters.hash_algorithm_in_multihash_code)
    except OperationError as e:
        raise OperationError(ErrorCode.DELTA_UPDATE_COMMITMENT_INVALID, extra={"cause": e.code.value}) from e

    validate_document_patches(delta["patches"])
    return Delta(patches=tuple(delta["patches"]), update_commitment=delta["update_commitment"])


def compute_delta_hash(encoded_delta: str, parameters: ProtocolParameters) -> str:
    return multihash.hash_then_encode(encoded_delta.encode("ascii"), parameters.hash_algorithm_in_multihash_code)


def check_delta_hash(delta_hash, encoded_delta: str, parameters: ProtocolParameters, mismatch: ErrorCode) -> None:
    if delta_hash != compute_delta_hash(encoded_delta, parameters):
        raise OperationError(mismatch)
