from typing import Callable

import structlog

from config.settings.protocol import ProtocolParameters, get_protocol_parameters
from src.core.error_codes import ErrorCode
from src.core.exceptions import OperationError
from src.dids.operations.create import create_operation_from_object
from src.dids.operations.deactivate import deactivate_operation_from_object
from src.dids.operations.models import Operation, OperationType, SignedOperation
from src.dids.operations.recover import recover_operation_from_object
from src.dids.operations.schema import parse_json
from src.dids.operations.update import update_operation_from_object
from src.dids.proof_crypto_engine.jws.verify import verify_signature

logger = structlog.get_logger(__name__)

PARSERS = {
    OperationType.CREATE.value: create_operation_from_object,
    OperationType.UPDATE.value: update_operation_from_object,
    OperationType.RECOVER.value: recover_operation_from_object,
    OperationType.DEACTIVATE.value: deactivate_operation_from_object,
}

SignatureVerifier = Callable[[bytes, bytes, dict], bool]


def _dispatch(operation_buffer: bytes, parameters: ProtocolParameters) -> Operation:
    if len(operation_buffer) > parameters.max_operation_size_in_bytes:
        raise OperationError(
            ErrorCode.OPERATION_EXCEEDS_MAXIMUM_SIZE,
            extra={"size": len(operation_buffer), "max": parameters.max_operation_size_in_bytes},
        )

    operation = parse_json(operation_buffer, ErrorCode.NOT_JSON)
    operation_type = operation.get("type") if isinstance(operation, dict) else None
    parser = PARSERS.get(operation_type) if isinstance(operation_type, str) else None
    if parser is None:
        raise OperationError(ErrorCode.OPERATION_TYPE_MISSING_OR_UNKNOWN)
    return parser(operation, operation_buffer, parameters)


def parse_operation(operation_buffer: bytes, parameters: ProtocolParameters | None = None) -> Operation:
    """
    Parse any operation request into its immutable, validated model.
    Raises OperationError; the rejection is logged once here and never retried.
    """
    parameters = parameters or get_protocol_parameters()
    try:
        operation = _dispatch(operation_buffer, parameters)
    except OperationError as e:
        logger.info("operation_rejected", code=e.code, size=len(operation_buffer), detail=e.extra)
        raise

    logger.debug("operation_parsed", type=operation.type.value, did_suffix=operation.did_unique_suffix)
    return operation


def verify_operation_signature(
    operation: SignedOperation,
    public_key_jwk: dict,
    verifier: SignatureVerifier = verify_signature,
) -> bool:
    """
    Check the operation's JWS against a key resolved by the caller
    (for Update and Recover this is normally `operation.signing_key`).
    """
    jws = operation.signed_data
    return verifier(jws.signing_input, jws.signature_bytes, public_key_jwk)
