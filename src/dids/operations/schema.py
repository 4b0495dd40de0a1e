"""
Shared skeleton for the four operation parsers.

Each operation type is described by an OperationSchema: its literal `type`,
the exact set of outer properties, the property carrying the reveal value
and the exact set of signed claims. The functions below run the checks
common to all types, in order, and raise the type-specific ErrorCode.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from config.settings.protocol import ProtocolParameters
from src.core.error_codes import ErrorCode
from src.core.exceptions import OperationError
from src.dids.operations.models import OperationType
from src.dids.proof_crypto_engine import encoder
from src.dids.proof_crypto_engine.canonical.json_values import loads_strict
from src.dids.proof_crypto_engine.jws.compact import Jws, parse_compact_jws


@dataclass(frozen=True)
class OperationSchema:
    operation_type: OperationType
    error_prefix: str
    properties: frozenset[str]
    did_suffix_property: str | None = None
    reveal_value_property: str | None = None
    signed_claims: frozenset[str] = frozenset()

    def error(self, name: str) -> ErrorCode:
        return ErrorCode[f"{self.error_prefix}_{name}"]

    @property
    def reveal_value_error_stem(self) -> str:
        return self.reveal_value_property.upper()


def parse_json(raw: bytes | str, code: ErrorCode) -> Any:
    try:
        return loads_strict(raw)
    except ValueError as e:
        raise OperationError(code, extra={"reason": str(e)}) from e


def decode_json_segment(encoded, code: ErrorCode) -> Any:
    """Codec-decode `encoded` and parse it as JSON; any failure raises `code`."""
    try:
        return loads_strict(encoder.decode(encoded))
    except OperationError as e:
        raise OperationError(code, extra={"cause": e.code.value}) from e
    except ValueError as e:
        raise OperationError(code, extra={"reason": str(e)}) from e


def require_exact_properties(obj: Any, expected: frozenset[str], code: ErrorCode) -> dict:
    if not isinstance(obj, dict):
        raise OperationError(code, message="not a JSON object")
    difference = set(obj) ^ expected
    if difference:
        raise OperationError(
            code,
            extra={
                "unknown": sorted(set(obj) - expected),
                "missing": sorted(expected - set(obj)),
            },
        )
    return obj


def validate_reveal_value(schema: OperationSchema, value: Any, parameters: ProtocolParameters) -> str:
    stem = schema.reveal_value_error_stem
    if not isinstance(value, str):
        raise OperationError(schema.error(f"{stem}_MISSING_OR_INVALID_TYPE"))
    # the reveal value is an opaque encoded string here, so its encoded length is what is bounded
    if len(value) > parameters.max_encoded_reveal_value_length:
        raise OperationError(
            schema.error(f"{stem}_TOO_LONG"),
            extra={"length": len(value), "max": parameters.max_encoded_reveal_value_length},
        )
    return value


def parse_operation_object(
    schema: OperationSchema, operation_buffer: bytes, parameters: ProtocolParameters
) -> dict:
    """
    Steps common to every operation type: JSON, exact property set, type literal,
    DID suffix and reveal value. Returns the decoded object.
    """
    operation = parse_json(operation_buffer, ErrorCode.NOT_JSON)
    return validate_operation_object(schema, operation, parameters)


def validate_operation_object(schema: OperationSchema, operation: Any, parameters: ProtocolParameters) -> dict:
    require_exact_properties(operation, schema.properties, schema.error("MISSING_OR_UNKNOWN_PROPERTY"))

    if operation["type"] != schema.operation_type.value:
        raise OperationError(schema.error("TYPE_INCORRECT"), extra={"type": operation["type"]})

    if schema.did_suffix_property is not None and not isinstance(operation[schema.did_suffix_property], str):
        raise OperationError(schema.error("MISSING_OR_INVALID_DID_UNIQUE_SUFFIX"))

    if schema.reveal_value_property is not None:
        validate_reveal_value(schema, operation[schema.reveal_value_property], parameters)
    return operation


def parse_signed_data(schema: OperationSchema, value: Any) -> Jws:
    try:
        return parse_compact_jws(value)
    except OperationError as e:
        raise OperationError(
            schema.error("SIGNED_DATA_MISSING_OR_INVALID"), extra={"cause": e.code.value}
        ) from e


def parse_signed_data_payload(
    schema: OperationSchema,
    encoded_payload: str,
    expected_did_suffix: str,
    expected_reveal_value: str,
) -> dict:
    """
    Decode the signed claims, require exactly the schema's claim set and check
    that the claims repeated from the unsigned envelope are identical to it.
    Signature verification is left to the caller.
    """
    payload = decode_json_segment(encoded_payload, schema.error("SIGNED_DATA_MISSING_OR_INVALID"))
    require_exact_properties(
        payload, schema.signed_claims, schema.error("SIGNED_DATA_MISSING_OR_UNKNOWN_PROPERTY")
    )

    if payload["did_suffix"] != expected_did_suffix:
        raise OperationError(schema.error("SIGNED_DID_UNIQUE_SUFFIX_MISMATCH"))

    if payload[schema.reveal_value_property] != expected_reveal_value:
        raise OperationError(schema.error(f"SIGNED_{schema.reveal_value_error_stem}_MISMATCH"))
    return payload
