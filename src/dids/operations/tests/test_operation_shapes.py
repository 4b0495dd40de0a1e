import pytest

from src.core.error_codes import ErrorCode
from src.core.exceptions import OperationError
from src.dids.operations.create import parse_create_operation
from src.dids.operations.deactivate import parse_deactivate_operation
from src.dids.operations.generator import to_operation_buffer
from src.dids.operations.recover import parse_recover_operation
from src.dids.operations.update import parse_update_operation

PARSERS = {
    "create": parse_create_operation,
    "update": parse_update_operation,
    "recover": parse_recover_operation,
    "deactivate": parse_deactivate_operation,
}
REVEAL_VALUE_PROPERTIES = {
    "update": "update_reveal_value",
    "recover": "recovery_reveal_value",
    "deactivate": "recovery_reveal_value",
}
SIGNED_OPERATION_TYPES = list(REVEAL_VALUE_PROPERTIES)
NON_STRINGS = [123, 1.5, True, None, {}, {"a": "b"}, [], ["abc"]]


def code(operation_type: str, name: str) -> ErrorCode:
    return ErrorCode[f"{operation_type.upper()}_OPERATION_{name}"]


def parse_error(operation_type: str, request: dict) -> ErrorCode:
    with pytest.raises(OperationError) as exc:
        PARSERS[operation_type](to_operation_buffer(request))
    return exc.value.code


def insert_at(request: dict, position: int, key: str, value) -> dict:
    items = list(request.items())
    items.insert(position, (key, value))
    return dict(items)


@pytest.mark.parametrize("operation_type", list(PARSERS))
def test_exact_property_sets(operation_type, make_request):
    request, _ = make_request(operation_type)
    expected = {
        "create": {"type", "suffix_data", "delta"},
        "update": {"type", "did_suffix", "update_reveal_value", "signed_data", "delta"},
        "recover": {"type", "did_suffix", "recovery_reveal_value", "signed_data", "delta"},
        "deactivate": {"type", "did_suffix", "recovery_reveal_value", "signed_data"},
    }[operation_type]
    assert set(request) == expected
    PARSERS[operation_type](to_operation_buffer(request))


@pytest.mark.parametrize("operation_type", list(PARSERS))
def test_unknown_property_rejected_at_every_position(operation_type, make_request):
    request, _ = make_request(operation_type)
    for position in range(len(request) + 1):
        mutated = insert_at(request, position, "unknown_property", "unknown property value")
        assert parse_error(operation_type, mutated) is code(operation_type, "MISSING_OR_UNKNOWN_PROPERTY")


@pytest.mark.parametrize("operation_type", list(PARSERS))
def test_each_missing_property_rejected(operation_type, make_request):
    request, _ = make_request(operation_type)
    for name in request:
        mutated = {k: v for k, v in request.items() if k != name}
        assert parse_error(operation_type, mutated) is code(operation_type, "MISSING_OR_UNKNOWN_PROPERTY")


@pytest.mark.parametrize("operation_type", list(PARSERS))
def test_non_object_json_rejected(operation_type):
    with pytest.raises(OperationError) as exc:
        PARSERS[operation_type](b'["type", "create"]')
    assert exc.value.code is code(operation_type, "MISSING_OR_UNKNOWN_PROPERTY")


@pytest.mark.parametrize("operation_type", list(PARSERS))
@pytest.mark.parametrize("buffer", [b"", b"{", b"\xff\xfe", b'{"type": NaN}', b'{"type": "a", "type": "b"}'])
def test_not_json_rejected(operation_type, buffer):
    with pytest.raises(OperationError) as exc:
        PARSERS[operation_type](buffer)
    assert exc.value.code is ErrorCode.NOT_JSON


@pytest.mark.parametrize(
    "operation_type, other_type",
    [(a, b) for a in PARSERS for b in list(PARSERS) + ["Deactivate", "", None, 1] if a != b],
)
def test_type_of_another_variant_rejected(operation_type, other_type, make_request):
    request, _ = make_request(operation_type)
    request["type"] = other_type
    assert parse_error(operation_type, request) is code(operation_type, "TYPE_INCORRECT")


@pytest.mark.parametrize("operation_type", SIGNED_OPERATION_TYPES)
@pytest.mark.parametrize("value", NON_STRINGS)
def test_non_string_did_suffix_rejected(operation_type, value, make_request):
    request, _ = make_request(operation_type)
    request["did_suffix"] = value
    assert parse_error(operation_type, request) is code(operation_type, "MISSING_OR_INVALID_DID_UNIQUE_SUFFIX")


@pytest.mark.parametrize("operation_type", SIGNED_OPERATION_TYPES)
@pytest.mark.parametrize("value", NON_STRINGS)
def test_non_string_reveal_value_rejected(operation_type, value, make_request):
    request, _ = make_request(operation_type)
    prop = REVEAL_VALUE_PROPERTIES[operation_type]
    request[prop] = value
    assert parse_error(operation_type, request) is code(operation_type, f"{prop.upper()}_MISSING_OR_INVALID_TYPE")


@pytest.mark.parametrize("operation_type", SIGNED_OPERATION_TYPES)
@pytest.mark.parametrize("length", [51, 140, 150, 1000])
def test_too_long_reveal_value_rejected(operation_type, length, make_request):
    request, _ = make_request(operation_type)
    prop = REVEAL_VALUE_PROPERTIES[operation_type]
    request[prop] = "r" * length
    assert parse_error(operation_type, request) is code(operation_type, f"{prop.upper()}_TOO_LONG")


@pytest.mark.parametrize("operation_type", SIGNED_OPERATION_TYPES)
def test_reveal_value_at_maximum_length_passes_bound_check(operation_type, make_request):
    request, _ = make_request(operation_type)
    prop = REVEAL_VALUE_PROPERTIES[operation_type]
    request[prop] = "r" * 50
    # reaches the signed-data cross-check, which the unsigned edit cannot satisfy
    assert parse_error(operation_type, request) is code(operation_type, f"SIGNED_{prop.upper()}_MISMATCH")


@pytest.mark.parametrize("operation_type", SIGNED_OPERATION_TYPES)
def test_did_suffix_differing_from_signed_claim_rejected(operation_type, make_request):
    request, _ = make_request(operation_type)
    request["did_suffix"] = "EiAnotherDidUniqueSuffix"
    assert parse_error(operation_type, request) is code(operation_type, "SIGNED_DID_UNIQUE_SUFFIX_MISMATCH")


@pytest.mark.parametrize("operation_type", SIGNED_OPERATION_TYPES)
def test_signed_data_that_is_not_a_jws_rejected(operation_type, make_request):
    request, _ = make_request(operation_type)
    request["signed_data"] = request["signed_data"] + ".extra"
    assert parse_error(operation_type, request) is code(operation_type, "SIGNED_DATA_MISSING_OR_INVALID")
