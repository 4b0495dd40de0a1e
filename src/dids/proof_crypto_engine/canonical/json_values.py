"""
Strict JSON loading and read-only JSON values.

Everything hashed, signed or compared across implementations goes through
`loads_strict`, so a document has one meaning or none. Parsed values kept on
operation models are frozen with `freeze`: objects become read-only mappings
and arrays become tuples.
"""
import json
from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import AfterValidator, PlainSerializer


def _reject_constant(value: str):
    raise ValueError(f"{value} is not valid JSON")


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict:
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise ValueError(f"duplicate property {key!r}")
        obj[key] = value
    return obj


def loads_strict(raw: bytes | str) -> Any:
    """
    json.loads without NaN/Infinity, without duplicate keys and without
    unbounded nesting. Raises ValueError (UnicodeDecodeError and
    JSONDecodeError included).
    """
    if isinstance(raw, (bytes, bytearray)):
        raw = bytes(raw).decode("utf-8")
    try:
        return json.loads(raw, parse_constant=_reject_constant, object_pairs_hook=_reject_duplicates)
    except RecursionError as e:
        raise ValueError("JSON nested too deeply") from e


def freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Plain dicts and lists again, e.g. for hashing or JSON output."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value


FrozenJsonObject = Annotated[dict[str, Any], AfterValidator(freeze), PlainSerializer(thaw)]
