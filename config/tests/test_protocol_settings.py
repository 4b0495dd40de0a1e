import logging

import pytest
from environ.compat import ImproperlyConfigured

from config.settings.protocol import (
    ProtocolParameters,
    get_protocol_parameters,
    protocol_parameters_from_env,
)


@pytest.fixture(autouse=True)
def clear_cache():
    get_protocol_parameters.cache_clear()
    yield
    get_protocol_parameters.cache_clear()


def test_defaults(monkeypatch):
    for name in (
        "HASH_ALGORITHM_IN_MULTIHASH_CODE",
        "MAX_ENCODED_REVEAL_VALUE_LENGTH",
        "MAX_OPERATION_SIZE_IN_BYTES",
        "MAX_DELTA_SIZE_IN_BYTES",
    ):
        monkeypatch.delenv(name, raising=False)

    assert get_protocol_parameters() == ProtocolParameters(
        hash_algorithm_in_multihash_code=18,
        max_encoded_reveal_value_length=50,
        max_operation_size_in_bytes=2500,
        max_delta_size_in_bytes=1000,
    )


def test_environment_override_is_logged(monkeypatch, caplog):
    monkeypatch.setenv("MAX_OPERATION_SIZE_IN_BYTES", "4000")
    with caplog.at_level(logging.INFO, logger="config.env"):
        parameters = protocol_parameters_from_env()
    assert parameters.max_operation_size_in_bytes == 4000
    assert "MAX_OPERATION_SIZE_IN_BYTES" in caplog.text


def test_parameters_are_cached(monkeypatch):
    first = get_protocol_parameters()
    monkeypatch.setenv("MAX_DELTA_SIZE_IN_BYTES", "10")
    assert get_protocol_parameters() is first
    get_protocol_parameters.cache_clear()
    assert get_protocol_parameters().max_delta_size_in_bytes == 10


@pytest.mark.parametrize("value", ["0", "-1", "abc"])
def test_rejects_non_positive_or_non_integer(monkeypatch, value):
    monkeypatch.setenv("MAX_DELTA_SIZE_IN_BYTES", value)
    with pytest.raises(ImproperlyConfigured):
        protocol_parameters_from_env()


def test_rejects_unsupported_hash_algorithm(monkeypatch):
    monkeypatch.setenv("HASH_ALGORITHM_IN_MULTIHASH_CODE", "20")
    with pytest.raises(ImproperlyConfigured):
        protocol_parameters_from_env()


def test_parameters_are_immutable():
    with pytest.raises(AttributeError):
        ProtocolParameters().max_delta_size_in_bytes = 1


def test_rejects_reveal_bound_shorter_than_sha512_reveal_value(monkeypatch):
    monkeypatch.setenv("HASH_ALGORITHM_IN_MULTIHASH_CODE", "19")
    monkeypatch.delenv("MAX_ENCODED_REVEAL_VALUE_LENGTH", raising=False)
    with pytest.raises(ImproperlyConfigured):
        protocol_parameters_from_env()


def test_accepts_sha512_with_matching_reveal_bound(monkeypatch):
    monkeypatch.setenv("HASH_ALGORITHM_IN_MULTIHASH_CODE", "19")
    monkeypatch.setenv("MAX_ENCODED_REVEAL_VALUE_LENGTH", "88")
    parameters = protocol_parameters_from_env()
    assert parameters.hash_algorithm_in_multihash_code == 19
    assert parameters.max_encoded_reveal_value_length == 88
