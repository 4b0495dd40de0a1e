from dataclasses import dataclass
from functools import lru_cache

from environ.compat import ImproperlyConfigured

from config.env import env_positive_int

# Multihash code for sha2-256. Hashes produced by this node always use it.
DEFAULT_HASH_ALGORITHM_IN_MULTIHASH_CODE = 18
DEFAULT_MAX_ENCODED_REVEAL_VALUE_LENGTH = 50
DEFAULT_MAX_OPERATION_SIZE_IN_BYTES = 2500
DEFAULT_MAX_DELTA_SIZE_IN_BYTES = 1000
# Length of an encoded multihash (reveal value or commitment) per supported code:
# sha2-256 is 2 + 32 bytes, sha2-512 is 2 + 64 bytes, base64url without padding.
ENCODED_MULTIHASH_LENGTHS = {18: 46, 19: 88}


@dataclass(frozen=True)
class ProtocolParameters:
    hash_algorithm_in_multihash_code: int = DEFAULT_HASH_ALGORITHM_IN_MULTIHASH_CODE
    max_encoded_reveal_value_length: int = DEFAULT_MAX_ENCODED_REVEAL_VALUE_LENGTH
    max_operation_size_in_bytes: int = DEFAULT_MAX_OPERATION_SIZE_IN_BYTES
    max_delta_size_in_bytes: int = DEFAULT_MAX_DELTA_SIZE_IN_BYTES


def protocol_parameters_from_env() -> ProtocolParameters:
    parameters = ProtocolParameters(
        hash_algorithm_in_multihash_code=env_positive_int(
            "HASH_ALGORITHM_IN_MULTIHASH_CODE", DEFAULT_HASH_ALGORITHM_IN_MULTIHASH_CODE
        ),
        max_encoded_reveal_value_length=env_positive_int(
            "MAX_ENCODED_REVEAL_VALUE_LENGTH", DEFAULT_MAX_ENCODED_REVEAL_VALUE_LENGTH
        ),
        max_operation_size_in_bytes=env_positive_int(
            "MAX_OPERATION_SIZE_IN_BYTES", DEFAULT_MAX_OPERATION_SIZE_IN_BYTES
        ),
        max_delta_size_in_bytes=env_positive_int(
            "MAX_DELTA_SIZE_IN_BYTES", DEFAULT_MAX_DELTA_SIZE_IN_BYTES
        ),
    )
    code = parameters.hash_algorithm_in_multihash_code
    if code not in ENCODED_MULTIHASH_LENGTHS:
        raise ImproperlyConfigured(f"Unsupported multihash code {code}")
    if parameters.max_encoded_reveal_value_length < ENCODED_MULTIHASH_LENGTHS[code]:
        raise ImproperlyConfigured(
            f"MAX_ENCODED_REVEAL_VALUE_LENGTH={parameters.max_encoded_reveal_value_length} is shorter than "
            f"a reveal value for multihash code {code} ({ENCODED_MULTIHASH_LENGTHS[code]})"
        )
    return parameters


@lru_cache(maxsize=1)
def get_protocol_parameters() -> ProtocolParameters:
    """
    Protocol parameters for this process.
    Cached; call get_protocol_parameters.cache_clear() after changing the environment.
    """
    return protocol_parameters_from_env()
