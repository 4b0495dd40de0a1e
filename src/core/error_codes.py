from enum import Enum


class ErrorCode(str, Enum):
    # Codec
    ENCODER_INPUT_NOT_BASE64URL = "ENCODER_INPUT_NOT_BASE64URL"
    ENCODER_INPUT_INVALID_GROUPING = "ENCODER_INPUT_INVALID_GROUPING"

    # Multihash
    MULTIHASH_INVALID = "MULTIHASH_INVALID"
    MULTIHASH_UNSUPPORTED_HASH_ALGORITHM = "MULTIHASH_UNSUPPORTED_HASH_ALGORITHM"

    # JWK
    JWK_ES256K_MISSING_OR_UNKNOWN_PROPERTY = "JWK_ES256K_MISSING_OR_UNKNOWN_PROPERTY"
    JWK_ES256K_MISSING_OR_INVALID_KTY = "JWK_ES256K_MISSING_OR_INVALID_KTY"
    JWK_ES256K_MISSING_OR_INVALID_CRV = "JWK_ES256K_MISSING_OR_INVALID_CRV"
    JWK_ES256K_MISSING_OR_INVALID_X = "JWK_ES256K_MISSING_OR_INVALID_X"
    JWK_ES256K_MISSING_OR_INVALID_Y = "JWK_ES256K_MISSING_OR_INVALID_Y"
    JWK_ES256K_MISSING_OR_INVALID_D = "JWK_ES256K_MISSING_OR_INVALID_D"

    # JWS
    JWS_COMPACT_JWS_NOT_STRING = "JWS_COMPACT_JWS_NOT_STRING"
    JWS_COMPACT_JWS_INVALID = "JWS_COMPACT_JWS_INVALID"
    JWS_PROTECTED_HEADER_NOT_JSON = "JWS_PROTECTED_HEADER_NOT_JSON"
    JWS_PROTECTED_HEADER_MISSING_OR_UNKNOWN_PROPERTY = "JWS_PROTECTED_HEADER_MISSING_OR_UNKNOWN_PROPERTY"
    JWS_PROTECTED_HEADER_MISSING_OR_INCORRECT_ALGORITHM = "JWS_PROTECTED_HEADER_MISSING_OR_INCORRECT_ALGORITHM"
    JWS_PAYLOAD_NOT_BASE64URL = "JWS_PAYLOAD_NOT_BASE64URL"
    JWS_SIGNATURE_NOT_BASE64URL = "JWS_SIGNATURE_NOT_BASE64URL"

    # Operation envelope
    NOT_JSON = "NOT_JSON"
    OPERATION_EXCEEDS_MAXIMUM_SIZE = "OPERATION_EXCEEDS_MAXIMUM_SIZE"
    OPERATION_TYPE_MISSING_OR_UNKNOWN = "OPERATION_TYPE_MISSING_OR_UNKNOWN"

    # Delta and document patches
    DELTA_EXCEEDS_MAXIMUM_SIZE = "DELTA_EXCEEDS_MAXIMUM_SIZE"
    DELTA_MISSING_OR_NOT_JSON_OBJECT = "DELTA_MISSING_OR_NOT_JSON_OBJECT"
    DELTA_MISSING_OR_UNKNOWN_PROPERTY = "DELTA_MISSING_OR_UNKNOWN_PROPERTY"
    DELTA_UPDATE_COMMITMENT_INVALID = "DELTA_UPDATE_COMMITMENT_INVALID"
    DELTA_PATCHES_NOT_ARRAY = "DELTA_PATCHES_NOT_ARRAY"
    DOCUMENT_PATCH_MISSING_OR_UNKNOWN_ACTION = "DOCUMENT_PATCH_MISSING_OR_UNKNOWN_ACTION"
    DOCUMENT_PATCH_INVALID = "DOCUMENT_PATCH_INVALID"

    # Create
    CREATE_OPERATION_MISSING_OR_UNKNOWN_PROPERTY = "CREATE_OPERATION_MISSING_OR_UNKNOWN_PROPERTY"
    CREATE_OPERATION_TYPE_INCORRECT = "CREATE_OPERATION_TYPE_INCORRECT"
    CREATE_OPERATION_SUFFIX_DATA_MISSING_OR_INVALID = "CREATE_OPERATION_SUFFIX_DATA_MISSING_OR_INVALID"
    CREATE_OPERATION_SUFFIX_DATA_MISSING_OR_UNKNOWN_PROPERTY = "CREATE_OPERATION_SUFFIX_DATA_MISSING_OR_UNKNOWN_PROPERTY"
    CREATE_OPERATION_RECOVERY_COMMITMENT_INVALID = "CREATE_OPERATION_RECOVERY_COMMITMENT_INVALID"
    CREATE_OPERATION_DELTA_HASH_MISSING_OR_INVALID_TYPE = "CREATE_OPERATION_DELTA_HASH_MISSING_OR_INVALID_TYPE"
    CREATE_OPERATION_DELTA_HASH_MISMATCH = "CREATE_OPERATION_DELTA_HASH_MISMATCH"

    # Update
    UPDATE_OPERATION_MISSING_OR_UNKNOWN_PROPERTY = "UPDATE_OPERATION_MISSING_OR_UNKNOWN_PROPERTY"
    UPDATE_OPERATION_TYPE_INCORRECT = "UPDATE_OPERATION_TYPE_INCORRECT"
    UPDATE_OPERATION_MISSING_OR_INVALID_DID_UNIQUE_SUFFIX = "UPDATE_OPERATION_MISSING_OR_INVALID_DID_UNIQUE_SUFFIX"
    UPDATE_OPERATION_UPDATE_REVEAL_VALUE_MISSING_OR_INVALID_TYPE = "UPDATE_OPERATION_UPDATE_REVEAL_VALUE_MISSING_OR_INVALID_TYPE"
    UPDATE_OPERATION_UPDATE_REVEAL_VALUE_TOO_LONG = "UPDATE_OPERATION_UPDATE_REVEAL_VALUE_TOO_LONG"
    UPDATE_OPERATION_SIGNED_DATA_MISSING_OR_INVALID = "UPDATE_OPERATION_SIGNED_DATA_MISSING_OR_INVALID"
    UPDATE_OPERATION_SIGNED_DATA_MISSING_OR_UNKNOWN_PROPERTY = "UPDATE_OPERATION_SIGNED_DATA_MISSING_OR_UNKNOWN_PROPERTY"
    UPDATE_OPERATION_SIGNED_DID_UNIQUE_SUFFIX_MISMATCH = "UPDATE_OPERATION_SIGNED_DID_UNIQUE_SUFFIX_MISMATCH"
    UPDATE_OPERATION_SIGNED_UPDATE_REVEAL_VALUE_MISMATCH = "UPDATE_OPERATION_SIGNED_UPDATE_REVEAL_VALUE_MISMATCH"
    UPDATE_OPERATION_DELTA_HASH_MISSING_OR_INVALID_TYPE = "UPDATE_OPERATION_DELTA_HASH_MISSING_OR_INVALID_TYPE"
    UPDATE_OPERATION_DELTA_HASH_MISMATCH = "UPDATE_OPERATION_DELTA_HASH_MISMATCH"

    # Recover
    RECOVER_OPERATION_MISSING_OR_UNKNOWN_PROPERTY = "RECOVER_OPERATION_MISSING_OR_UNKNOWN_PROPERTY"
    RECOVER_OPERATION_TYPE_INCORRECT = "RECOVER_OPERATION_TYPE_INCORRECT"
    RECOVER_OPERATION_MISSING_OR_INVALID_DID_UNIQUE_SUFFIX = "RECOVER_OPERATION_MISSING_OR_INVALID_DID_UNIQUE_SUFFIX"
    RECOVER_OPERATION_RECOVERY_REVEAL_VALUE_MISSING_OR_INVALID_TYPE = "RECOVER_OPERATION_RECOVERY_REVEAL_VALUE_MISSING_OR_INVALID_TYPE"
    RECOVER_OPERATION_RECOVERY_REVEAL_VALUE_TOO_LONG = "RECOVER_OPERATION_RECOVERY_REVEAL_VALUE_TOO_LONG"
    RECOVER_OPERATION_SIGNED_DATA_MISSING_OR_INVALID = "RECOVER_OPERATION_SIGNED_DATA_MISSING_OR_INVALID"
    RECOVER_OPERATION_SIGNED_DATA_MISSING_OR_UNKNOWN_PROPERTY = "RECOVER_OPERATION_SIGNED_DATA_MISSING_OR_UNKNOWN_PROPERTY"
    RECOVER_OPERATION_SIGNED_DID_UNIQUE_SUFFIX_MISMATCH = "RECOVER_OPERATION_SIGNED_DID_UNIQUE_SUFFIX_MISMATCH"
    RECOVER_OPERATION_SIGNED_RECOVERY_REVEAL_VALUE_MISMATCH = "RECOVER_OPERATION_SIGNED_RECOVERY_REVEAL_VALUE_MISMATCH"
    RECOVER_OPERATION_RECOVERY_COMMITMENT_INVALID = "RECOVER_OPERATION_RECOVERY_COMMITMENT_INVALID"
    RECOVER_OPERATION_DELTA_HASH_MISSING_OR_INVALID_TYPE = "RECOVER_OPERATION_DELTA_HASH_MISSING_OR_INVALID_TYPE"
    RECOVER_OPERATION_DELTA_HASH_MISMATCH = "RECOVER_OPERATION_DELTA_HASH_MISMATCH"

    # Deactivate
    DEACTIVATE_OPERATION_MISSING_OR_UNKNOWN_PROPERTY = "DEACTIVATE_OPERATION_MISSING_OR_UNKNOWN_PROPERTY"
    DEACTIVATE_OPERATION_TYPE_INCORRECT = "DEACTIVATE_OPERATION_TYPE_INCORRECT"
    DEACTIVATE_OPERATION_MISSING_OR_INVALID_DID_UNIQUE_SUFFIX = "DEACTIVATE_OPERATION_MISSING_OR_INVALID_DID_UNIQUE_SUFFIX"
    DEACTIVATE_OPERATION_RECOVERY_REVEAL_VALUE_MISSING_OR_INVALID_TYPE = "DEACTIVATE_OPERATION_RECOVERY_REVEAL_VALUE_MISSING_OR_INVALID_TYPE"
    DEACTIVATE_OPERATION_RECOVERY_REVEAL_VALUE_TOO_LONG = "DEACTIVATE_OPERATION_RECOVERY_REVEAL_VALUE_TOO_LONG"
    DEACTIVATE_OPERATION_SIGNED_DATA_MISSING_OR_INVALID = "DEACTIVATE_OPERATION_SIGNED_DATA_MISSING_OR_INVALID"
    DEACTIVATE_OPERATION_SIGNED_DATA_MISSING_OR_UNKNOWN_PROPERTY = "DEACTIVATE_OPERATION_SIGNED_DATA_MISSING_OR_UNKNOWN_PROPERTY"
    DEACTIVATE_OPERATION_SIGNED_DID_UNIQUE_SUFFIX_MISMATCH = "DEACTIVATE_OPERATION_SIGNED_DID_UNIQUE_SUFFIX_MISMATCH"
    DEACTIVATE_OPERATION_SIGNED_RECOVERY_REVEAL_VALUE_MISMATCH = "DEACTIVATE_OPERATION_SIGNED_RECOVERY_REVEAL_VALUE_MISMATCH"
