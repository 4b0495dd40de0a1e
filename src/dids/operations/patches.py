from functools import lru_cache
from importlib import resources
import json

import jsonschema
from jsonschema.exceptions import best_match

from src.core.error_codes import ErrorCode
from src.core.exceptions import OperationError

PATCH_ACTIONS = (
    "replace",
    "add-public-keys",
    "remove-public-keys",
    "add-service-endpoints",
    "remove-service-endpoints",
)


@lru_cache(maxsize=1)
def _load_patch_schema() -> dict:
    with resources.files("src.dids.operations").joinpath("schemas/document_patches.schema.json").open("rb") as f:
        return json.load(f)


@lru_cache(maxsize=len(PATCH_ACTIONS))
def _validator_for(action: str) -> jsonschema.Draft202012Validator:
    defs = _load_patch_schema()["$defs"]
    return jsonschema.Draft202012Validator({"$ref": f"#/$defs/{action}", "$defs": defs})


def validate_document_patch(patch) -> None:
    if not isinstance(patch, dict) or patch.get("action") not in PATCH_ACTIONS:
        action = patch.get("action") if isinstance(patch, dict) else None
        raise OperationError(
            ErrorCode.DOCUMENT_PATCH_MISSING_OR_UNKNOWN_ACTION,
            extra={"action": action if isinstance(action, str) else None},
        )

    error = best_match(_validator_for(patch["action"]).iter_errors(patch))
    if error is not None:
        raise OperationError(
            ErrorCode.DOCUMENT_PATCH_INVALID,
            extra={"action": patch["action"], "reason": error.message, "path": list(error.absolute_path)},
        )


def validate_document_patches(patches) -> None:
    if not isinstance(patches, list):
        raise OperationError(ErrorCode.DELTA_PATCHES_NOT_ARRAY)
    for patch in patches:
        validate_document_patch(patch)
