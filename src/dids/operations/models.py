from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

from src.dids.proof_crypto_engine.canonical.json_values import FrozenJsonObject, thaw
from src.dids.proof_crypto_engine.jws.compact import Jws


class OperationType(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    RECOVER = "recover"
    DEACTIVATE = "deactivate"


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Delta(FrozenModel):
    patches: tuple[FrozenJsonObject, ...]
    update_commitment: str


class SuffixData(FrozenModel):
    delta_hash: str
    recovery_commitment: str


class UpdateSignedData(FrozenModel):
    did_suffix: str
    update_reveal_value: str
    update_key: FrozenJsonObject
    delta_hash: str


class RecoverSignedData(FrozenModel):
    did_suffix: str
    recovery_reveal_value: str
    recovery_key: FrozenJsonObject
    recovery_commitment: str
    delta_hash: str


class DeactivateSignedData(FrozenModel):
    did_suffix: str
    recovery_reveal_value: str


class CreateOperation(FrozenModel):
    type: Literal[OperationType.CREATE] = OperationType.CREATE
    did_unique_suffix: str
    encoded_suffix_data: str
    suffix_data: SuffixData
    encoded_delta: str
    delta: Delta
    operation_buffer: bytes


class UpdateOperation(FrozenModel):
    type: Literal[OperationType.UPDATE] = OperationType.UPDATE
    did_unique_suffix: str
    reveal_value: str
    signed_data: Jws
    signed_data_payload: UpdateSignedData
    encoded_delta: str
    delta: Delta
    operation_buffer: bytes

    @property
    def signing_key(self) -> dict[str, str]:
        return thaw(self.signed_data_payload.update_key)


class RecoverOperation(FrozenModel):
    type: Literal[OperationType.RECOVER] = OperationType.RECOVER
    did_unique_suffix: str
    reveal_value: str
    signed_data: Jws
    signed_data_payload: RecoverSignedData
    encoded_delta: str
    delta: Delta
    operation_buffer: bytes

    @property
    def signing_key(self) -> dict[str, str]:
        return thaw(self.signed_data_payload.recovery_key)


class DeactivateOperation(FrozenModel):
    type: Literal[OperationType.DEACTIVATE] = OperationType.DEACTIVATE
    did_unique_suffix: str
    reveal_value: str
    signed_data: Jws
    signed_data_payload: DeactivateSignedData
    operation_buffer: bytes


Operation = Union[CreateOperation, UpdateOperation, RecoverOperation, DeactivateOperation]
SignedOperation = Union[UpdateOperation, RecoverOperation, DeactivateOperation]
