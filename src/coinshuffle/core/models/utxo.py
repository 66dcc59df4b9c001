"""
Domain types for the UTXO ledger contract.

Each model maps positionally onto the tuple the contract declares in its ABI.
The positional layouts below are the wire contract with the deployed
contract and must change only together with it:

    Utxo    (id, token, amount, owner, is_spent)  (uint256,address,uint256,address,bool)
    Output  (amount, owner)                       (uint256,address)
    Input   (id, signature)                       (uint256,bytes)

A field order mismatch cannot be detected here; it decodes into wrong values.
"""

from typing import Any, Sequence, Tuple

from eth_utils import is_address, to_checksum_address
from hexbytes import HexBytes
from pydantic import BaseModel, ConfigDict, Field, field_validator

UINT256_MAX = 2**256 - 1


def _checksum(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)) and len(value) == 20:
        return to_checksum_address(value)
    if not isinstance(value, str) or not is_address(value):
        raise ValueError(f"not a 20-byte hex address: {value!r}")
    return to_checksum_address(value)


def _unpack(cls_name: str, values: Sequence[Any], arity: int) -> Tuple[Any, ...]:
    values = tuple(values)
    if len(values) != arity:
        raise ValueError(
            f"{cls_name} ABI tuple must have {arity} elements, got {len(values)}"
        )
    return values


class Output(BaseModel):
    """A UTXO to be created by `transfer`."""

    model_config = ConfigDict(frozen=True)

    amount: int = Field(..., ge=0, le=UINT256_MAX, description="Token quantity")
    owner: str = Field(..., description="Owner of the new UTXO")

    @field_validator("owner", mode="before")
    @classmethod
    def validate_owner(cls, value):
        return _checksum(value)

    def to_abi(self) -> Tuple[int, str]:
        return (self.amount, self.owner)

    @classmethod
    def from_abi(cls, values: Sequence[Any]) -> "Output":
        amount, owner = _unpack(cls.__name__, values, 2)
        return cls(amount=amount, owner=owner)


class Input(BaseModel):
    """An existing UTXO to be consumed by `transfer`.

    The signature is opaque to the client: the contract decides what was
    signed and whether it authorizes the spend.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, le=UINT256_MAX, description="ID of the UTXO to spend")
    signature: bytes = Field(..., description="Owner's authorization of the spend")

    @field_validator("signature", mode="before")
    @classmethod
    def validate_signature(cls, value):
        if isinstance(value, str):
            return bytes(HexBytes(value))
        return value

    def to_abi(self) -> Tuple[int, bytes]:
        return (self.id, self.signature)

    @classmethod
    def from_abi(cls, values: Sequence[Any]) -> "Input":
        utxo_id, signature = _unpack(cls.__name__, values, 2)
        return cls(id=utxo_id, signature=bytes(signature))


class Utxo(BaseModel):
    """Snapshot of a UTXO as stored by the contract.

    `is_spent` only ever moves from False to True on the contract side; the
    client never mutates snapshots.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, le=UINT256_MAX, description="Contract-assigned UTXO ID")
    token: str = Field(..., description="Address of the token contract")
    amount: int = Field(..., ge=0, le=UINT256_MAX, description="Token quantity")
    owner: str = Field(..., description="Address that can spend this UTXO")
    is_spent: bool = Field(False, description="Whether the UTXO was consumed")

    @field_validator("token", "owner", mode="before")
    @classmethod
    def validate_addresses(cls, value):
        return _checksum(value)

    def to_abi(self) -> Tuple[int, str, int, str, bool]:
        return (self.id, self.token, self.amount, self.owner, self.is_spent)

    @classmethod
    def from_abi(cls, values: Sequence[Any]) -> "Utxo":
        utxo_id, token, amount, owner, is_spent = _unpack(cls.__name__, values, 5)
        return cls(
            id=utxo_id,
            token=token,
            amount=amount,
            owner=owner,
            is_spent=is_spent,
        )
