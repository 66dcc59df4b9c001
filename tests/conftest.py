"""
Pytest configuration for coinshuffle tests.

Sets up the Python path and provides an in-memory stand-in for the UTXO
contract that speaks the same ABI as the deployed one.
"""

import os
import sys
from typing import List, Tuple

import pytest
from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from eth_utils import keccak
from hexbytes import HexBytes

# Add the src directory to the Python path to help with imports
src_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if src_root not in sys.path:
    sys.path.insert(0, src_root)

from coinshuffle.contracts import iutxo  # noqa: E402
from coinshuffle.contracts.revert import ContractRevert  # noqa: E402
from coinshuffle.contracts.transport import SigningTransport  # noqa: E402

CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
TOKEN_ADDRESS = "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512"
OWNER_ADDRESS = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
OTHER_ADDRESS = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"
SENDER_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
GANACHE_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"


class FakeUtxoContract(SigningTransport):
    """In-memory UTXO contract reached through the transport interface.

    UTXO IDs are indexes into `utxos`; unknown IDs revert with
    `UTXONotFound(id)` like the real contract.
    """

    def __init__(self, token: str = TOKEN_ADDRESS, sender: str = SENDER_ADDRESS):
        self.token = token
        self.sender = sender
        self.utxos: List[Tuple[int, str, int, str, bool]] = []
        self.sent = 0

    @property
    def address(self) -> str:
        return self.sender

    def mint(self, amount: int, owner: str) -> int:
        utxo_id = len(self.utxos)
        self.utxos.append((utxo_id, self.token, amount, owner, False))
        return utxo_id

    def _not_found(self, utxo_id: int) -> ContractRevert:
        return ContractRevert(iutxo.UTXO_NOT_FOUND.selector + abi_encode(["uint256"], [utxo_id]))

    async def call(self, to: str, data: bytes) -> bytes:
        sel, args = data[:4], data[4:]

        if sel == iutxo.GET_UTXO_BY_ID.selector:
            (utxo_id,) = abi_decode(iutxo.GET_UTXO_BY_ID.inputs, args)
            if utxo_id >= len(self.utxos):
                raise self._not_found(utxo_id)
            return abi_encode(iutxo.GET_UTXO_BY_ID.outputs, [self.utxos[utxo_id]])

        if sel == iutxo.LIST_UTXOS_BY_ADDRESS.selector:
            owner, offset, limit = abi_decode(iutxo.LIST_UTXOS_BY_ADDRESS.inputs, args)
            owned = [u for u in self.utxos if u[3].lower() == owner.lower()]
            return abi_encode(iutxo.LIST_UTXOS_BY_ADDRESS.outputs, [owned[offset:offset + limit]])

        if sel == iutxo.GET_UTXOS_LENGTH.selector:
            return abi_encode(iutxo.GET_UTXOS_LENGTH.outputs, [len(self.utxos)])

        raise ContractRevert(b"")

    async def send(self, to: str, data: bytes) -> HexBytes:
        if data[:4] != iutxo.TRANSFER.selector:
            raise ContractRevert(b"")

        inputs, outputs = abi_decode(iutxo.TRANSFER.inputs, data[4:])
        for utxo_id, _signature in inputs:
            if utxo_id >= len(self.utxos):
                raise self._not_found(utxo_id)
        for utxo_id, _signature in inputs:
            u = self.utxos[utxo_id]
            self.utxos[utxo_id] = (u[0], u[1], u[2], u[3], True)
        for amount, owner in outputs:
            self.mint(amount, owner)

        self.sent += 1
        return HexBytes(keccak(data + self.sent.to_bytes(32, "big")))


@pytest.fixture
def fake_contract():
    """Create an empty in-memory UTXO contract."""
    return FakeUtxoContract()
