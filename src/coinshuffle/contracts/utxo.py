"""
Connectors for the UTXO ledger contract.

Two capability tiers share one read interface:

* `Connector` reads contract state. It has no `transfer` method at all, so
  asking a read-only connector to transfer is an `AttributeError` at run
  time and a type error for static checkers.
* `SignerConnector` additionally signs and submits `transfer` transactions.

Connectors hold no mutable state. Every operation is a single remote call
with no caching and no retries, so one instance can serve concurrent
callers and several connectors may share a transport.

A connector built from a URL owns its transport and closes it in `close()`
or on leaving `async with`. A transport passed to `with_transport` stays
open; its owner closes it.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from hexbytes import HexBytes

from coinshuffle.contracts import iutxo
from coinshuffle.contracts.errors import LengthQueryFailed, QueryFailed, TransferFailed
from coinshuffle.contracts.revert import is_revert_reason
from coinshuffle.contracts.transport import (
    SigningTransport,
    Transport,
    Web3SigningTransport,
    Web3Transport,
    parse_address,
    parse_private_key,
    parse_service_url,
)
from coinshuffle.core.models.utxo import Input, Output, Utxo

logger = logging.getLogger(__name__)


class Contract(ABC):
    """Read operations of the UTXO contract."""

    @abstractmethod
    async def get_utxo_by_id(self, utxo_id: int) -> Optional[Utxo]:
        """Fetch a UTXO by ID, or None if the contract does not know it."""

    @abstractmethod
    async def list_utxos_by_address(self, address: str, offset: int, limit: int) -> List[Utxo]:
        """Fetch one page of the UTXOs owned by `address`."""

    @abstractmethod
    async def utxo_length(self) -> int:
        """Total number of UTXOs tracked by the contract."""


class SigningContract(Contract):
    """Read operations plus transfers."""

    @abstractmethod
    async def transfer(self, inputs: List[Input], outputs: List[Output]) -> HexBytes:
        """Consume `inputs` and create `outputs`, returning the transaction hash."""


class Connector(Contract):
    """Read-only connector to a deployed UTXO contract."""

    def __init__(self, address: str, transport: Transport, owns_transport: bool = False):
        self.address = address
        self.transport = transport
        self.owns_transport = owns_transport

    @classmethod
    def from_raw(cls, rpc_url: str, address: str) -> "Connector":
        """Build a connector from user-supplied strings.

        Args:
            rpc_url: JSON-RPC endpoint, http or https
            address: Hex address of the UTXO contract

        Raises:
            InvalidServiceURL: If `rpc_url` is not a valid endpoint URL
            InvalidAddress: If `address` is not a valid address
        """
        address = parse_address(address)
        rpc_url = parse_service_url(rpc_url)
        return cls.new(rpc_url, address)

    @classmethod
    def new(cls, rpc_url: str, address: str) -> "Connector":
        """Build a connector from an already validated URL and address."""
        return cls(address, Web3Transport.from_url(rpc_url), owns_transport=True)

    @classmethod
    def with_transport(cls, address: str, transport: Transport) -> "Connector":
        """Build a connector over an existing, possibly shared, transport."""
        return cls(parse_address(address), transport)

    async def get_utxo_by_id(self, utxo_id: int) -> Optional[Utxo]:
        """Fetch a UTXO by ID.

        Returns:
            Optional[Utxo]: The UTXO, or None when the contract reverted
            with `UTXONotFound`

        Raises:
            QueryFailed: On any other failure
        """
        try:
            call = iutxo.GET_UTXO_BY_ID.encode_call(utxo_id)
            data = await self.transport.call(self.address, call)
            (raw,) = iutxo.GET_UTXO_BY_ID.decode_output(data)
        except Exception as err:
            if is_revert_reason(err, iutxo.UTXO_NOT_FOUND.selector):
                logger.debug(f"UTXO {utxo_id} not found in {self.address}")
                return None
            raise QueryFailed("get utxo by id", err) from err
        return Utxo.from_abi(raw)

    async def list_utxos_by_address(self, address: str, offset: int, limit: int) -> List[Utxo]:
        """Fetch one page of the UTXOs owned by `address`.

        A page past the end of the set is empty, not an error.

        Raises:
            InvalidAddress: If `address` is not a valid address
            QueryFailed: If the call fails
        """
        owner = parse_address(address)
        try:
            call = iutxo.LIST_UTXOS_BY_ADDRESS.encode_call(owner, offset, limit)
            data = await self.transport.call(self.address, call)
            (raw_utxos,) = iutxo.LIST_UTXOS_BY_ADDRESS.decode_output(data)
        except Exception as err:
            raise QueryFailed("list utxos", err) from err
        return [Utxo.from_abi(raw) for raw in raw_utxos]

    async def utxo_length(self) -> int:
        """Total number of UTXOs tracked by the contract.

        The count is not a snapshot shared with later list calls; the set may
        change between the two.

        Raises:
            LengthQueryFailed: If the call fails
        """
        try:
            call = iutxo.GET_UTXOS_LENGTH.encode_call()
            data = await self.transport.call(self.address, call)
            (length,) = iutxo.GET_UTXOS_LENGTH.decode_output(data)
        except Exception as err:
            raise LengthQueryFailed(err) from err
        return length

    async def close(self) -> None:
        """Close the transport if this connector created it."""
        if self.owns_transport:
            await self.transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(address={self.address!r})"


class SignerConnector(Connector, SigningContract):
    """Connector that can also submit transfers."""

    def __init__(self, address: str, transport: SigningTransport, owns_transport: bool = False):
        super().__init__(address, transport, owns_transport)
        self.transport: SigningTransport = transport

    @classmethod
    def with_priv_key(cls, rpc_url: str, address: str, priv_key: str) -> "SignerConnector":
        """Build a signing connector from user-supplied strings.

        Raises:
            InvalidAddress: If `address` is not a valid address
            InvalidServiceURL: If `rpc_url` is not a valid endpoint URL
            InvalidPrivateKey: If `priv_key` cannot be parsed
        """
        address = parse_address(address)
        rpc_url = parse_service_url(rpc_url)
        account = parse_private_key(priv_key)
        return cls(address, Web3SigningTransport.from_url(rpc_url, account), owns_transport=True)

    @classmethod
    def with_transport(cls, address: str, transport: SigningTransport) -> "SignerConnector":
        return cls(parse_address(address), transport)

    async def transfer(self, inputs: List[Input], outputs: List[Output]) -> HexBytes:
        """Spend `inputs` into `outputs`.

        Inputs and outputs are passed to the contract as given; the contract
        validates signatures, ownership and amounts.

        Returns:
            HexBytes: Hash of the submitted transaction. It has been accepted
            by the node, not necessarily mined.

        Raises:
            TransferFailed: If the transaction cannot be submitted
        """
        try:
            call = iutxo.TRANSFER.encode_call(
                [i.to_abi() for i in inputs],
                [o.to_abi() for o in outputs],
            )
            return await self.transport.send(self.address, call)
        except Exception as err:
            raise TransferFailed(err) from err
