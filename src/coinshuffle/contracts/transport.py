"""
JSON-RPC transport for contract calls.

The connectors only need two capabilities from the chain: an `eth_call`
returning raw return data, and (for the signing tier) submitting a state
changing transaction. Reverts are normalized into `ContractRevert` so the
connectors can inspect the payload; every other failure propagates as the
underlying web3/aiohttp exception.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, NoReturn
from urllib.parse import urlparse

from eth_account import Account
from eth_account.signers.local import LocalAccount
from hexbytes import HexBytes
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3
from web3.exceptions import ContractLogicError

from coinshuffle.contracts.errors import InvalidAddress, InvalidPrivateKey, InvalidServiceURL
from coinshuffle.contracts.revert import ContractRevert, revert_data

logger = logging.getLogger(__name__)

SUPPORTED_URL_SCHEMES = ("http", "https")


def parse_address(value: str) -> str:
    """Parse a 20-byte hex address.

    Returns:
        str: EIP-55 checksummed address

    Raises:
        InvalidAddress: If the value is not a valid address
    """
    if not isinstance(value, str) or not Web3.is_address(value):
        raise InvalidAddress(value)
    return Web3.to_checksum_address(value)


def parse_service_url(value: str) -> str:
    """Validate an RPC endpoint URL.

    Raises:
        InvalidServiceURL: If the value is not an absolute http(s) URL
    """
    if not isinstance(value, str) or any(c.isspace() for c in value):
        raise InvalidServiceURL(value)
    try:
        parsed = urlparse(value)
    except ValueError as exc:
        raise InvalidServiceURL(value) from exc
    if parsed.scheme not in SUPPORTED_URL_SCHEMES or not parsed.netloc:
        raise InvalidServiceURL(value)
    return value


def parse_private_key(value: str) -> LocalAccount:
    """Load a secp256k1 private key given as hex.

    Raises:
        InvalidPrivateKey: If the key cannot be parsed
    """
    try:
        return Account.from_key(value)
    except Exception as exc:
        raise InvalidPrivateKey(type(exc).__name__) from exc


def _raise_revert(exc: ContractLogicError) -> NoReturn:
    message = exc.args[0] if exc.args and isinstance(exc.args[0], str) else "execution reverted"
    raise ContractRevert(revert_data(exc) or b"", message) from exc


class Transport(ABC):
    """Read access to contracts."""

    @abstractmethod
    async def call(self, to: str, data: bytes) -> bytes:
        """Execute a read-only call.

        Raises:
            ContractRevert: If the contract reverted
        """

    async def close(self) -> None:
        """Release connections held by the transport."""


class SigningTransport(Transport):
    """Read access plus submission of signed transactions."""

    @property
    @abstractmethod
    def address(self) -> str:
        """Address of the account signing transactions."""

    @abstractmethod
    async def send(self, to: str, data: bytes) -> HexBytes:
        """Sign and submit a transaction, returning its hash once accepted.

        Raises:
            ContractRevert: If the transaction reverts during gas estimation
        """


class Web3Transport(Transport):
    """Transport over a web3 `AsyncWeb3` instance."""

    def __init__(self, w3: AsyncWeb3):
        self.w3 = w3

    @classmethod
    def from_url(cls, rpc_url: str) -> "Web3Transport":
        return cls(AsyncWeb3(AsyncHTTPProvider(rpc_url)))

    async def call(self, to: str, data: bytes) -> bytes:
        logger.debug(f"eth_call to={to} selector=0x{data[:4].hex()}")
        try:
            result = await self.w3.eth.call({"to": to, "data": HexBytes(data)})
        except ContractLogicError as exc:
            _raise_revert(exc)
        return bytes(result)

    async def close(self) -> None:
        await self.w3.provider.disconnect()
        logger.debug("Disconnected web3 provider")


class Web3SigningTransport(Web3Transport, SigningTransport):
    """Web3 transport that signs transactions with a local account."""

    def __init__(self, w3: AsyncWeb3, account: LocalAccount):
        super().__init__(w3)
        self.account = account

    @classmethod
    def from_url(cls, rpc_url: str, account: LocalAccount) -> "Web3SigningTransport":
        return cls(AsyncWeb3(AsyncHTTPProvider(rpc_url)), account)

    @property
    def address(self) -> str:
        return self.account.address

    async def send(self, to: str, data: bytes) -> HexBytes:
        tx: Dict[str, Any] = {"to": to, "data": HexBytes(data)}

        try:
            tx["gas"] = await self.w3.eth.estimate_gas({**tx, "from": self.address})
        except ContractLogicError as exc:
            _raise_revert(exc)

        tx["nonce"] = await self.w3.eth.get_transaction_count(self.address, "pending")
        tx["chainId"] = await self.w3.eth.chain_id
        tx["gasPrice"] = await self.w3.eth.gas_price

        signed = self.account.sign_transaction(tx)
        tx_hash = await self.w3.eth.send_raw_transaction(signed.raw_transaction)

        logger.info(
            f"Submitted transaction 0x{bytes(tx_hash).hex()} from {self.address} to {to}"
        )
        return HexBytes(tx_hash)
