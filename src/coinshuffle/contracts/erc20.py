"""
ERC-20 connector used to let the UTXO contract pull tokens.
"""

import logging

from coinshuffle.contracts import ierc20
from coinshuffle.contracts.errors import ApproveFailed
from coinshuffle.contracts.transport import (
    SigningTransport,
    Web3SigningTransport,
    parse_address,
    parse_private_key,
    parse_service_url,
)

logger = logging.getLogger(__name__)


class Erc20Connector:
    """Signing connector to an ERC-20 token contract."""

    def __init__(self, address: str, transport: SigningTransport, owns_transport: bool = False):
        self.address = address
        self.transport = transport
        self.owns_transport = owns_transport

    @classmethod
    def with_priv_key(cls, rpc_url: str, address: str, priv_key: str) -> "Erc20Connector":
        address = parse_address(address)
        rpc_url = parse_service_url(rpc_url)
        account = parse_private_key(priv_key)
        return cls(address, Web3SigningTransport.from_url(rpc_url, account), owns_transport=True)

    @classmethod
    def with_transport(cls, address: str, transport: SigningTransport) -> "Erc20Connector":
        return cls(parse_address(address), transport)

    def approve_calldata(self, spender: str, value: int) -> bytes:
        """Encode an `approve(spender, value)` call without sending it."""
        return ierc20.APPROVE.encode_call(parse_address(spender), value)

    async def approve(self, spender: str, value: int) -> bool:
        """Allow `spender` to transfer up to `value` tokens of the signer.

        Returns:
            bool: True once the node accepted the approval transaction

        Raises:
            InvalidAddress: If `spender` is not a valid address
            ApproveFailed: If the transaction cannot be submitted
        """
        spender = parse_address(spender)
        try:
            call = ierc20.APPROVE.encode_call(spender, value)
            tx_hash = await self.transport.send(self.address, call)
        except Exception as err:
            raise ApproveFailed(err) from err
        logger.info(f"Approved {spender} for {value} on {self.address}: 0x{bytes(tx_hash).hex()}")
        return True

    async def close(self) -> None:
        """Close the transport if this connector created it."""
        if self.owns_transport:
            await self.transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
