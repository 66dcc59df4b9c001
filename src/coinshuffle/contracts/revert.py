"""
Revert payload handling.

Custom Solidity errors are ABI encoded like function calls: a 4-byte
selector (keccak256 of the error signature) followed by the encoded
arguments. A revert is attributed to a named error by comparing the
payload prefix with that error's selector.
"""

from typing import Any, Optional

from eth_utils import keccak
from hexbytes import HexBytes

SELECTOR_LENGTH = 4


class ContractRevert(Exception):
    """Exception raised by a transport when the contract reverted.

    Attributes:
        data: Raw revert payload, possibly empty
    """

    def __init__(self, data: bytes, message: str = "execution reverted"):
        self.data = bytes(data)
        super().__init__(f"{message} (data=0x{self.data.hex()})")


def selector(signature: str) -> bytes:
    """Compute the 4-byte selector of a function or error signature.

    Args:
        signature: Canonical signature, e.g. "UTXONotFound(uint256)"

    Returns:
        bytes: First four bytes of keccak256(signature)
    """
    return keccak(text=signature)[:SELECTOR_LENGTH]


def revert_data(exc: BaseException) -> Optional[bytes]:
    """Extract the raw revert payload from a web3 contract-logic exception.

    web3 keeps the payload as a hex string in `exc.data`. Returns None when
    the exception carries no usable payload.
    """
    data: Any = getattr(exc, "data", None)
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        try:
            return bytes(HexBytes(data))
        except ValueError:
            return None
    return None


def is_revert_reason(err: BaseException, expected: bytes) -> bool:
    """Check whether `err` is a revert carrying the error with `expected` selector.

    Anything that is not a `ContractRevert`, and payloads shorter than a
    selector, never match.
    """
    if not isinstance(err, ContractRevert):
        return False
    if len(err.data) < SELECTOR_LENGTH:
        return False
    return err.data[:SELECTOR_LENGTH] == expected[:SELECTOR_LENGTH]
