"""
Minimal contract bindings built on eth_abi.

Functions and custom errors are described by their name and canonical
parameter types; selectors are derived from the resulting signature.
"""

from typing import Any, Sequence, Tuple

from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode

from coinshuffle.contracts.revert import SELECTOR_LENGTH, selector


class AbiFunction:
    """A contract function with its calldata encoder and return decoder."""

    def __init__(self, name: str, inputs: Sequence[str] = (), outputs: Sequence[str] = ()):
        self.name = name
        self.inputs = list(inputs)
        self.outputs = list(outputs)
        self.signature = f"{name}({','.join(self.inputs)})"
        self.selector = selector(self.signature)

    def encode_call(self, *args: Any) -> bytes:
        """Encode a call: selector followed by the ABI-encoded arguments."""
        if len(args) != len(self.inputs):
            raise TypeError(
                f"{self.signature} takes {len(self.inputs)} arguments, got {len(args)}"
            )
        return self.selector + abi_encode(self.inputs, list(args))

    def decode_output(self, data: bytes) -> Tuple[Any, ...]:
        return abi_decode(self.outputs, data)

    def __repr__(self) -> str:
        return f"AbiFunction({self.signature} -> 0x{self.selector.hex()})"


class AbiError:
    """A custom Solidity error."""

    def __init__(self, name: str, inputs: Sequence[str] = ()):
        self.name = name
        self.inputs = list(inputs)
        self.signature = f"{name}({','.join(self.inputs)})"
        self.selector = selector(self.signature)

    def decode_args(self, payload: bytes) -> Tuple[Any, ...]:
        """Decode the error arguments that follow the selector in a revert payload."""
        return abi_decode(self.inputs, payload[SELECTOR_LENGTH:])

    def __repr__(self) -> str:
        return f"AbiError({self.signature} -> 0x{self.selector.hex()})"
