"""
Errors raised by the contract connectors.

Construction errors come from parsing user-supplied strings and are never
retried. Call errors wrap the transport's exception unchanged in `cause`
(and `__cause__`); a revert surfaces there as `ContractRevert`.
"""

from typing import Optional


class ContractError(Exception):
    """Base exception for all connector errors."""

    pass


class ConstructionError(ContractError):
    """Base exception for errors raised while building a connector."""

    pass


class InvalidAddress(ConstructionError):
    """Exception raised when an address is not 20 bytes of hex."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"failed to parse address: {value!r}")


class InvalidServiceURL(ConstructionError):
    """Exception raised when the RPC endpoint is not a valid http(s) URL."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"failed to parse service url: {value!r}")


class InvalidPrivateKey(ConstructionError):
    """Exception raised when a private key cannot be parsed.

    The offending value is not included in the message.
    """

    def __init__(self, reason: Optional[str] = None):
        message = "failed to parse private key"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CallFailed(ContractError):
    """Base exception for a failed remote call.

    Attributes:
        cause: The exception raised by the transport, untouched
    """

    action = "call contract"

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"failed to {self.action}: {cause}")


class QueryFailed(CallFailed):
    """Exception raised when a read call fails for any reason other than
    the contract reporting a missing UTXO."""

    def __init__(self, operation: str, cause: BaseException):
        self.operation = operation
        self.action = operation
        super().__init__(cause)


class TransferFailed(CallFailed):
    """Exception raised when the transfer transaction fails."""

    action = "do transfer"


class LengthQueryFailed(CallFailed):
    """Exception raised when the UTXO count cannot be read."""

    action = "get utxos length"


class ApproveFailed(CallFailed):
    """Exception raised when an ERC-20 approval fails."""

    action = "approve"
