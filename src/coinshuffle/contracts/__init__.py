"""
Contract connectors for the coin shuffle UTXO ledger.

This package provides the typed connectors, the transports they run on and
the errors they raise.
"""
from coinshuffle.contracts.erc20 import Erc20Connector
from coinshuffle.contracts.errors import (
    ApproveFailed,
    CallFailed,
    ConstructionError,
    ContractError,
    InvalidAddress,
    InvalidPrivateKey,
    InvalidServiceURL,
    LengthQueryFailed,
    QueryFailed,
    TransferFailed,
)
from coinshuffle.contracts.revert import ContractRevert, is_revert_reason, selector
from coinshuffle.contracts.transport import (
    SigningTransport,
    Transport,
    Web3SigningTransport,
    Web3Transport,
)
from coinshuffle.contracts.utxo import Connector, Contract, SignerConnector, SigningContract

__all__ = [
    "ApproveFailed",
    "CallFailed",
    "Connector",
    "ConstructionError",
    "Contract",
    "ContractError",
    "ContractRevert",
    "Erc20Connector",
    "InvalidAddress",
    "InvalidPrivateKey",
    "InvalidServiceURL",
    "LengthQueryFailed",
    "QueryFailed",
    "SignerConnector",
    "SigningContract",
    "SigningTransport",
    "TransferFailed",
    "Transport",
    "Web3SigningTransport",
    "Web3Transport",
    "is_revert_reason",
    "selector",
]
