"""
Typed async client for the coin shuffle UTXO ledger contract.
"""
from coinshuffle.core.models import Input, Output, Utxo
from coinshuffle.contracts.utxo import Connector, Contract, SignerConnector, SigningContract

__version__ = "0.1.0"

__all__ = [
    "Connector",
    "Contract",
    "Input",
    "Output",
    "SignerConnector",
    "SigningContract",
    "Utxo",
]
