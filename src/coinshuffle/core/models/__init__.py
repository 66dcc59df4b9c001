"""
Domain models for the UTXO ledger contract.
"""
from coinshuffle.core.models.utxo import Input, Output, Utxo, UINT256_MAX

__all__ = ["Input", "Output", "Utxo", "UINT256_MAX"]
