"""
Bindings for the subset of IERC20 used alongside the UTXO contract.
"""

from coinshuffle.contracts.abi import AbiFunction

APPROVE = AbiFunction("approve", ["address", "uint256"], ["bool"])
