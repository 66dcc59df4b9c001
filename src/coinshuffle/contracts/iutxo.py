"""
Bindings for the IUTXO contract interface.

Tuple layouts mirror `Utxo`, `Input` and `Output` in
`coinshuffle.core.models.utxo`; both sides must follow the deployed
contract's declarations.
"""

from coinshuffle.contracts.abi import AbiError, AbiFunction

UTXO_TUPLE = "(uint256,address,uint256,address,bool)"
INPUT_TUPLE = "(uint256,bytes)"
OUTPUT_TUPLE = "(uint256,address)"

GET_UTXO_BY_ID = AbiFunction("getUTXOById", ["uint256"], [UTXO_TUPLE])

LIST_UTXOS_BY_ADDRESS = AbiFunction(
    "listUTXOsByAddress",
    ["address", "uint256", "uint256"],
    [f"{UTXO_TUPLE}[]"],
)

GET_UTXOS_LENGTH = AbiFunction("getUTXOsLength", [], ["uint256"])

TRANSFER = AbiFunction("transfer", [f"{INPUT_TUPLE}[]", f"{OUTPUT_TUPLE}[]"])

UTXO_NOT_FOUND = AbiError("UTXONotFound", ["uint256"])
