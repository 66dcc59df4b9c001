"""
Tests for selector computation and revert discrimination.
"""
import pytest
from eth_abi import encode as abi_encode

from coinshuffle.contracts import iutxo
from coinshuffle.contracts.abi import AbiError, AbiFunction
from coinshuffle.contracts.revert import ContractRevert, is_revert_reason, revert_data, selector


class _Web3StyleError(Exception):
    def __init__(self, data):
        super().__init__("execution reverted")
        self.data = data


def test_selector_matches_known_signatures():
    assert selector("transfer(address,uint256)") == bytes.fromhex("a9059cbb")
    assert selector("approve(address,uint256)") == bytes.fromhex("095ea7b3")
    assert selector("Error(string)") == bytes.fromhex("08c379a0")


def test_error_and_function_selectors_use_the_same_construction():
    assert AbiError("Foo", ["uint256"]).selector == AbiFunction("Foo", ["uint256"]).selector
    assert iutxo.UTXO_NOT_FOUND.signature == "UTXONotFound(uint256)"


class TestIsRevertReason:
    """Tests for is_revert_reason."""

    not_found = iutxo.UTXO_NOT_FOUND.selector

    def test_matching_selector_with_arguments(self):
        payload = self.not_found + abi_encode(["uint256"], [42])
        assert is_revert_reason(ContractRevert(payload), self.not_found)

    def test_matching_selector_alone(self):
        assert is_revert_reason(ContractRevert(self.not_found), self.not_found)

    def test_matching_selector_with_arbitrary_trailing_bytes(self):
        assert is_revert_reason(ContractRevert(self.not_found + b"\xff" * 3), self.not_found)

    def test_different_selector(self):
        payload = selector("Error(string)") + abi_encode(["string"], ["utxo not found"])
        assert not is_revert_reason(ContractRevert(payload), self.not_found)

    @pytest.mark.parametrize("length", [0, 1, 2, 3])
    def test_short_payload_never_matches(self, length):
        assert not is_revert_reason(ContractRevert(self.not_found[:length]), self.not_found)

    def test_non_revert_error_never_matches(self):
        assert not is_revert_reason(ConnectionError("refused"), self.not_found)
        assert not is_revert_reason(_Web3StyleError(self.not_found), self.not_found)

    def test_message_text_is_ignored(self):
        err = ContractRevert(b"", message="UTXONotFound")
        assert not is_revert_reason(err, self.not_found)


def test_revert_data_normalization():
    assert revert_data(_Web3StyleError("0x08c379a0")) == bytes.fromhex("08c379a0")
    assert revert_data(_Web3StyleError(b"\x01\x02")) == b"\x01\x02"
    assert revert_data(_Web3StyleError(None)) is None
    assert revert_data(_Web3StyleError("not hex")) is None
    assert revert_data(ValueError("no data attribute")) is None


def test_contract_revert_keeps_payload():
    err = ContractRevert(bytearray(b"\xab\xcd"))
    assert err.data == b"\xab\xcd"
    assert "0xabcd" in str(err)


class TestAbiBindings:
    """Tests for the AbiFunction / AbiError descriptors."""

    def test_encode_call_prefixes_selector(self):
        call = iutxo.GET_UTXO_BY_ID.encode_call(42)
        assert call[:4] == iutxo.GET_UTXO_BY_ID.selector
        assert call[4:] == abi_encode(["uint256"], [42])

    def test_encode_call_without_arguments(self):
        assert iutxo.GET_UTXOS_LENGTH.encode_call() == iutxo.GET_UTXOS_LENGTH.selector

    def test_encode_call_checks_arity(self):
        with pytest.raises(TypeError):
            iutxo.GET_UTXO_BY_ID.encode_call()

    def test_decode_output(self):
        assert iutxo.GET_UTXOS_LENGTH.decode_output(abi_encode(["uint256"], [9])) == (9,)

    def test_error_decode_args(self):
        payload = iutxo.UTXO_NOT_FOUND.selector + abi_encode(["uint256"], [42])
        assert iutxo.UTXO_NOT_FOUND.decode_args(payload) == (42,)

    def test_function_signatures(self):
        assert iutxo.LIST_UTXOS_BY_ADDRESS.signature == "listUTXOsByAddress(address,uint256,uint256)"
        assert iutxo.TRANSFER.signature == "transfer((uint256,bytes)[],(uint256,address)[])"
