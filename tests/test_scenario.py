"""
End-to-end flows against the in-memory UTXO contract.
"""
import pytest

from coinshuffle.contracts.errors import TransferFailed
from coinshuffle.contracts.utxo import Connector, SignerConnector
from coinshuffle.core.models.utxo import Input, Output
from coinshuffle.wallet import Wallet
from conftest import CONTRACT_ADDRESS, OTHER_ADDRESS, OWNER_ADDRESS, TOKEN_ADDRESS


@pytest.mark.asyncio
async def test_missing_utxo_then_transfer_creates_one(fake_contract):
    reader = Connector.with_transport(CONTRACT_ADDRESS, fake_contract)
    signer = SignerConnector.with_transport(CONTRACT_ADDRESS, fake_contract)

    assert await reader.get_utxo_by_id(42) is None

    tx_hash = await signer.transfer([], [Output(amount=100, owner=OWNER_ADDRESS)])
    assert len(tx_hash) == 32

    utxos = await reader.list_utxos_by_address(OWNER_ADDRESS, 0, 10)
    assert len(utxos) == 1
    assert utxos[0].amount == 100
    assert utxos[0].owner == OWNER_ADDRESS
    assert utxos[0].token == TOKEN_ADDRESS
    assert utxos[0].is_spent is False


@pytest.mark.asyncio
async def test_pagination(fake_contract):
    reader = Connector.with_transport(CONTRACT_ADDRESS, fake_contract)

    assert await reader.list_utxos_by_address(OWNER_ADDRESS, 0, 0) == []
    assert await reader.utxo_length() == 0

    for amount in range(1, 6):
        fake_contract.mint(amount, OWNER_ADDRESS)
    fake_contract.mint(99, OTHER_ADDRESS)

    first = await reader.list_utxos_by_address(OWNER_ADDRESS, 0, 2)
    second = await reader.list_utxos_by_address(OWNER_ADDRESS, 2, 2)
    last = await reader.list_utxos_by_address(OWNER_ADDRESS, 4, 2)

    assert [u.amount for u in first + second + last] == [1, 2, 3, 4, 5]
    assert await reader.list_utxos_by_address(OWNER_ADDRESS, 100, 10) == []
    assert await reader.utxo_length() == 6


@pytest.mark.asyncio
async def test_spend_marks_input_spent(fake_contract):
    owner = Wallet.generate()
    utxo_id = fake_contract.mint(100, owner.get_address())
    signer = SignerConnector.with_transport(CONTRACT_ADDRESS, fake_contract)

    signature = owner.sign(utxo_id.to_bytes(32, "big"))
    await signer.transfer(
        [Input(id=utxo_id, signature=signature)],
        [Output(amount=60, owner=OTHER_ADDRESS), Output(amount=40, owner=owner.get_address())],
    )

    spent = await signer.get_utxo_by_id(utxo_id)
    assert spent.is_spent is True

    change = await signer.list_utxos_by_address(owner.get_address(), 0, 10)
    assert [(u.amount, u.is_spent) for u in change] == [(100, True), (40, False)]


@pytest.mark.asyncio
async def test_transfer_of_unknown_input_fails(fake_contract):
    signer = SignerConnector.with_transport(CONTRACT_ADDRESS, fake_contract)

    with pytest.raises(TransferFailed):
        await signer.transfer([Input(id=7, signature=b"")], [Output(amount=1, owner=OWNER_ADDRESS)])
