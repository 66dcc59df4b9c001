"""
UTXO contract CLI commands.

Connection settings come from COINSHUFFLE_* environment variables (or a
.env file); the signing key from COINSHUFFLE_PRIVATE_KEY or the wallet.
"""

import asyncio
import typer
from typing import List, Optional

from coinshuffle.contracts.erc20 import Erc20Connector
from coinshuffle.contracts.errors import ContractError
from coinshuffle.contracts.utxo import Connector, SignerConnector
from coinshuffle.core.config import CoinShuffleConfig, load_config_from_env
from coinshuffle.core.models.utxo import Input, Output, Utxo
from coinshuffle.cli.wallet import load_wallet

utxo_app = typer.Typer()
erc20_app = typer.Typer()


def _require(value: Optional[str], env_var: str) -> str:
    if not value:
        typer.echo(f"❌ {env_var} is not set")
        raise typer.Exit(1)
    return value


def _private_key(settings: CoinShuffleConfig) -> str:
    if settings.private_key:
        return settings.private_key
    return load_wallet(path=str(settings.wallet_path)).private_key_hex()


def _run(connector, operation):
    """Run `operation(connector)` and close the connector afterwards."""

    async def run():
        async with connector:
            return await operation(connector)

    try:
        return asyncio.run(run())
    except ContractError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)


def _connector(signing: bool = False):
    settings = load_config_from_env()
    address = _require(settings.utxo_contract_address, "COINSHUFFLE_UTXO_CONTRACT_ADDRESS")
    try:
        if signing:
            return SignerConnector.with_priv_key(settings.rpc_url, address, _private_key(settings))
        return Connector.from_raw(settings.rpc_url, address)
    except ContractError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)


def _echo_utxo(utxo: Utxo, index: Optional[int] = None):
    status = "❌ Spent" if utxo.is_spent else "✅ Unspent"
    prefix = f"  {index}. " if index is not None else ""
    typer.echo(
        f"{prefix}#{utxo.id} - {utxo.amount} of {utxo.token} owned by {utxo.owner} ({status})"
    )


def parse_input(value: str) -> Input:
    """Parse an input given as ID:SIGNATURE_HEX."""
    utxo_id, sep, signature = value.partition(":")
    if not sep:
        raise typer.BadParameter(f"expected ID:SIGNATURE, got {value!r}")
    try:
        return Input(id=int(utxo_id), signature=signature)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def parse_output(value: str) -> Output:
    """Parse an output given as AMOUNT:OWNER."""
    amount, sep, owner = value.partition(":")
    if not sep:
        raise typer.BadParameter(f"expected AMOUNT:OWNER, got {value!r}")
    try:
        return Output(amount=int(amount), owner=owner)
    except ValueError as e:
        raise typer.BadParameter(str(e))


@utxo_app.command("get")
def get_utxo(utxo_id: int = typer.Argument(..., help="UTXO ID")):
    """Show a UTXO by ID."""
    connector = _connector()
    utxo = _run(connector, lambda c: c.get_utxo_by_id(utxo_id))
    if utxo is None:
        typer.echo(f"ℹ️ UTXO {utxo_id} not found")
        raise typer.Exit(1)
    _echo_utxo(utxo)


@utxo_app.command("list")
def list_utxos(
    address: str = typer.Argument(..., help="Owner address"),
    offset: int = typer.Option(0, min=0, help="Index of the first UTXO"),
    limit: int = typer.Option(10, min=0, help="Maximum number of UTXOs"),
):
    """List a page of the UTXOs owned by an address."""
    connector = _connector()
    utxos = _run(connector, lambda c: c.list_utxos_by_address(address, offset, limit))
    if not utxos:
        typer.echo(f"ℹ️ No UTXOs found for address {address}")
        return

    typer.echo(f"📋 UTXOs for address {address}:")
    for i, utxo in enumerate(utxos, offset + 1):
        _echo_utxo(utxo, i)


@utxo_app.command("length")
def utxo_length():
    """Show the total number of UTXOs in the contract."""
    connector = _connector()
    typer.echo(_run(connector, lambda c: c.utxo_length()))


@utxo_app.command("transfer")
def transfer(
    inputs: List[str] = typer.Option([], "--input", help="UTXO to spend as ID:SIGNATURE_HEX"),
    outputs: List[str] = typer.Option([], "--output", help="UTXO to create as AMOUNT:OWNER"),
):
    """Spend UTXOs into new ones."""
    parsed_inputs = [parse_input(value) for value in inputs]
    parsed_outputs = [parse_output(value) for value in outputs]

    connector = _connector(signing=True)
    tx_hash = _run(connector, lambda c: c.transfer(parsed_inputs, parsed_outputs))
    typer.echo(f"✅ Transfer submitted: 0x{bytes(tx_hash).hex()}")


@erc20_app.command("approve")
def approve(
    spender: str = typer.Argument(..., help="Address allowed to spend, usually the UTXO contract"),
    value: int = typer.Argument(..., min=0, help="Allowance in token base units"),
):
    """Approve a spender for the configured token."""
    settings = load_config_from_env()
    token = _require(settings.token_address, "COINSHUFFLE_TOKEN_ADDRESS")
    try:
        connector = Erc20Connector.with_priv_key(settings.rpc_url, token, _private_key(settings))
    except ContractError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)
    _run(connector, lambda c: c.approve(spender, value))
    typer.echo(f"✅ Approved {spender} for {value}")
