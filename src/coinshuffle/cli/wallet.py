"""
Wallet CLI commands.

The wallet holds the secp256k1 key used to sign transfers and input
authorizations.
"""

import os
import typer
from typing import Optional

from coinshuffle.wallet.wallet import Wallet
from coinshuffle.core.config import load_config_from_env

wallet_app = typer.Typer()


def resolve_wallet_path(name: Optional[str] = None, path: Optional[str] = None) -> str:
    """Resolve the wallet file from a name or an explicit path.

    Args:
        name: Optional wallet name, stored beside the default wallet
        path: Optional path to wallet file

    Returns:
        str: Path to the wallet file
    """
    default_path = str(load_config_from_env().wallet_path)
    if path:
        return os.path.expanduser(path)
    if name:
        return os.path.join(os.path.dirname(default_path), f"{name}.json")
    return default_path


def load_wallet(name: Optional[str] = None, path: Optional[str] = None) -> Wallet:
    wallet_path = resolve_wallet_path(name, path)
    if not os.path.exists(wallet_path):
        typer.echo(f"❌ Wallet not found at {wallet_path}")
        raise typer.Exit(1)
    return Wallet.load(wallet_path)


@wallet_app.command("create")
def create_wallet(
    name: Optional[str] = None,
    path: Optional[str] = None,
):
    """Create a new wallet and save it locally."""
    wallet_path = resolve_wallet_path(name, path)

    if os.path.exists(wallet_path):
        typer.echo(f"⚠️  Wallet already exists at {wallet_path}")
        raise typer.Exit(1)

    wallet = Wallet.generate()
    wallet.save(wallet_path)

    typer.echo(f"✅ Wallet created and saved to {wallet_path}")
    typer.echo(f"🔑 Wallet address: {wallet.get_address()}")


@wallet_app.command("address")
def show_address(
    name: Optional[str] = None,
    path: Optional[str] = None,
):
    """Show the address of a wallet."""
    wallet = load_wallet(name, path)
    typer.echo(f"👛 Address: {wallet.get_address()}")


@wallet_app.command("sign")
def sign_message(
    message: str = typer.Argument(..., help="Hex message to sign, e.g. an input authorization"),
    name: Optional[str] = None,
    path: Optional[str] = None,
):
    """Sign a hex message and print the signature as hex."""
    wallet = load_wallet(name, path)
    try:
        payload = bytes.fromhex(message[2:] if message.startswith("0x") else message)
    except ValueError:
        typer.echo("❌ Message must be hex encoded")
        raise typer.Exit(1)
    typer.echo("0x" + wallet.sign(payload).hex())
