import logging
from pathlib import Path

import dotenv
import typer
from pydantic import ValidationError

from coinshuffle.cli import utxo as utxo_commands
from coinshuffle.cli import wallet as wallet_commands
from coinshuffle.core.config import load_config_from_env

app = typer.Typer()


@app.callback()
def main(
    env_file: Path = typer.Option(Path(".env"), help="Environment file to load if present"),
):
    """Coin shuffle CLI - query and spend UTXOs held by the UTXO contract."""
    if env_file.exists():
        dotenv.load_dotenv(env_file)

    try:
        settings = load_config_from_env()
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            typer.echo(f"❌ Invalid configuration for {field}: {error['msg']}")
        raise typer.Exit(1)

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


app.add_typer(
    wallet_commands.wallet_app,
    name="wallet",
    help="Manage the local signing wallet",
)
app.add_typer(
    utxo_commands.utxo_app,
    name="utxo",
    help="Query and transfer UTXOs",
)
app.add_typer(
    utxo_commands.erc20_app,
    name="erc20",
    help="Token approvals for the UTXO contract",
)

if __name__ == "__main__":
    app()
