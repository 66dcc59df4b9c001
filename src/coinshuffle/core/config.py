from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class CoinShuffleConfig(BaseModel):
    """Configuration for the coin shuffle tools.

    The connectors never read this implicitly; the CLI and callers pass the
    values in when building them.
    """
    # RPC Configuration
    rpc_url: str = Field(
        default="http://localhost:8545",
        description="JSON-RPC endpoint of the chain"
    )

    # Contract Configuration
    utxo_contract_address: Optional[str] = Field(
        default=None,
        description="Address of the deployed UTXO contract"
    )
    token_address: Optional[str] = Field(
        default=None,
        description="Address of the ERC-20 token held in UTXOs"
    )

    # Signing Configuration
    private_key: Optional[str] = Field(
        default=None,
        description="Hex private key used for transactions; overrides the wallet file",
        repr=False,
    )
    wallet_path: Path = Field(
        default=Path.home() / ".coinshuffle" / "wallet.json",
        description="Path to the wallet file"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Log level for the CLI"
    )

    @field_validator('rpc_url')
    def validate_rpc_url(cls, value):
        """Validate the RPC URL has an http(s) scheme."""
        if not value.startswith(("http://", "https://")):
            raise ValueError("RPC URL must start with http:// or https://")
        return value

    @field_validator('log_level')
    def validate_log_level(cls, value):
        """Validate the log level is a standard logging level name."""
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    model_config = {
        "env_prefix": "COINSHUFFLE_",
        "arbitrary_types_allowed": True,
        "validate_assignment": True,
    }


# Global config instance with default values
config = CoinShuffleConfig()

def load_config_from_env() -> CoinShuffleConfig:
    """Load configuration from environment variables.

    Returns:
        CoinShuffleConfig: Configuration instance with values from environment
    """
    import os

    env_settings = {}

    env_mappings = {
        "COINSHUFFLE_RPC_URL": "rpc_url",
        "COINSHUFFLE_UTXO_CONTRACT_ADDRESS": "utxo_contract_address",
        "COINSHUFFLE_TOKEN_ADDRESS": "token_address",
        "COINSHUFFLE_PRIVATE_KEY": "private_key",
        "COINSHUFFLE_WALLET_PATH": "wallet_path",
        "COINSHUFFLE_LOG_LEVEL": "log_level",
    }

    for env_var, field_name in env_mappings.items():
        if env_var in os.environ:
            value = os.environ[env_var]

            if field_name == "wallet_path":
                value = Path(value)

            env_settings[field_name] = value

    return CoinShuffleConfig(**env_settings)
