import os
import json
from eth_account import Account
from eth_account.signers.local import LocalAccount
from coinshuffle.core.config import config


class Wallet:
    def __init__(self, account: LocalAccount):
        self.account = account

    @classmethod
    def generate(cls) -> "Wallet":
        return cls(Account.create())

    @classmethod
    def from_key(cls, private_key: str) -> "Wallet":
        return cls(Account.from_key(private_key))

    @classmethod
    def load(cls, path: str = None) -> "Wallet":
        if path is None:
            path = str(config.wallet_path)
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_key(data["private_key"])

    def save(self, path: str = None):
        if path is None:
            path = str(config.wallet_path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w") as f:
            json.dump({"private_key": self.private_key_hex()}, f)

    def private_key_hex(self) -> str:
        return "0x" + bytes(self.account.key).hex()

    def get_address(self) -> str:
        return self.account.address

    def sign(self, message: bytes) -> bytes:
        """Sign a message using the wallet's private key.

        Args:
            message: The message to sign

        Returns:
            bytes: 65-byte signature, usable as an `Input.signature`
        """
        from coinshuffle.wallet.signer import Signer
        return Signer.sign(message=message, private_key=bytes(self.account.key))
