from eth_account import Account
from eth_account.messages import encode_defunct


class Signer:
    @staticmethod
    def sign(message: bytes, private_key: bytes) -> bytes:
        # EIP-191 personal message, 65-byte r || s || v signature
        signed = Account.sign_message(encode_defunct(primitive=message), private_key=private_key)
        return bytes(signed.signature)

    @staticmethod
    def verify(message: bytes, signature: bytes, address: str) -> bool:
        try:
            recovered = Account.recover_message(
                encode_defunct(primitive=message), signature=signature
            )
        except Exception:
            return False
        return recovered.lower() == address.lower()
