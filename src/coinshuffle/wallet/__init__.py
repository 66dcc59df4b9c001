from coinshuffle.wallet.wallet import Wallet
from coinshuffle.wallet.signer import Signer

__all__ = ["Wallet", "Signer"]
