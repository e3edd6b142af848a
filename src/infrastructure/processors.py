from src.domain.models import Transaction, format_currency


class _ChannelProcessor:
    """Shared formatting for the payment channels a transaction can go through."""
    channel = ""

    def process(self, transaction: Transaction) -> str:
        return f"[{self.channel}] Processed {format_currency(transaction.amount)} for {transaction.category}"


class BankTransferProcessor(_ChannelProcessor):
    channel = "Bank Transfer"


class MobileMoneyProcessor(_ChannelProcessor):
    channel = "Mobile Money"


class CryptoWalletProcessor(_ChannelProcessor):
    channel = "Crypto Wallet"
