import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from src.domain.models import Account, OverdraftPolicy, Transaction, TransactionOutcome
from src.domain.protocols import TransactionProcessor
from src.infrastructure.processors import (
    BankTransferProcessor,
    CryptoWalletProcessor,
    MobileMoneyProcessor,
)
from src.infrastructure.repository import KeyedRepository

logger = logging.getLogger(__name__)


class FinanceService:
    """
    Runs transactions through a payment channel, applies them to one account
    and keeps a record of every transaction that was submitted.
    """

    def __init__(self, account: Account, transactions: Optional[KeyedRepository[Transaction]] = None):
        self.account = account
        self.transactions = transactions if transactions is not None else KeyedRepository()

    def process_transaction(self, transaction: Transaction, processor: TransactionProcessor) -> TransactionOutcome:
        """
        Processes a transaction through a payment channel and applies it to the account.

        The transaction is recorded even when the account's overdraft policy
        rejects it.

        Raises:
            DuplicateKeyException: if a transaction with the same id was already recorded.
        """
        self.transactions.add(transaction)
        logger.info(processor.process(transaction))

        outcome = self.account.apply_transaction(transaction)
        if outcome.applied:
            logger.info(outcome.message)
        else:
            logger.warning(f"{outcome.message} for transaction {transaction.id} on {self.account.account_number}.")
        return outcome

    def run_demo(self) -> List[TransactionOutcome]:
        now = datetime.now()
        plan = [
            (Transaction(id=1, date=now, amount=Decimal("180"), category="Groceries"), MobileMoneyProcessor()),
            (Transaction(id=2, date=now, amount=Decimal("520"), category="Utilities"), BankTransferProcessor()),
            (Transaction(id=3, date=now, amount=Decimal("900"), category="Entertainment"), CryptoWalletProcessor()),
        ]
        return [self.process_transaction(transaction, processor) for transaction, processor in plan]


def build_demo_service() -> FinanceService:
    account = Account(account_number="ACC246", balance=Decimal("1500"), overdraft_policy=OverdraftPolicy.REJECT)
    return FinanceService(account)
