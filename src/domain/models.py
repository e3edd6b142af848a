from datetime import datetime
from decimal import Decimal
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict


def format_currency(amount: Decimal) -> str:
    """Formats an amount the way the console output shows money, e.g. -$1,234.50."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


class Transaction(BaseModel):
    """
    Immutable record of a single account transaction.
    A positive amount is debited from the account it is applied to.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique transaction number")
    date: datetime = Field(..., description="When the transaction happened")
    amount: Decimal = Field(..., description="Signed amount debited from the account")
    category: str = Field(..., description="Spending category, e.g. Groceries")


class OverdraftPolicy(str, Enum):
    """How an account reacts to a transaction larger than its balance."""
    ALLOW_NEGATIVE = "allow_negative"
    REJECT = "reject"


class TransactionOutcome(BaseModel):
    """Result of applying a transaction to an account."""
    model_config = ConfigDict(frozen=True)

    transaction_id: int
    applied: bool
    balance: Decimal
    message: str


class Account(BaseModel):
    """
    Account with a running balance owned exclusively by this instance.
    The overdraft policy is fixed at construction and decides whether a
    transaction may drive the balance below zero.
    """
    model_config = ConfigDict(validate_assignment=True)

    account_number: str = Field(..., description="Account identifier, e.g. ACC246")
    balance: Decimal = Field(..., description="Current running balance")
    overdraft_policy: OverdraftPolicy = Field(default=OverdraftPolicy.ALLOW_NEGATIVE)

    def apply_transaction(self, transaction: Transaction) -> TransactionOutcome:
        if self.overdraft_policy is OverdraftPolicy.REJECT and transaction.amount > self.balance:
            return TransactionOutcome(
                transaction_id=transaction.id,
                applied=False,
                balance=self.balance,
                message="Insufficient funds",
            )

        self.balance -= transaction.amount
        if self.overdraft_policy is OverdraftPolicy.REJECT:
            message = (
                f"Transaction of {format_currency(transaction.amount)} for {transaction.category} "
                f"applied. New Balance: {format_currency(self.balance)}"
            )
        else:
            message = f"Transaction applied. New Balance: {format_currency(self.balance)}"

        return TransactionOutcome(
            transaction_id=transaction.id,
            applied=True,
            balance=self.balance,
            message=message,
        )


class Patient(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    age: int
    gender: str


class Prescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    patient_id: int = Field(..., description="Id of the patient the prescription was issued to")
    medication_name: str
    date_issued: datetime


class InventoryItem(BaseModel):
    """Immutable inventory log entry, persisted as part of a JSON snapshot."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    quantity: int = Field(..., ge=0)
    date_added: datetime


class ElectronicItem(BaseModel):
    # Quantity changes in place, so assignments are validated instead of frozen.
    model_config = ConfigDict(validate_assignment=True)

    id: int
    name: str
    quantity: int = Field(..., ge=0)
    brand: str
    warranty_months: int

    def __str__(self) -> str:
        return (
            f"[Electronic] ID:{self.id} Name:{self.name} Brand:{self.brand} "
            f"Qty:{self.quantity} Warranty:{self.warranty_months}mo"
        )


class GroceryItem(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: int
    name: str
    quantity: int = Field(..., ge=0)
    expiry_date: datetime

    def __str__(self) -> str:
        return f"[Grocery] ID:{self.id} Name:{self.name} Qty:{self.quantity} Expiry:{self.expiry_date:%Y-%m-%d}"


class Student(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    age: int
    score: float
