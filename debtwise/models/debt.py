from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import uuid4


class DebtType(Enum):
    CREDIT_CARD = "Credit Card"
    PERSONAL_LOAN = "Personal Loan"
    STUDENT_LOAN = "Student Loan"
    CAR_LOAN = "Car Loan"
    MEDICAL_DEBT = "Medical Debt"
    OTHER = "Other"


class Strategy(Enum):
    SNOWBALL = "snowball"  # Smallest balance first
    AVALANCHE = "avalanche"  # Highest interest rate first


@dataclass(frozen=True)
class Debt:
    name: str
    balance: Decimal
    interest_rate: Decimal  # Annual, in percent (e.g. Decimal("19.99"))
    minimum_payment: Decimal  # Fixed for the life of a simulation
    debt_type: DebtType = DebtType.OTHER
    original_balance: Decimal | None = None  # Progress display only
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def monthly_rate(self) -> Decimal:
        return self.interest_rate / 100 / 12

    @property
    def starting_balance(self) -> Decimal:
        return self.original_balance if self.original_balance is not None else self.balance


@dataclass(frozen=True)
class DebtSnapshot:
    """Read-only view of the user's debts and budget, handed to the engine."""
    debts: tuple[Debt, ...] = ()
    monthly_budget: Decimal = Decimal("0")
