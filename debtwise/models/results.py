from dataclasses import dataclass, field
from decimal import Decimal

from debtwise.models.debt import Strategy


@dataclass(frozen=True)
class PaymentScheduleItem:
    month: int  # 1-based
    debt_name: str
    payment: Decimal
    principal: Decimal
    interest: Decimal
    remaining_balance: Decimal
    is_extra: bool = False  # Payment included the extra budget allocation


@dataclass
class StrategyResult:
    strategy: Strategy
    total_payments: Decimal = Decimal("0")
    total_interest: Decimal = Decimal("0")
    months_to_payoff: int = 0
    schedule: list[PaymentScheduleItem] = field(default_factory=list)


@dataclass
class MonthlySummary:
    month: int
    label: str  # e.g. "Jan 2026"
    total_payment: Decimal = Decimal("0")
    total_principal: Decimal = Decimal("0")
    total_interest: Decimal = Decimal("0")
    payments: list[PaymentScheduleItem] = field(default_factory=list)


@dataclass
class StrategyComparison:
    """Snowball vs avalanche on the same snapshot."""

    snowball: StrategyResult
    avalanche: StrategyResult
    interest_savings: Decimal = Decimal("0")  # Saved by avalanche, never negative
    months_saved: int = 0
    recommended: Strategy = Strategy.SNOWBALL


@dataclass(frozen=True)
class DebtStats:
    debt_count: int = 0
    total_debt: Decimal = Decimal("0")
    total_minimum_payments: Decimal = Decimal("0")
    average_interest_rate: Decimal = Decimal("0")
    highest_interest_rate: Decimal = Decimal("0")
    lowest_balance: Decimal = Decimal("0")
    available_extra_payment: Decimal = Decimal("0")
    budget_covers_minimums: bool = False
