"""Summary statistics over a debt list."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from debtwise.models.debt import Debt
from debtwise.models.results import DebtStats

TWO_PLACES = Decimal("0.01")


def debt_stats(debts: Sequence[Debt], monthly_budget: Decimal = Decimal("0")) -> DebtStats:
    """Totals, rate extremes and the extra payment the budget leaves over minimums."""
    if not debts:
        # No minimums, so the whole budget is extra
        return DebtStats(
            available_extra_payment=max(Decimal("0"), monthly_budget),
            budget_covers_minimums=monthly_budget >= 0,
        )

    total_minimums = sum((d.minimum_payment for d in debts), Decimal("0"))
    average_rate = sum((d.interest_rate for d in debts), Decimal("0")) / len(debts)

    return DebtStats(
        debt_count=len(debts),
        total_debt=sum((d.balance for d in debts), Decimal("0")),
        total_minimum_payments=total_minimums,
        average_interest_rate=average_rate.quantize(TWO_PLACES, ROUND_HALF_UP),
        highest_interest_rate=max(d.interest_rate for d in debts),
        lowest_balance=min(d.balance for d in debts),
        available_extra_payment=max(Decimal("0"), monthly_budget - total_minimums),
        budget_covers_minimums=monthly_budget >= total_minimums,
    )


def progress_pct(debt: Debt) -> Decimal:
    """Percent of the original balance already paid off."""
    original = debt.starting_balance
    if original <= 0:
        return Decimal("0")
    pct = (original - debt.balance) / original * 100
    return pct.quantize(Decimal("0.1"), ROUND_HALF_UP)
