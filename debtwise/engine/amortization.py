"""Debt payoff simulation: snowball and avalanche.

Pure function: snapshot in, StrategyResult out. No I/O, and the caller's
debts are never mutated.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from debtwise.config import settings
from debtwise.models.debt import Debt, Strategy
from debtwise.models.results import PaymentScheduleItem, StrategyResult

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


def round2(value: Decimal) -> Decimal:
    """Round half away from zero to cents."""
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


@dataclass
class _WorkingDebt:
    """Mutable per-call copy of a Debt. Only the balance changes."""
    name: str
    balance: Decimal
    interest_rate: Decimal
    minimum_payment: Decimal


def _ordered(debts: list[_WorkingDebt], strategy: Strategy) -> list[_WorkingDebt]:
    # sorted() is stable, so ties keep input order
    if strategy is Strategy.SNOWBALL:
        return sorted(debts, key=lambda d: d.balance)
    return sorted(debts, key=lambda d: d.interest_rate, reverse=True)


def _extra_payment(debts: Sequence[Debt] | list[_WorkingDebt], monthly_budget: Decimal) -> Decimal:
    total_minimums = sum((d.minimum_payment for d in debts), ZERO)
    return max(ZERO, monthly_budget - total_minimums)


def simulate(
    debts: Sequence[Debt],
    monthly_budget: Decimal,
    strategy: Strategy,
    redistribute_freed_minimums: bool | None = None,
    max_months: int | None = None,
) -> StrategyResult:
    """Simulate month-by-month payoff under a strategy.

    Each month every active debt gets its minimum payment, and the focus debt
    (index 0 of the strategy ordering) also gets the extra payment: the budget
    left over after all minimums. Paid-off debts drop out and the rest are
    re-sorted.

    Args:
        debts: Debts to pay off. Only those with a positive balance are paid,
            but every minimum is subtracted from the budget for the extra payment.
        monthly_budget: Total amount available for debt payments each month
        strategy: SNOWBALL (smallest balance first) or AVALANCHE (highest rate first)
        redistribute_freed_minimums: If True, recompute the extra payment each
            month from the still-active minimums. If False, it is fixed once
            at the start. Defaults to the configured setting.
        max_months: Simulation cap. Defaults to the configured setting.
    """
    if redistribute_freed_minimums is None:
        redistribute_freed_minimums = settings.redistribute_freed_minimums
    if max_months is None:
        max_months = settings.max_months

    if not debts or monthly_budget <= 0:
        return StrategyResult(strategy=strategy)

    working = _ordered(
        [
            _WorkingDebt(
                name=d.name,
                balance=d.balance,
                interest_rate=d.interest_rate,
                minimum_payment=d.minimum_payment,
            )
            for d in debts
            if d.balance > 0
        ],
        strategy,
    )
    # Every input minimum counts, including debts already at zero
    extra = _extra_payment(debts, monthly_budget)

    schedule: list[PaymentScheduleItem] = []
    total_payments = ZERO
    total_interest = ZERO
    month = 0

    while working and month < max_months:
        month += 1
        if redistribute_freed_minimums:
            extra = _extra_payment(working, monthly_budget)

        for index, debt in enumerate(working):
            interest = debt.balance * (debt.interest_rate / 100) / 12
            is_focus = index == 0
            payment = debt.minimum_payment + (extra if is_focus else ZERO)

            # Never pay more than what clears the balance plus this month's interest
            principal = min(max(ZERO, payment - interest), debt.balance)
            payment = principal + interest
            if payment <= 0:
                continue

            debt.balance = max(ZERO, debt.balance - principal)
            total_payments += payment
            total_interest += interest

            schedule.append(PaymentScheduleItem(
                month=month,
                debt_name=debt.name,
                payment=round2(payment),
                principal=round2(principal),
                interest=round2(interest),
                remaining_balance=round2(debt.balance),
                is_extra=is_focus and extra > 0,
            ))

        active = [d for d in working if d.balance > 0]
        if len(active) != len(working):
            working = _ordered(active, strategy)

    if working:
        logger.warning(
            "%s simulation hit the %d-month cap with %d debt(s) unpaid",
            strategy.value, max_months, len(working),
        )
    logger.debug(
        "%s: %d months, %d schedule entries, interest %s",
        strategy.value, month, len(schedule), round2(total_interest),
    )

    return StrategyResult(
        strategy=strategy,
        total_payments=round2(total_payments),
        total_interest=round2(total_interest),
        months_to_payoff=month,
        schedule=schedule,
    )
