"""Side-by-side snowball vs avalanche comparison."""

from decimal import Decimal
from typing import Sequence

from debtwise.engine.amortization import simulate
from debtwise.models.debt import Debt, Strategy
from debtwise.models.results import StrategyComparison


def format_duration(months: int) -> str:
    """Render a month count as years + months, e.g. 27 -> "2y 3m"."""
    return f"{months // 12}y {months % 12}m"


def compare_strategies(
    debts: Sequence[Debt],
    monthly_budget: Decimal,
    redistribute_freed_minimums: bool | None = None,
    max_months: int | None = None,
) -> StrategyComparison:
    """Run both strategies on the same snapshot and measure avalanche's edge.

    Savings are floored at zero. Avalanche is recommended only when it pays
    strictly less interest; ties go to snowball.
    """
    snowball = simulate(
        debts, monthly_budget, Strategy.SNOWBALL,
        redistribute_freed_minimums=redistribute_freed_minimums,
        max_months=max_months,
    )
    avalanche = simulate(
        debts, monthly_budget, Strategy.AVALANCHE,
        redistribute_freed_minimums=redistribute_freed_minimums,
        max_months=max_months,
    )

    if avalanche.total_interest < snowball.total_interest:
        recommended = Strategy.AVALANCHE
    else:
        recommended = Strategy.SNOWBALL

    return StrategyComparison(
        snowball=snowball,
        avalanche=avalanche,
        interest_savings=max(Decimal("0"), snowball.total_interest - avalanche.total_interest),
        months_saved=max(0, snowball.months_to_payoff - avalanche.months_to_payoff),
        recommended=recommended,
    )
