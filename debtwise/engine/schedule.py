"""Views over a simulated payment schedule.

Grouping by month (with calendar labels), payoff month per debt, and
per-debt balance series for charting.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal

from debtwise.models.results import MonthlySummary, StrategyResult


def _add_months(start: date, months: int) -> date:
    total = start.year * 12 + (start.month - 1) + months
    return date(total // 12, total % 12 + 1, 1)


def month_label(start: date, month: int) -> str:
    """Calendar label for a 1-based simulation month, e.g. "Jan 2026"."""
    return _add_months(start, month - 1).strftime("%b %Y")


def monthly_summaries(result: StrategyResult, start: date | None = None) -> list[MonthlySummary]:
    """Group schedule entries by month, in month order."""
    start = start or date.today()
    by_month: dict[int, MonthlySummary] = {}

    for item in result.schedule:
        summary = by_month.get(item.month)
        if summary is None:
            summary = MonthlySummary(month=item.month, label=month_label(start, item.month))
            by_month[item.month] = summary
        summary.payments.append(item)
        summary.total_payment += item.payment
        summary.total_principal += item.principal
        summary.total_interest += item.interest

    return [by_month[m] for m in sorted(by_month)]


def payoff_months(result: StrategyResult) -> dict[str, int]:
    """Month in which each debt reached a zero balance.

    Keyed by debt name, which the store keeps unique. Debts still carrying
    a balance at the end of the schedule are omitted.
    """
    last_entry = {}
    for item in result.schedule:
        last_entry[item.debt_name] = item
    return {
        name: item.month
        for name, item in last_entry.items()
        if item.remaining_balance == 0
    }


def balance_series(result: StrategyResult) -> dict[str, list[tuple[int, Decimal]]]:
    """(month, remaining_balance) points per debt name, in schedule order."""
    series = defaultdict(list)
    for item in result.schedule:
        series[item.debt_name].append((item.month, item.remaining_balance))
    return dict(series)
