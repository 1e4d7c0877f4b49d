"""Payoff strategy routes: per-strategy schedules and the side-by-side comparison."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from debtwise.api.schemas import (
    StrategyResultResponse,
    PaymentScheduleItemResponse,
    MonthlySummaryResponse,
    ComparisonResponse,
)
from debtwise.api.deps import get_store
from debtwise.data.debt_store import DebtStore
from debtwise.engine.amortization import simulate
from debtwise.engine.comparison import compare_strategies, format_duration
from debtwise.engine.schedule import monthly_summaries, payoff_months
from debtwise.models.debt import Strategy
from debtwise.models.results import PaymentScheduleItem, StrategyResult

router = APIRouter(prefix="/api/v1", tags=["strategies"])


def _item_to_response(item: PaymentScheduleItem) -> PaymentScheduleItemResponse:
    return PaymentScheduleItemResponse(
        month=item.month,
        debt_name=item.debt_name,
        payment=item.payment,
        principal=item.principal,
        interest=item.interest,
        remaining_balance=item.remaining_balance,
        is_extra=item.is_extra,
    )


def _result_to_response(result: StrategyResult) -> StrategyResultResponse:
    """Convert engine StrategyResult to API response."""
    return StrategyResultResponse(
        strategy=result.strategy,
        total_payments=result.total_payments,
        total_interest=result.total_interest,
        months_to_payoff=result.months_to_payoff,
        payoff_time=format_duration(result.months_to_payoff),
        payoff_months=payoff_months(result),
        schedule=[_item_to_response(item) for item in result.schedule],
    )


@router.get("/strategies/{strategy}", response_model=StrategyResultResponse)
async def run_strategy(
    strategy: Strategy,
    redistribute: bool | None = Query(None, description="Roll freed minimums into the extra payment"),
    store: DebtStore = Depends(get_store),
):
    """Simulate the stored debts and budget under one strategy."""
    snapshot = store.snapshot()
    result = simulate(
        snapshot.debts, snapshot.monthly_budget, strategy,
        redistribute_freed_minimums=redistribute,
    )
    return _result_to_response(result)


@router.get("/strategies/{strategy}/months", response_model=list[MonthlySummaryResponse])
async def run_strategy_by_month(
    strategy: Strategy,
    start: date | None = Query(None, description="Calendar month of the first payment"),
    redistribute: bool | None = Query(None),
    store: DebtStore = Depends(get_store),
):
    """Same simulation as /strategies/{strategy}, grouped by month."""
    snapshot = store.snapshot()
    result = simulate(
        snapshot.debts, snapshot.monthly_budget, strategy,
        redistribute_freed_minimums=redistribute,
    )
    return [
        MonthlySummaryResponse(
            month=m.month,
            label=m.label,
            total_payment=m.total_payment,
            total_principal=m.total_principal,
            total_interest=m.total_interest,
            payments=[_item_to_response(item) for item in m.payments],
        )
        for m in monthly_summaries(result, start=start)
    ]


@router.get("/comparison", response_model=ComparisonResponse)
async def run_comparison(
    redistribute: bool | None = Query(None),
    store: DebtStore = Depends(get_store),
):
    """Snowball vs avalanche on the stored snapshot."""
    snapshot = store.snapshot()
    comparison = compare_strategies(
        snapshot.debts, snapshot.monthly_budget,
        redistribute_freed_minimums=redistribute,
    )
    return ComparisonResponse(
        snowball=_result_to_response(comparison.snowball),
        avalanche=_result_to_response(comparison.avalanche),
        interest_savings=comparison.interest_savings,
        months_saved=comparison.months_saved,
        time_saved=format_duration(comparison.months_saved),
        recommended=comparison.recommended,
    )
