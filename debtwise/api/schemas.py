"""Pydantic schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from debtwise.models.debt import DebtType, Strategy


# ---- Request schemas ----

class DebtCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Display label, e.g. 'Visa'")
    debt_type: DebtType = DebtType.OTHER
    balance: Decimal = Field(..., gt=0)
    interest_rate: Decimal = Field(..., ge=0, description="Annual rate in percent")
    minimum_payment: Decimal = Field(..., gt=0)


class DebtUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    debt_type: DebtType | None = None
    balance: Decimal | None = Field(None, gt=0)
    interest_rate: Decimal | None = Field(None, ge=0)
    minimum_payment: Decimal | None = Field(None, gt=0)


class BudgetUpdate(BaseModel):
    monthly_budget: Decimal = Field(..., ge=0)


# ---- Response schemas ----

class DebtResponse(BaseModel):
    id: str
    name: str
    debt_type: DebtType
    balance: Decimal
    original_balance: Decimal
    interest_rate: Decimal
    minimum_payment: Decimal
    created_at: datetime
    progress_pct: Decimal


class BudgetResponse(BaseModel):
    monthly_budget: Decimal


class DebtStatsResponse(BaseModel):
    debt_count: int
    total_debt: Decimal
    total_minimum_payments: Decimal
    average_interest_rate: Decimal
    highest_interest_rate: Decimal
    lowest_balance: Decimal
    available_extra_payment: Decimal
    budget_covers_minimums: bool


class PaymentScheduleItemResponse(BaseModel):
    month: int
    debt_name: str
    payment: Decimal
    principal: Decimal
    interest: Decimal
    remaining_balance: Decimal
    is_extra: bool


class StrategyResultResponse(BaseModel):
    strategy: Strategy
    total_payments: Decimal
    total_interest: Decimal
    months_to_payoff: int
    payoff_time: str  # e.g. "2y 3m"
    payoff_months: dict[str, int]
    schedule: list[PaymentScheduleItemResponse]


class MonthlySummaryResponse(BaseModel):
    month: int
    label: str
    total_payment: Decimal
    total_principal: Decimal
    total_interest: Decimal
    payments: list[PaymentScheduleItemResponse]


class ComparisonResponse(BaseModel):
    snowball: StrategyResultResponse
    avalanche: StrategyResultResponse
    interest_savings: Decimal
    months_saved: int
    time_saved: str
    recommended: Strategy
