"""Monthly budget routes."""

from fastapi import APIRouter, Depends, HTTPException

from debtwise.api.schemas import BudgetUpdate, BudgetResponse
from debtwise.api.deps import get_store
from debtwise.data.debt_store import DebtStore

router = APIRouter(prefix="/api/v1/budget", tags=["budget"])


@router.get("", response_model=BudgetResponse)
async def get_budget(store: DebtStore = Depends(get_store)):
    return BudgetResponse(monthly_budget=store.get_monthly_budget())


@router.put("", response_model=BudgetResponse)
async def set_budget(req: BudgetUpdate, store: DebtStore = Depends(get_store)):
    try:
        store.set_monthly_budget(req.monthly_budget)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return BudgetResponse(monthly_budget=req.monthly_budget)
