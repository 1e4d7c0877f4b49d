"""Debt management routes."""

from fastapi import APIRouter, Depends, HTTPException, Response

from debtwise.api.schemas import DebtCreate, DebtUpdate, DebtResponse, DebtStatsResponse
from debtwise.api.deps import get_store
from debtwise.data.debt_store import DebtStore
from debtwise.engine.stats import debt_stats, progress_pct
from debtwise.models.debt import Debt

router = APIRouter(prefix="/api/v1", tags=["debts"])


def _debt_to_response(debt: Debt) -> DebtResponse:
    return DebtResponse(
        id=debt.id,
        name=debt.name,
        debt_type=debt.debt_type,
        balance=debt.balance,
        original_balance=debt.starting_balance,
        interest_rate=debt.interest_rate,
        minimum_payment=debt.minimum_payment,
        created_at=debt.created_at,
        progress_pct=progress_pct(debt),
    )


@router.get("/debts", response_model=list[DebtResponse])
async def list_debts(store: DebtStore = Depends(get_store)):
    return [_debt_to_response(d) for d in store.list_debts()]


@router.post("/debts", response_model=DebtResponse, status_code=201)
async def add_debt(req: DebtCreate, store: DebtStore = Depends(get_store)):
    try:
        debt = store.add_debt(
            name=req.name,
            balance=req.balance,
            interest_rate=req.interest_rate,
            minimum_payment=req.minimum_payment,
            debt_type=req.debt_type,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _debt_to_response(debt)


@router.patch("/debts/{debt_id}", response_model=DebtResponse)
async def update_debt(debt_id: str, req: DebtUpdate, store: DebtStore = Depends(get_store)):
    updates = req.model_dump(exclude_none=True)
    try:
        debt = store.update_debt(debt_id, **updates)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Debt {debt_id} not found")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _debt_to_response(debt)


@router.delete("/debts/{debt_id}", status_code=204)
async def remove_debt(debt_id: str, store: DebtStore = Depends(get_store)):
    try:
        store.remove_debt(debt_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Debt {debt_id} not found")
    return Response(status_code=204)


@router.delete("/debts", status_code=204)
async def clear_debts(store: DebtStore = Depends(get_store)):
    store.clear_all_debts()
    return Response(status_code=204)


@router.get("/stats", response_model=DebtStatsResponse)
async def get_stats(store: DebtStore = Depends(get_store)):
    snapshot = store.snapshot()
    stats = debt_stats(snapshot.debts, snapshot.monthly_budget)
    return DebtStatsResponse(**vars(stats))
