"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from debtwise.api.routes import debts, budget, strategies
from debtwise.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="DebtWise",
    description="Strategic debt repayment planning with snowball and avalanche methods",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(debts.router)
app.include_router(budget.router)
app.include_router(strategies.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
