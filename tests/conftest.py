"""Canonical fixtures shared across engine, store and API tests.

golden_loan: $1,200 at 12% with a $200 minimum and a $200 budget. Pays off
in 7 months, $43.86 total interest (hand-simulated).
twin_debts: two $500 debts with $50 minimums, 5% vs 20%, $150 budget.
"""

from decimal import Decimal

import pytest

from debtwise.data.debt_store import DebtStore
from debtwise.models.debt import Debt, DebtType


@pytest.fixture
def golden_loan() -> Debt:
    return Debt(
        name="Loan",
        balance=Decimal("1200"),
        interest_rate=Decimal("12"),
        minimum_payment=Decimal("200"),
        debt_type=DebtType.PERSONAL_LOAN,
    )


@pytest.fixture
def twin_debts() -> list[Debt]:
    """Equal balances, different rates. A comes first in input order."""
    return [
        Debt(name="A", balance=Decimal("500"), interest_rate=Decimal("5"), minimum_payment=Decimal("50")),
        Debt(name="B", balance=Decimal("500"), interest_rate=Decimal("20"), minimum_payment=Decimal("50")),
    ]


@pytest.fixture
def household_debts() -> list[Debt]:
    """A typical mix: revolving card, auto loan, zero-interest medical bill."""
    return [
        Debt(
            name="Visa",
            balance=Decimal("3000"),
            interest_rate=Decimal("22"),
            minimum_payment=Decimal("90"),
            debt_type=DebtType.CREDIT_CARD,
        ),
        Debt(
            name="Car",
            balance=Decimal("8000"),
            interest_rate=Decimal("6"),
            minimum_payment=Decimal("200"),
            debt_type=DebtType.CAR_LOAN,
        ),
        Debt(
            name="Hospital",
            balance=Decimal("1200"),
            interest_rate=Decimal("0"),
            minimum_payment=Decimal("50"),
            debt_type=DebtType.MEDICAL_DEBT,
        ),
    ]


@pytest.fixture
def store(tmp_path) -> DebtStore:
    return DebtStore(str(tmp_path / "debtwise.db"))
