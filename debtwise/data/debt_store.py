"""SQLite-backed storage for the user's debts and monthly budget.

The simulation engine never touches this module: callers take a
DebtSnapshot and hand that to the engine.
"""

import logging
import sqlite3
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from uuid import uuid4

from debtwise.models.debt import Debt, DebtSnapshot, DebtType

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {"name", "debt_type", "balance", "interest_rate", "minimum_payment"}


def validate_debt(debt: Debt) -> None:
    """Reject debts the simulator should never see."""
    if not debt.name or not debt.name.strip():
        raise ValueError("Debt name is required")
    if debt.balance <= 0:
        raise ValueError(f"Balance for '{debt.name}' must be greater than zero")
    if debt.interest_rate < 0:
        raise ValueError(f"Interest rate for '{debt.name}' cannot be negative")
    if debt.minimum_payment <= 0:
        raise ValueError(f"Minimum payment for '{debt.name}' must be greater than zero")


def validate_budget(monthly_budget: Decimal) -> None:
    if monthly_budget < 0:
        raise ValueError("Monthly budget cannot be negative")


class DebtStore:
    def __init__(self, db_path: str = "data/debtwise.db"):
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._ensure_tables()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_tables(self) -> None:
        with self._connect() as conn:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS debts (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    id TEXT UNIQUE NOT NULL,
                    name TEXT NOT NULL,
                    debt_type TEXT NOT NULL,
                    balance TEXT NOT NULL,
                    original_balance TEXT NOT NULL,
                    interest_rate TEXT NOT NULL,
                    minimum_payment TEXT NOT NULL,
                    created_at TIMESTAMP
                );

                CREATE TABLE IF NOT EXISTS preferences (
                    key TEXT PRIMARY KEY,
                    value TEXT
                );
            """)

    @staticmethod
    def _row_to_debt(row: sqlite3.Row) -> Debt:
        # Money is stored as TEXT so Decimals come back exactly
        return Debt(
            id=row["id"],
            name=row["name"],
            debt_type=DebtType(row["debt_type"]),
            balance=Decimal(row["balance"]),
            original_balance=Decimal(row["original_balance"]),
            interest_rate=Decimal(row["interest_rate"]),
            minimum_payment=Decimal(row["minimum_payment"]),
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    def add_debt(
        self,
        name: str,
        balance: Decimal,
        interest_rate: Decimal,
        minimum_payment: Decimal,
        debt_type: DebtType = DebtType.OTHER,
    ) -> Debt:
        """Validate and store a new debt. Its original balance is the entered balance."""
        debt = Debt(
            id=str(uuid4()),
            name=name.strip(),
            debt_type=debt_type,
            balance=balance,
            original_balance=balance,
            interest_rate=interest_rate,
            minimum_payment=minimum_payment,
            created_at=datetime.now(timezone.utc),
        )
        validate_debt(debt)
        self._ensure_unique_name(debt.name)
        with self._connect() as conn:
            conn.execute(
                "INSERT INTO debts "
                "(id, name, debt_type, balance, original_balance, interest_rate, minimum_payment, created_at) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    debt.id, debt.name, debt.debt_type.value, str(debt.balance),
                    str(debt.original_balance), str(debt.interest_rate),
                    str(debt.minimum_payment), debt.created_at.isoformat(),
                ),
            )
        logger.info("Added debt %s (%s)", debt.id, debt.name)
        return debt

    def _ensure_unique_name(self, name: str, exclude_id: str | None = None) -> None:
        # Schedules and payoff months are keyed by debt name
        with self._connect() as conn:
            row = conn.execute(
                "SELECT id FROM debts WHERE name = ? AND id IS NOT ?",
                (name, exclude_id),
            ).fetchone()
        if row is not None:
            raise ValueError(f"A debt named '{name}' already exists")

    def get_debt(self, debt_id: str) -> Debt:
        with self._connect() as conn:
            row = conn.execute("SELECT * FROM debts WHERE id = ?", (debt_id,)).fetchone()
        if row is None:
            raise KeyError(debt_id)
        return self._row_to_debt(row)

    def list_debts(self) -> list[Debt]:
        """All debts in the order they were added."""
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM debts ORDER BY seq").fetchall()
        return [self._row_to_debt(row) for row in rows]

    def update_debt(self, debt_id: str, **updates) -> Debt:
        """Apply a partial update. The original balance is never changed."""
        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update field(s): {', '.join(sorted(unknown))}")

        if "name" in updates:
            updates["name"] = updates["name"].strip()

        debt = replace(self.get_debt(debt_id), **updates)
        validate_debt(debt)
        self._ensure_unique_name(debt.name, exclude_id=debt_id)
        with self._connect() as conn:
            conn.execute(
                "UPDATE debts SET name = ?, debt_type = ?, balance = ?, "
                "interest_rate = ?, minimum_payment = ? WHERE id = ?",
                (
                    debt.name, debt.debt_type.value, str(debt.balance),
                    str(debt.interest_rate), str(debt.minimum_payment), debt_id,
                ),
            )
        logger.info("Updated debt %s: %s", debt_id, sorted(updates))
        return debt

    def remove_debt(self, debt_id: str) -> None:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM debts WHERE id = ?", (debt_id,))
        if cursor.rowcount == 0:
            raise KeyError(debt_id)
        logger.info("Removed debt %s", debt_id)

    def clear_all_debts(self) -> None:
        """Delete every debt. The monthly budget is kept."""
        with self._connect() as conn:
            conn.execute("DELETE FROM debts")
        logger.info("Cleared all debts")

    def get_monthly_budget(self) -> Decimal:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT value FROM preferences WHERE key = 'monthly_budget'"
            ).fetchone()
        return Decimal(row["value"]) if row else Decimal("0")

    def set_monthly_budget(self, monthly_budget: Decimal) -> None:
        validate_budget(monthly_budget)
        with self._connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO preferences (key, value) VALUES ('monthly_budget', ?)",
                (str(monthly_budget),),
            )
        logger.info("Monthly budget set to %s", monthly_budget)

    def snapshot(self) -> DebtSnapshot:
        """Immutable view of the current debts and budget for the engine."""
        return DebtSnapshot(
            debts=tuple(self.list_debts()),
            monthly_budget=self.get_monthly_budget(),
        )
