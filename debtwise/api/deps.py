"""FastAPI dependency injection."""

from debtwise.config import settings
from debtwise.data.debt_store import DebtStore


def get_store() -> DebtStore:
    return DebtStore(settings.database_path)
