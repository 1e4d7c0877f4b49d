"""Tests for the SQLite debt store."""

from decimal import Decimal

import pytest

from debtwise.data.debt_store import DebtStore
from debtwise.models.debt import DebtType


def _add_visa(store):
    return store.add_debt(
        name="Visa",
        balance=Decimal("2500.55"),
        interest_rate=Decimal("19.99"),
        minimum_payment=Decimal("75"),
        debt_type=DebtType.CREDIT_CARD,
    )


class TestAddAndList:
    def test_round_trip_preserves_every_field(self, store):
        added = _add_visa(store)
        loaded = store.get_debt(added.id)
        assert loaded == added
        assert loaded.balance == Decimal("2500.55")
        assert loaded.interest_rate == Decimal("19.99")
        assert loaded.debt_type is DebtType.CREDIT_CARD

    def test_original_balance_snapshot(self, store):
        added = _add_visa(store)
        assert added.original_balance == added.balance

    def test_list_in_insertion_order(self, store):
        for name in ("Zeta", "Alpha", "Mid"):
            store.add_debt(name=name, balance=Decimal("100"), interest_rate=Decimal("5"), minimum_payment=Decimal("10"))
        assert [d.name for d in store.list_debts()] == ["Zeta", "Alpha", "Mid"]

    def test_ids_are_unique(self, store):
        a = _add_visa(store)
        b = store.add_debt(name="Mastercard", balance=Decimal("900"), interest_rate=Decimal("24"), minimum_payment=Decimal("30"))
        assert a.id != b.id
        assert len(store.list_debts()) == 2

    def test_persists_across_instances(self, tmp_path):
        path = str(tmp_path / "nested" / "debts.db")
        added = _add_visa(DebtStore(path))
        assert DebtStore(path).get_debt(added.id) == added

    def test_name_is_trimmed(self, store):
        debt = store.add_debt(name="  Visa ", balance=Decimal("1"), interest_rate=Decimal("0"), minimum_payment=Decimal("1"))
        assert debt.name == "Visa"


class TestValidation:
    @pytest.mark.parametrize("kwargs", [
        {"name": "", "balance": Decimal("100"), "interest_rate": Decimal("5"), "minimum_payment": Decimal("10")},
        {"name": "X", "balance": Decimal("0"), "interest_rate": Decimal("5"), "minimum_payment": Decimal("10")},
        {"name": "X", "balance": Decimal("100"), "interest_rate": Decimal("-1"), "minimum_payment": Decimal("10")},
        {"name": "X", "balance": Decimal("100"), "interest_rate": Decimal("5"), "minimum_payment": Decimal("0")},
    ])
    def test_rejects_invalid_debt(self, store, kwargs):
        with pytest.raises(ValueError):
            store.add_debt(**kwargs)
        assert store.list_debts() == []

    def test_zero_interest_allowed(self, store):
        debt = store.add_debt(name="Family", balance=Decimal("500"), interest_rate=Decimal("0"), minimum_payment=Decimal("50"))
        assert debt.interest_rate == Decimal("0")

    def test_duplicate_name_rejected(self, store):
        _add_visa(store)
        with pytest.raises(ValueError, match="already exists"):
            store.add_debt(name=" Visa ", balance=Decimal("800"), interest_rate=Decimal("15"), minimum_payment=Decimal("25"))
        assert len(store.list_debts()) == 1

    def test_negative_budget_rejected(self, store):
        with pytest.raises(ValueError):
            store.set_monthly_budget(Decimal("-1"))


class TestUpdateAndRemove:
    def test_partial_update(self, store):
        added = _add_visa(store)
        updated = store.update_debt(added.id, balance=Decimal("2000"))
        assert updated.balance == Decimal("2000")
        assert updated.original_balance == Decimal("2500.55")
        assert updated.name == "Visa"
        assert store.get_debt(added.id) == updated

    def test_update_validates(self, store):
        added = _add_visa(store)
        with pytest.raises(ValueError):
            store.update_debt(added.id, minimum_payment=Decimal("0"))
        assert store.get_debt(added.id).minimum_payment == Decimal("75")

    def test_update_trims_name(self, store):
        added = _add_visa(store)
        updated = store.update_debt(added.id, name="  Chase Visa ")
        assert updated.name == "Chase Visa"
        assert store.get_debt(added.id).name == "Chase Visa"

    def test_update_keeps_own_name(self, store):
        added = _add_visa(store)
        updated = store.update_debt(added.id, name="Visa", balance=Decimal("2400"))
        assert updated.name == "Visa"

    def test_update_rejects_taken_name(self, store):
        _add_visa(store)
        other = store.add_debt(name="Amex", balance=Decimal("700"), interest_rate=Decimal("21"), minimum_payment=Decimal("35"))
        with pytest.raises(ValueError, match="already exists"):
            store.update_debt(other.id, name="Visa")
        assert store.get_debt(other.id).name == "Amex"

    def test_update_rejects_unknown_fields(self, store):
        added = _add_visa(store)
        with pytest.raises(ValueError):
            store.update_debt(added.id, original_balance=Decimal("1"))

    def test_update_unknown_id(self, store):
        with pytest.raises(KeyError):
            store.update_debt("missing", balance=Decimal("1"))

    def test_remove(self, store):
        added = _add_visa(store)
        store.remove_debt(added.id)
        assert store.list_debts() == []
        with pytest.raises(KeyError):
            store.get_debt(added.id)

    def test_remove_unknown_id(self, store):
        with pytest.raises(KeyError):
            store.remove_debt("missing")


class TestBudgetAndSnapshot:
    def test_budget_defaults_to_zero(self, store):
        assert store.get_monthly_budget() == Decimal("0")

    def test_budget_round_trip(self, store):
        store.set_monthly_budget(Decimal("612.50"))
        assert store.get_monthly_budget() == Decimal("612.50")

    def test_clear_keeps_budget(self, store):
        _add_visa(store)
        store.set_monthly_budget(Decimal("500"))
        store.clear_all_debts()
        assert store.list_debts() == []
        assert store.get_monthly_budget() == Decimal("500")

    def test_snapshot(self, store):
        added = _add_visa(store)
        store.set_monthly_budget(Decimal("300"))
        snapshot = store.snapshot()
        assert snapshot.debts == (added,)
        assert snapshot.monthly_budget == Decimal("300")
