"""CLI for managing debts and running payoff plans against the local store.

Usage:
    python -m debtwise.cli add "Visa" --balance 2500 --rate 19.99 --min 75 --type "Credit Card"
    python -m debtwise.cli budget 600
    python -m debtwise.cli plan --strategy avalanche --months 12
    python -m debtwise.cli compare
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation

from debtwise.config import settings
from debtwise.data.debt_store import DebtStore
from debtwise.engine.amortization import simulate
from debtwise.engine.comparison import compare_strategies, format_duration
from debtwise.engine.schedule import monthly_summaries, payoff_months
from debtwise.engine.stats import debt_stats, progress_pct
from debtwise.models.debt import DebtType, Strategy


def _money(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")


def print_debts(store: DebtStore) -> None:
    snapshot = store.snapshot()
    stats = debt_stats(snapshot.debts, snapshot.monthly_budget)

    print(f"\n{'=' * 60}")
    print(f"  Debts")
    print(f"{'=' * 60}")
    if not snapshot.debts:
        print("  No debts added yet.")
    for d in snapshot.debts:
        print(f"  {d.name:<20} ${d.balance:>12,.2f}  {d.interest_rate:>6}%  min ${d.minimum_payment:,.2f}")
        print(f"  {'':<20} {d.debt_type.value}  paid {progress_pct(d)}%  id {d.id}")
    print()
    print(f"  Total debt:           ${stats.total_debt:,.2f}")
    print(f"  Minimum payments:     ${stats.total_minimum_payments:,.2f}")
    print(f"  Avg. interest rate:   {stats.average_interest_rate}%")
    print(f"  Monthly budget:       ${snapshot.monthly_budget:,.2f}")
    print(f"  Extra available:      ${stats.available_extra_payment:,.2f}")
    if not stats.budget_covers_minimums:
        print("  (Budget insufficient for minimum payments!)")
    print()


def print_plan(store: DebtStore, strategy: Strategy, months: int | None, redistribute: bool | None) -> None:
    snapshot = store.snapshot()
    result = simulate(
        snapshot.debts, snapshot.monthly_budget, strategy,
        redistribute_freed_minimums=redistribute,
    )

    print(f"\n{'=' * 60}")
    print(f"  {strategy.value.title()} Plan")
    print(f"{'=' * 60}")
    if not result.schedule:
        print("  No payment schedule available")
        print()
        return
    print(f"  Time to payoff:   {format_duration(result.months_to_payoff)}")
    print(f"  Total interest:   ${result.total_interest:,.2f}")
    print(f"  Total payments:   ${result.total_payments:,.2f}")
    for name, month in payoff_months(result).items():
        print(f"    {name:<20} paid off in month {month}")
    print()

    summaries = monthly_summaries(result)
    if months is not None:
        summaries = summaries[:months]
    for summary in summaries:
        print(f"  Month {summary.month} ({summary.label})  total ${summary.total_payment:,.2f}")
        for item in summary.payments:
            flag = " [extra]" if item.is_extra else ""
            print(
                f"    {item.debt_name:<20} ${item.payment:>10,.2f}  "
                f"principal ${item.principal:,.2f}  interest ${item.interest:,.2f}  "
                f"left ${item.remaining_balance:,.2f}{flag}"
            )
    print()


def print_comparison(store: DebtStore, redistribute: bool | None) -> None:
    snapshot = store.snapshot()
    comparison = compare_strategies(
        snapshot.debts, snapshot.monthly_budget,
        redistribute_freed_minimums=redistribute,
    )

    print(f"\n{'=' * 60}")
    print(f"  Strategy Comparison")
    print(f"{'=' * 60}")
    for result in (comparison.snowball, comparison.avalanche):
        marker = "  <- recommended" if result.strategy is comparison.recommended else ""
        print(
            f"  {result.strategy.value:>10}: {format_duration(result.months_to_payoff):>8}  "
            f"interest ${result.total_interest:,.2f}{marker}"
        )
    if comparison.interest_savings > 0:
        print()
        print(f"  Avalanche saves ${comparison.interest_savings:,.2f} in interest")
        print(f"  and {format_duration(comparison.months_saved)} of payments")
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Debt snowball / avalanche planner")
    parser.add_argument("--db", default=settings.database_path, help="SQLite database path")
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add a debt")
    add.add_argument("name")
    add.add_argument("--balance", type=_money, required=True)
    add.add_argument("--rate", type=_money, required=True, help="Annual interest rate in percent")
    add.add_argument("--min", dest="minimum_payment", type=_money, required=True, help="Minimum monthly payment")
    add.add_argument("--type", dest="debt_type", choices=[t.value for t in DebtType], default=DebtType.OTHER.value)

    remove = sub.add_parser("remove", help="Remove a debt by id")
    remove.add_argument("debt_id")

    sub.add_parser("list", help="List debts and summary stats")
    sub.add_parser("clear", help="Remove every debt")

    budget = sub.add_parser("budget", help="Show or set the monthly budget")
    budget.add_argument("amount", nargs="?", type=_money)

    plan = sub.add_parser("plan", help="Show the payment schedule for one strategy")
    plan.add_argument("--strategy", choices=[s.value for s in Strategy], default=Strategy.AVALANCHE.value)
    plan.add_argument("--months", type=int, help="Only print the first N months")

    compare = sub.add_parser("compare", help="Compare snowball and avalanche")

    for p in (plan, compare):
        p.add_argument("--redistribute", action="store_true", default=None,
                       help="Roll freed minimum payments into the extra payment")

    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level)
    store = DebtStore(args.db)

    try:
        if args.command == "add":
            debt = store.add_debt(
                name=args.name,
                balance=args.balance,
                interest_rate=args.rate,
                minimum_payment=args.minimum_payment,
                debt_type=DebtType(args.debt_type),
            )
            print(f"Added {debt.name} ({debt.id})")
        elif args.command == "remove":
            store.remove_debt(args.debt_id)
            print(f"Removed {args.debt_id}")
        elif args.command == "list":
            print_debts(store)
        elif args.command == "clear":
            store.clear_all_debts()
            print("Cleared all debts")
        elif args.command == "budget":
            if args.amount is not None:
                store.set_monthly_budget(args.amount)
            print(f"Monthly budget: ${store.get_monthly_budget():,.2f}")
        elif args.command == "plan":
            print_plan(store, Strategy(args.strategy), args.months, args.redistribute)
        elif args.command == "compare":
            print_comparison(store, args.redistribute)
    except KeyError as e:
        print(f"error: no debt with id {e.args[0]}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
