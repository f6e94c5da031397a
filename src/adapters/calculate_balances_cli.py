"""CLI adapter printing balances and settlements for a JSON trip file."""

import sys

from src.domain.errors import SplitterError
from src.domain.models import BalanceCalculationResult
from src.domain.services.currency import format_money
from src.infrastructure.container import (
    build_calculate_trip_balances_use_case,
    build_expense_source,
)
from src.infrastructure.logging.logger import get_app_logger


def _print_result(result: BalanceCalculationResult, currency: str) -> None:
    """Print balances, settlements and the summary block."""
    print("Balances")
    for row in result.user_balances:
        print(
            f"  {row.name}: paid={format_money(row.total_paid, currency)}, "
            f"share={format_money(row.total_share, currency)}, "
            f"balance={format_money(row.balance, currency)}"
        )

    print("Settlements")
    if not result.settlements:
        print("  Everyone is settled up.")
    for settlement in result.settlements:
        print(
            f"  {settlement.from_name} pays {settlement.to_name} "
            f"{format_money(settlement.amount, currency)}"
        )

    summary = result.summary
    print(
        f"Total expenses: {format_money(result.total_expenses, currency)}, "
        f"average per person: "
        f"{format_money(summary.average_per_person, currency)}, "
        f"transactions: {summary.total_transactions}, "
        f"to transfer: {format_money(summary.total_settlement_amount, currency)}"
    )


def main(argv: list[str] | None = None) -> int:
    """Compute and print the settlement plan of a trip.

    Args:
        argv: Optional arguments; the first one is the trip file path.
            Falls back to ``TRIP_FILE`` when absent.

    Returns:
        int: Process exit code.
    """
    args = sys.argv[1:] if argv is None else argv
    logger = get_app_logger()
    try:
        source = build_expense_source(args[0] if args else None)
        trip_id = source.trip_id
        use_case = build_calculate_trip_balances_use_case(source)
        result = use_case.execute(trip_id)
    except (SplitterError, RuntimeError) as exc:
        logger.error(str(exc))
        print(f"Error: {exc}")
        return 1

    print(f"Trip {trip_id}")
    _print_result(result, source.currency)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
