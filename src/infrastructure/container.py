"""Composition root for wiring infrastructure adapters."""

from pathlib import Path

from src.application.ports.expense_source import ExpenseSourcePort
from src.application.use_cases.calculate_trip_balances import (
    CalculateTripBalancesUseCase,
)
from src.infrastructure.json_trip_source import JsonTripFileSource
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import SplitterSettings


def build_expense_source(
    trip_file: Path | str | None = None,
) -> JsonTripFileSource:
    """Return the JSON trip source for ``trip_file`` or the configured file."""
    settings = SplitterSettings.from_env()
    resolved = trip_file or settings.trip_file
    if resolved is None:
        raise RuntimeError(
            "No trip file configured. Pass a path or set TRIP_FILE."
        )
    return JsonTripFileSource(
        resolved,
        default_currency=settings.default_currency,
        logger=get_app_logger(),
    )


def build_calculate_trip_balances_use_case(
    expense_source: ExpenseSourcePort,
) -> CalculateTripBalancesUseCase:
    """Return the balance calculation use case for ``expense_source``."""
    return CalculateTripBalancesUseCase(
        expense_source=expense_source,
        logger=get_app_logger(),
    )


__all__ = [
    "build_expense_source",
    "build_calculate_trip_balances_use_case",
]
