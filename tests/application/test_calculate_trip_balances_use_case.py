"""Tests for the CalculateTripBalancesUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.calculate_trip_balances import (
    CalculateTripBalancesUseCase,
)
from src.domain.errors import InvalidSplitError
from src.domain.models import Expense, Participant, ShareSpec, SplitType


def _source(expenses: list[Expense]) -> MagicMock:
    source = MagicMock()
    source.fetch_participants.return_value = [
        Participant(user_id="a", name="Alice"),
        Participant(user_id="b", name="Bob"),
        Participant(user_id="c", name="Charlie"),
    ]
    source.fetch_expenses.return_value = expenses
    return source


def test_execute_returns_balances_and_settlements() -> None:
    """Use case should compute the plan from the source data."""
    expense = Expense(
        id="e1",
        description="Hotel",
        amount=Decimal("90"),
        paid_by="a",
        participants=[
            ShareSpec(user_id="a", name="Alice"),
            ShareSpec(user_id="b", name="Bob"),
            ShareSpec(user_id="c", name="Charlie"),
        ],
    )
    source = _source([expense])
    logger = MagicMock()

    use_case = CalculateTripBalancesUseCase(expense_source=source, logger=logger)

    result = use_case.execute("trip-1")

    source.fetch_participants.assert_called_once_with("trip-1")
    source.fetch_expenses.assert_called_once_with("trip-1")
    assert result.total_expenses == Decimal("90.00")
    assert [(s.from_name, s.to_name, s.amount) for s in result.settlements] == [
        ("Bob", "Alice", Decimal("30.00")),
        ("Charlie", "Alice", Decimal("30.00")),
    ]
    messages = [call.args[0] for call in logger.info.call_args_list]
    assert any("Fetched 1 expenses and 3 participants" in m for m in messages)
    assert any("Trip trip-1 settled" in m for m in messages)


def test_execute_logs_and_reraises_invalid_split() -> None:
    """Invalid expenses should be logged with their id and re-raised."""
    expense = Expense(
        id="bad-1",
        description="Groceries",
        amount=Decimal("100"),
        paid_by="a",
        split_type=SplitType.CUSTOM,
        participants=[
            ShareSpec(user_id="a", name="Alice", value=Decimal("50")),
            ShareSpec(user_id="b", name="Bob", value=Decimal("55")),
        ],
    )
    logger = MagicMock()
    use_case = CalculateTripBalancesUseCase(
        expense_source=_source([expense]),
        logger=logger,
    )

    with pytest.raises(InvalidSplitError):
        use_case.execute("trip-1")

    logger.error.assert_called_once()
    assert "bad-1" in logger.error.call_args[0][0]


def test_default_logger_is_app_logger(monkeypatch) -> None:
    """Use case should fall back to the application logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        "src.application.use_cases.calculate_trip_balances.get_app_logger",
        lambda: fake_logger,
    )

    use_case = CalculateTripBalancesUseCase(expense_source=_source([]))
    result = use_case.execute("trip-1")

    assert result.summary.is_balanced
    assert fake_logger.info.called
