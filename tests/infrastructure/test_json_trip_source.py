"""Tests for the JSON trip file source."""

import json
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.domain.errors import TripFileError
from src.domain.models import SplitType
from src.infrastructure.json_trip_source import JsonTripFileSource


def _write(tmp_path: Path, payload) -> Path:
    path = tmp_path / "trip.json"
    text = payload if isinstance(payload, str) else json.dumps(payload)
    path.write_text(text, encoding="utf-8")
    return path


def _document(**overrides) -> dict:
    document = {
        "id": "trip-1",
        "currency": "EUR",
        "participants": [
            {"id": "alice", "name": "Alice"},
            {"id": "bob", "name": "Bob"},
        ],
        "expenses": [
            {
                "id": "e1",
                "description": "Dinner",
                "amount": "90.00",
                "paidBy": "alice",
                "splitType": "percentage",
                "date": "2024-05-01",
                "participants": [
                    {"userId": "alice", "name": "Alice", "value": 60},
                    {"userId": "bob", "value": "40"},
                ],
            }
        ],
    }
    document.update(overrides)
    return document


def test_fetches_participants_and_expenses(tmp_path: Path) -> None:
    """The source should map the document into domain models."""
    source = JsonTripFileSource(_write(tmp_path, _document()), logger=MagicMock())

    participants = source.fetch_participants("trip-1")
    expenses = source.fetch_expenses("trip-1")

    assert source.trip_id == "trip-1"
    assert source.currency == "EUR"
    assert [(p.user_id, p.name) for p in participants] == [
        ("alice", "Alice"),
        ("bob", "Bob"),
    ]
    assert len(expenses) == 1
    expense = expenses[0]
    assert expense.split_type is SplitType.PERCENTAGE
    assert expense.amount == Decimal("90.00")
    assert expense.currency == "EUR"
    assert expense.trip_id == "trip-1"
    assert [(s.user_id, s.name, s.value) for s in expense.participants] == [
        ("alice", "Alice", Decimal("60")),
        ("bob", "bob", Decimal("40")),
    ]


def test_default_currency_applies_when_document_has_none(tmp_path: Path) -> None:
    """Trips without a currency should use the configured default."""
    document = _document()
    del document["currency"]
    source = JsonTripFileSource(
        _write(tmp_path, document),
        default_currency="GBP",
        logger=MagicMock(),
    )

    assert source.fetch_expenses("trip-1")[0].currency == "GBP"


def test_legacy_expenses_are_converted(tmp_path: Path) -> None:
    """Legacy records should become EQUAL expenses with roster names."""
    document = _document(
        legacyExpenses=[
            {
                "_id": "old-1",
                "amount": 20,
                "paidBy": "bob",
                "sharedBy": ["alice", "bob"],
            }
        ]
    )
    source = JsonTripFileSource(_write(tmp_path, document), logger=MagicMock())

    expenses = source.fetch_expenses("trip-1")

    assert [e.id for e in expenses] == ["e1", "old-1"]
    legacy = expenses[1]
    assert legacy.split_type is SplitType.EQUAL
    assert [s.name for s in legacy.participants] == ["Alice", "Bob"]


def test_unconvertible_legacy_expense_raises(tmp_path: Path) -> None:
    """Legacy records with unknown participants should fail the load."""
    document = _document(
        legacyExpenses=[
            {"_id": "old-1", "amount": 20, "paidBy": "bob", "sharedBy": ["zoe"]}
        ]
    )
    logger = MagicMock()
    source = JsonTripFileSource(_write(tmp_path, document), logger=logger)

    with pytest.raises(TripFileError, match="zoe"):
        source.fetch_expenses("trip-1")
    logger.error.assert_called_once()


def test_wrong_trip_id_raises(tmp_path: Path) -> None:
    """Asking for another trip should fail."""
    source = JsonTripFileSource(_write(tmp_path, _document()), logger=MagicMock())

    with pytest.raises(TripFileError, match="trip-2"):
        source.fetch_participants("trip-2")


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        {"participants": []},
        _document(expenses=[{"id": "e1", "amount": "-1", "paidBy": "alice"}]),
        _document(
            expenses=[
                {
                    "id": "e1",
                    "amount": "1",
                    "paidBy": "alice",
                    "splitType": "RANDOM",
                }
            ]
        ),
    ],
)
def test_invalid_documents_raise_trip_file_error(tmp_path: Path, payload) -> None:
    """Malformed JSON and schema violations should raise TripFileError."""
    source = JsonTripFileSource(_write(tmp_path, payload), logger=MagicMock())

    with pytest.raises(TripFileError):
        source.fetch_expenses("trip-1")


def test_missing_file_raises(tmp_path: Path) -> None:
    """Unreadable files should raise TripFileError."""
    source = JsonTripFileSource(tmp_path / "nope.json", logger=MagicMock())

    with pytest.raises(TripFileError, match="Cannot read"):
        _ = source.trip_id
