"""Application port for reading trip expenses."""

from typing import Protocol

from src.domain.models import Expense, Participant


class ExpenseSourcePort(Protocol):
    """Port exposing the roster and expenses of a trip."""

    def fetch_participants(self, trip_id: str) -> list[Participant]:
        """Return the validated roster of the trip."""

    def fetch_expenses(self, trip_id: str) -> list[Expense]:
        """Return the expenses recorded for the trip."""


__all__ = ["ExpenseSourcePort"]
