"""Expense source backed by a JSON trip document."""

import json
from pathlib import Path

from pydantic import ValidationError

from src.domain.constants import DEFAULT_CURRENCY
from src.domain.errors import TripFileError
from src.domain.models import Expense, Participant, ShareSpec
from src.domain.services.legacy import convert_legacy_expense
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.trip_schema import ExpenseSchema, TripDocument


class JsonTripFileSource:
    """ExpenseSourcePort implementation reading one JSON trip document.

    The document is parsed once, on first access, and validated with the
    pydantic schemas in ``trip_schema``. Legacy expense records are
    converted to EQUAL splits using roster names.
    """

    def __init__(
        self,
        path: Path | str,
        default_currency: str = DEFAULT_CURRENCY,
        logger=None,
    ) -> None:
        self._path = Path(path)
        self._default_currency = default_currency
        self._logger = logger or get_app_logger()
        self._document: TripDocument | None = None

    @property
    def trip_id(self) -> str:
        """Return the identifier of the trip stored in the document."""
        return self._load().id

    @property
    def currency(self) -> str:
        """Return the trip currency, falling back to the default."""
        return self._load().currency or self._default_currency

    def fetch_participants(self, trip_id: str) -> list[Participant]:
        """Return the roster of the trip."""
        document = self._load_trip(trip_id)
        return [
            Participant(user_id=row.user_id, name=row.name)
            for row in document.participants
        ]

    def fetch_expenses(self, trip_id: str) -> list[Expense]:
        """Return the trip expenses, legacy records included.

        Raises:
            TripFileError: If a legacy record cannot be converted.
        """
        document = self._load_trip(trip_id)
        expenses = [self._to_expense(row, document) for row in document.expenses]
        names = {row.user_id: row.name for row in document.participants}
        for record in document.legacy_expenses:
            conversion = convert_legacy_expense(record, names)
            if not conversion.ok:
                self._logger.error(conversion.error)
                raise TripFileError(conversion.error)
            expenses.append(conversion.expense)
        if document.legacy_expenses:
            self._logger.info(
                f"Converted {len(document.legacy_expenses)} legacy expenses "
                f"for trip {trip_id}"
            )
        return expenses

    def _to_expense(self, row: ExpenseSchema, document: TripDocument) -> Expense:
        return Expense(
            id=row.id,
            description=row.description,
            amount=row.amount,
            paid_by=row.paid_by,
            paid_by_name=row.paid_by_name,
            split_type=row.split_type,
            participants=[
                ShareSpec(
                    user_id=share.user_id,
                    name=share.name or share.user_id,
                    value=share.value,
                )
                for share in row.participants
            ],
            currency=row.currency or self.currency,
            trip_id=document.id,
            date=row.date,
            category=row.category,
        )

    def _load_trip(self, trip_id: str) -> TripDocument:
        document = self._load()
        if document.id != trip_id:
            raise TripFileError(
                f"Trip file {self._path} holds trip {document.id}, "
                f"not {trip_id}"
            )
        return document

    def _load(self) -> TripDocument:
        if self._document is not None:
            return self._document
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise TripFileError(
                f"Cannot read trip file {self._path}: {exc}"
            ) from exc
        except json.JSONDecodeError as exc:
            raise TripFileError(
                f"Trip file {self._path} is not valid JSON: {exc}"
            ) from exc
        try:
            self._document = TripDocument.model_validate(payload)
        except ValidationError as exc:
            raise TripFileError(
                f"Trip file {self._path} is invalid: {exc}"
            ) from exc
        self._logger.info(
            f"Loaded trip {self._document.id} from {self._path}: "
            f"{len(self._document.expenses)} expenses"
        )
        return self._document


__all__ = ["JsonTripFileSource"]
