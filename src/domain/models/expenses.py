"""Domain models for expenses and their split specifications."""

from dataclasses import dataclass, field
from datetime import date as date_type
from decimal import Decimal
from enum import Enum

from src.domain.constants import DEFAULT_CURRENCY


class SplitType(str, Enum):
    """Rule governing how an expense total is divided."""

    EQUAL = "EQUAL"
    PERCENTAGE = "PERCENTAGE"
    CUSTOM = "CUSTOM"
    SHARES = "SHARES"


@dataclass(frozen=True)
class ShareSpec:
    """One participant's stake in one expense.

    Attributes:
        user_id: Participant identifier.
        name: Display name of the participant.
        value: Weight, percentage or literal amount depending on the
            expense split type.
        amount: Computed share of the expense, ``None`` until computed.
    """

    user_id: str
    name: str
    value: Decimal = Decimal("1")
    amount: Decimal | None = None


@dataclass(frozen=True)
class Expense:
    """Expense paid by one participant and shared by several.

    Attributes:
        id: Expense identifier.
        description: Free-form description.
        amount: Total paid, in cents precision.
        paid_by: Identifier of the payer.
        split_type: Rule used to compute each participant's share.
        participants: Ordered share specifications, one per sharer.
        currency: Opaque currency tag, never converted.
        paid_by_name: Optional display name of the payer.
    """

    id: str
    description: str
    amount: Decimal
    paid_by: str
    split_type: SplitType = SplitType.EQUAL
    participants: list[ShareSpec] = field(default_factory=list)
    currency: str = DEFAULT_CURRENCY
    paid_by_name: str | None = None
    trip_id: str | None = None
    date: date_type | None = None
    category: str | None = None


@dataclass(frozen=True)
class Participant:
    """Roster entry for a trip participant."""

    user_id: str
    name: str


__all__ = ["SplitType", "ShareSpec", "Expense", "Participant"]
