"""Pydantic schemas for JSON trip documents."""

from datetime import date as date_type
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.models import SplitType


class ParticipantSchema(BaseModel):
    """Roster entry of a trip document."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="id", min_length=1)
    name: str = Field(..., min_length=1)


class ShareSchema(BaseModel):
    """Share specification of one participant in one expense."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", min_length=1)
    name: str | None = None
    value: Decimal = Decimal("1")


class ExpenseSchema(BaseModel):
    """Expense entry of a trip document."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    description: str = ""
    amount: Decimal = Field(..., ge=0)
    currency: str | None = None
    paid_by: str = Field(..., alias="paidBy", min_length=1)
    paid_by_name: str | None = Field(default=None, alias="paidByName")
    split_type: SplitType = Field(default=SplitType.EQUAL, alias="splitType")
    participants: list[ShareSchema] = Field(default_factory=list)
    category: str | None = None
    date: date_type | None = None

    @field_validator("split_type", mode="before")
    @classmethod
    def _normalize_split_type(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


class TripDocument(BaseModel):
    """Top-level JSON trip document."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str | None = None
    currency: str | None = None
    participants: list[ParticipantSchema] = Field(default_factory=list)
    expenses: list[ExpenseSchema] = Field(default_factory=list)
    legacy_expenses: list[dict[str, Any]] = Field(
        default_factory=list,
        alias="legacyExpenses",
    )


__all__ = [
    "ParticipantSchema",
    "ShareSchema",
    "ExpenseSchema",
    "TripDocument",
]
