"""Domain models for converting legacy expense records."""

from dataclasses import dataclass

from src.domain.models.expenses import Expense


@dataclass(frozen=True)
class LegacyConversionResult:
    """Tagged result of a legacy expense conversion.

    Exactly one of ``expense`` and ``error`` is set.
    """

    expense: Expense | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Return True when the conversion succeeded."""
        return self.expense is not None

    @classmethod
    def success(cls, expense: Expense) -> "LegacyConversionResult":
        return cls(expense=expense)

    @classmethod
    def failure(cls, error: str) -> "LegacyConversionResult":
        return cls(error=error)


__all__ = ["LegacyConversionResult"]
