"""Domain exceptions for expense splitting and settlement."""


class SplitterError(Exception):
    """Base class for every error raised by the splitting engine."""


class CurrencyError(SplitterError, ValueError):
    """Raised by the currency arithmetic helpers."""


class InvalidAmountError(CurrencyError):
    """Raised when a value cannot be represented as money."""


class InvalidDistributionError(CurrencyError):
    """Raised when a total cannot be distributed among participants."""


class InvalidPercentageSumError(CurrencyError):
    """Raised when percentages do not add up to 100."""


class InvalidShareWeightsError(CurrencyError):
    """Raised when share weights are negative or sum to zero."""


class CurrencyDivisionByZeroError(CurrencyError, ZeroDivisionError):
    """Raised when dividing a monetary amount by zero."""


class ExpenseCalculationError(SplitterError, ValueError):
    """Raised when a single expense cannot be split.

    Attributes:
        reason: Human readable description of the problem.
        expense_id: Identifier of the offending expense.
        description: Description of the offending expense.
    """

    def __init__(
        self,
        reason: str,
        *,
        expense_id: str | None = None,
        description: str | None = None,
    ) -> None:
        self.reason = reason
        self.expense_id = expense_id
        self.description = description
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.expense_id is None:
            return self.reason
        label = f"Expense {self.expense_id}"
        if self.description:
            label += f" ({self.description})"
        return f"{label}: {self.reason}"


class InvalidSplitError(ExpenseCalculationError):
    """Raised when a split specification does not match the expense."""


class ExpenseDistributionError(ExpenseCalculationError):
    """Raised when an expense total cannot be distributed."""


class InconsistentBalancesError(SplitterError, RuntimeError):
    """Raised when the engine's internal balance cross-check fails."""


class TripFileError(SplitterError, ValueError):
    """Raised when a trip document cannot be read or validated."""


__all__ = [
    "SplitterError",
    "CurrencyError",
    "InvalidAmountError",
    "InvalidDistributionError",
    "InvalidPercentageSumError",
    "InvalidShareWeightsError",
    "CurrencyDivisionByZeroError",
    "ExpenseCalculationError",
    "InvalidSplitError",
    "ExpenseDistributionError",
    "InconsistentBalancesError",
    "TripFileError",
]
