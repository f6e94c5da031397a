"""Domain package for splitting rules and core models."""

from .constants import DEFAULT_CURRENCY, MONEY_TOLERANCE
from .errors import (
    ExpenseCalculationError,
    InconsistentBalancesError,
    InvalidSplitError,
    SplitterError,
)
from .models import (
    BalanceCalculationResult,
    DebtRelationship,
    Expense,
    LegacyConversionResult,
    Participant,
    Settlement,
    SettlementSummary,
    ShareSpec,
    SplitType,
    UserBalance,
)
from .services import (
    calculate_balances,
    compute_expense_shares,
    convert_legacy_expense,
    format_money,
    optimize_settlements,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "MONEY_TOLERANCE",
    "SplitterError",
    "ExpenseCalculationError",
    "InvalidSplitError",
    "InconsistentBalancesError",
    "BalanceCalculationResult",
    "DebtRelationship",
    "Expense",
    "LegacyConversionResult",
    "Participant",
    "Settlement",
    "SettlementSummary",
    "ShareSpec",
    "SplitType",
    "UserBalance",
    "calculate_balances",
    "compute_expense_shares",
    "convert_legacy_expense",
    "format_money",
    "optimize_settlements",
]
