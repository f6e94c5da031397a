"""Domain models package."""

from .balances import (
    BalanceCalculationResult,
    DebtRelationship,
    Settlement,
    SettlementSummary,
    UserBalance,
)
from .expenses import Expense, Participant, ShareSpec, SplitType
from .legacy import LegacyConversionResult

__all__ = [
    "SplitType",
    "ShareSpec",
    "Expense",
    "Participant",
    "UserBalance",
    "DebtRelationship",
    "Settlement",
    "SettlementSummary",
    "BalanceCalculationResult",
    "LegacyConversionResult",
]
