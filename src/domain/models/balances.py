"""Domain models for balance calculation results."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class UserBalance:
    """Per-participant totals for one calculation.

    Attributes:
        user_id: Participant identifier.
        name: Display name.
        total_paid: Sum of expenses paid by the participant.
        total_share: Sum of the participant's shares across expenses.
        total_owed: Amount the participant still owes (0 for creditors).
        balance: ``total_paid - total_share``; positive means others owe
            the participant money.
    """

    user_id: str
    name: str
    total_paid: Decimal
    total_share: Decimal
    total_owed: Decimal
    balance: Decimal


@dataclass(frozen=True)
class DebtRelationship:
    """Raw obligation from a debtor to a creditor across expenses."""

    debtor: str
    debtor_name: str
    creditor: str
    creditor_name: str
    amount: Decimal


@dataclass(frozen=True)
class Settlement:
    """Payment instruction in the optimized settlement plan."""

    from_user: str
    from_name: str
    to_user: str
    to_name: str
    amount: Decimal


@dataclass(frozen=True)
class SettlementSummary:
    """Summary figures for a settlement plan."""

    total_transactions: int
    total_settlement_amount: Decimal
    average_per_person: Decimal
    is_balanced: bool


@dataclass(frozen=True)
class BalanceCalculationResult:
    """Balances, raw debts and optimized settlements for a set of expenses."""

    user_balances: list[UserBalance]
    debt_relationships: list[DebtRelationship]
    settlements: list[Settlement]
    total_expenses: Decimal
    summary: SettlementSummary

    def balance_for(self, user_id: str) -> UserBalance | None:
        """Return the balance row for ``user_id`` if present."""
        for row in self.user_balances:
            if row.user_id == user_id:
                return row
        return None


__all__ = [
    "UserBalance",
    "DebtRelationship",
    "Settlement",
    "SettlementSummary",
    "BalanceCalculationResult",
]
