"""Balance and settlement engine for a set of expenses."""

import logging
from collections.abc import Iterable, Sequence
from decimal import Decimal
from logging import Logger

from src.domain.constants import ZERO
from src.domain.errors import InconsistentBalancesError
from src.domain.models import (
    BalanceCalculationResult,
    DebtRelationship,
    Expense,
    Participant,
    SettlementSummary,
    UserBalance,
)
from src.domain.services.currency import (
    add,
    divide,
    is_equal,
    is_zero,
    round_money,
    subtract,
)
from src.domain.services.settlement import (
    apply_settlements,
    optimize_settlements,
)
from src.domain.services.shares import compute_expense_shares

DebtGraph = dict[str, dict[str, Decimal]]

_LOGGER = logging.getLogger(__name__)


def calculate_balances(
    expenses: Sequence[Expense],
    roster: Iterable[Participant] = (),
    *,
    logger: Logger | None = None,
) -> BalanceCalculationResult:
    """Compute balances, raw debts and an optimized settlement plan.

    Every roster participant appears in the result, as does anyone who
    paid for or shared an expense. The first malformed expense aborts the
    whole calculation.

    Args:
        expenses: Expenses to process, in input order.
        roster: Known trip participants; defines output completeness and
            the preferred display names.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        BalanceCalculationResult: Balances, debts, settlements and summary.

    Raises:
        ExpenseCalculationError: If an expense split is malformed.
        InconsistentBalancesError: If the internal cross-checks disagree.
    """
    log = logger or _LOGGER
    names = _collect_names(expenses, roster)
    total_paid = {user_id: ZERO for user_id in names}
    total_share = {user_id: ZERO for user_id in names}
    debt_graph: DebtGraph = {}
    total_expenses = ZERO

    for expense in expenses:
        shares = compute_expense_shares(expense)
        amount = round_money(expense.amount)
        total_expenses = add(total_expenses, amount)
        total_paid[expense.paid_by] = add(total_paid[expense.paid_by], amount)
        for share in shares:
            total_share[share.user_id] = add(
                total_share[share.user_id],
                share.amount,
            )
            if share.user_id != expense.paid_by:
                _add_debt(debt_graph, share.user_id, expense.paid_by, share.amount)

    user_balances = _build_user_balances(names, total_paid, total_share)
    net_balances = fold_debt_graph(debt_graph, names)
    _check_consistency(user_balances, net_balances)

    settlements = optimize_settlements(net_balances, names)
    leftovers = apply_settlements(net_balances, settlements)
    unsettled = [
        user_id for user_id, balance in leftovers.items() if not is_zero(balance)
    ]
    if unsettled:
        raise InconsistentBalancesError(
            f"Settlement plan leaves balances open for: {', '.join(unsettled)}"
        )

    debt_relationships = build_debt_relationships(debt_graph, names)
    user_balances.sort(key=lambda row: row.balance, reverse=True)
    summary = SettlementSummary(
        total_transactions=len(settlements),
        total_settlement_amount=add(*(s.amount for s in settlements)),
        average_per_person=(
            divide(total_expenses, len(names)) if names else ZERO
        ),
        is_balanced=all(is_zero(row.balance) for row in user_balances),
    )
    log.info(
        f"Balances computed: expenses={len(expenses)}, "
        f"participants={len(names)}, total={total_expenses}, "
        f"settlements={summary.total_transactions}"
    )
    return BalanceCalculationResult(
        user_balances=user_balances,
        debt_relationships=debt_relationships,
        settlements=settlements,
        total_expenses=total_expenses,
        summary=summary,
    )


def fold_debt_graph(
    debt_graph: DebtGraph,
    participants: Iterable[str],
) -> dict[str, Decimal]:
    """Derive net balances from a debtor -> creditor graph.

    Args:
        debt_graph: Accumulated debts keyed by debtor then creditor.
        participants: Participants to include even without debts.

    Returns:
        dict[str, Decimal]: Net balance per participant.
    """
    net = {user_id: ZERO for user_id in participants}
    for debtor, creditors in debt_graph.items():
        for creditor, amount in creditors.items():
            net[debtor] = subtract(net.get(debtor, ZERO), amount)
            net[creditor] = add(net.get(creditor, ZERO), amount)
    return net


def build_debt_relationships(
    debt_graph: DebtGraph,
    names: dict[str, str],
) -> list[DebtRelationship]:
    """Flatten the debt graph into relationships, largest first."""
    relationships = [
        DebtRelationship(
            debtor=debtor,
            debtor_name=names.get(debtor, debtor),
            creditor=creditor,
            creditor_name=names.get(creditor, creditor),
            amount=round_money(amount),
        )
        for debtor, creditors in debt_graph.items()
        for creditor, amount in creditors.items()
        if not is_zero(amount)
    ]
    relationships.sort(key=lambda relation: relation.amount, reverse=True)
    return relationships


def _collect_names(
    expenses: Sequence[Expense],
    roster: Iterable[Participant],
) -> dict[str, str]:
    # Roster names win; expense data only names ids the roster lacks.
    names: dict[str, str] = {}
    for participant in roster:
        names.setdefault(participant.user_id, participant.name)
    for expense in expenses:
        if expense.paid_by_name:
            names.setdefault(expense.paid_by, expense.paid_by_name)
        for share in expense.participants:
            names.setdefault(share.user_id, share.name or share.user_id)
        names.setdefault(expense.paid_by, expense.paid_by)
    return names


def _add_debt(
    debt_graph: DebtGraph,
    debtor: str,
    creditor: str,
    amount: Decimal,
) -> None:
    if is_zero(amount):
        return
    creditors = debt_graph.setdefault(debtor, {})
    creditors[creditor] = add(creditors.get(creditor, ZERO), amount)


def _build_user_balances(
    names: dict[str, str],
    total_paid: dict[str, Decimal],
    total_share: dict[str, Decimal],
) -> list[UserBalance]:
    rows = []
    for user_id, name in names.items():
        balance = subtract(total_paid[user_id], total_share[user_id])
        rows.append(
            UserBalance(
                user_id=user_id,
                name=name,
                total_paid=total_paid[user_id],
                total_share=total_share[user_id],
                total_owed=abs(balance) if balance < 0 else ZERO,
                balance=balance,
            )
        )
    return rows


def _check_consistency(
    user_balances: list[UserBalance],
    net_balances: dict[str, Decimal],
) -> None:
    mismatched = [
        row.user_id
        for row in user_balances
        if not is_equal(row.balance, net_balances.get(row.user_id, ZERO))
    ]
    if mismatched:
        raise InconsistentBalancesError(
            "Accumulated balances disagree with the debt graph for: "
            f"{', '.join(mismatched)}"
        )
    balance_sum = add(*(row.balance for row in user_balances))
    if not is_zero(balance_sum):
        raise InconsistentBalancesError(
            f"Balances do not sum to zero: {balance_sum}"
        )


__all__ = [
    "calculate_balances",
    "fold_debt_graph",
    "build_debt_relationships",
]
