"""Greedy settlement minimization over net balances."""

from collections.abc import Mapping
from decimal import Decimal

from src.domain.models import Settlement
from src.domain.services.currency import is_zero, round_money, subtract


def optimize_settlements(
    net_balances: Mapping[str, Decimal],
    names: Mapping[str, str],
) -> list[Settlement]:
    """Build a short list of payments that zeroes every balance.

    Creditors and debtors are each sorted by the size of their balance
    (largest first, input order on ties) and the largest creditor is
    matched with the largest debtor until one side is exhausted. The plan
    never holds more than ``creditors + debtors - 1`` payments; it is not
    guaranteed to be the global minimum.

    Args:
        net_balances: Net balance per participant (positive means owed).
        names: Display name per participant.

    Returns:
        list[Settlement]: Payments sorted by amount, largest first.
    """
    creditors: list[list] = []
    debtors: list[list] = []
    for user_id, balance in net_balances.items():
        amount = round_money(balance)
        if is_zero(amount):
            continue
        if amount > 0:
            creditors.append([user_id, amount])
        else:
            debtors.append([user_id, abs(amount)])

    creditors.sort(key=lambda item: item[1], reverse=True)
    debtors.sort(key=lambda item: item[1], reverse=True)

    settlements: list[Settlement] = []
    creditor_index = 0
    debtor_index = 0
    while creditor_index < len(creditors) and debtor_index < len(debtors):
        creditor, credit = creditors[creditor_index]
        debtor, debt = debtors[debtor_index]
        settle_amount = min(credit, debt)

        if not is_zero(settle_amount):
            settlements.append(
                Settlement(
                    from_user=debtor,
                    from_name=names.get(debtor, debtor),
                    to_user=creditor,
                    to_name=names.get(creditor, creditor),
                    amount=settle_amount,
                )
            )

        creditors[creditor_index][1] = subtract(credit, settle_amount)
        debtors[debtor_index][1] = subtract(debt, settle_amount)
        if is_zero(creditors[creditor_index][1]):
            creditor_index += 1
        if is_zero(debtors[debtor_index][1]):
            debtor_index += 1

    settlements.sort(key=lambda settlement: settlement.amount, reverse=True)
    return settlements


def apply_settlements(
    net_balances: Mapping[str, Decimal],
    settlements: list[Settlement],
) -> dict[str, Decimal]:
    """Return balances after every settlement has been paid."""
    adjusted = {
        user_id: round_money(balance)
        for user_id, balance in net_balances.items()
    }
    for settlement in settlements:
        adjusted[settlement.from_user] = round_money(
            adjusted.get(settlement.from_user, Decimal("0"))
            + settlement.amount
        )
        adjusted[settlement.to_user] = round_money(
            adjusted.get(settlement.to_user, Decimal("0"))
            - settlement.amount
        )
    return adjusted


__all__ = ["optimize_settlements", "apply_settlements"]
