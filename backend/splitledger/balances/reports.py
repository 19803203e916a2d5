"""
Text reports for balances and payments.

A negative balance[A][B] reads "A owes B"; a positive one "B owes A".
Zero balances are not reported.
"""
from decimal import Decimal
from typing import List, Optional

from splitledger.core import BalanceLedger, ParticipantDirectory
from splitledger.utils.money import ZERO, format_money

NO_BALANCES = "No balances"


def _name(directory: ParticipantDirectory, participant_id: str) -> str:
    return directory.lookup(participant_id).name


def format_debt(directory: ParticipantDirectory, a: str, b: str, amount: Decimal) -> Optional[str]:
    """
    Render balance[a][b] as "<debtor> owes <creditor>: 0.00", or None if settled.

    Sub-cent balances round half-up for display but are still reported.
    """
    if amount == ZERO:
        return None
    if amount < ZERO:
        debtor, creditor = a, b
    else:
        debtor, creditor = b, a
    return f"{_name(directory, debtor)} owes {_name(directory, creditor)}: {format_money(abs(amount))}"


def balance_lines_for(ledger: BalanceLedger, participant_id: str) -> List[str]:
    return [
        format_debt(ledger.directory, participant_id, other, amount)
        for other, amount in ledger.balances_for(participant_id)
    ]


def all_balance_lines(ledger: BalanceLedger) -> List[str]:
    return [
        format_debt(ledger.directory, creditor, debtor, amount)
        for creditor, debtor, amount in ledger.all_non_zero_balances()
    ]


def payment_line(directory: ParticipantDirectory, payer_id: str, payee_id: str, amount: Decimal) -> str:
    return f"{_name(directory, payer_id)} paid {format_money(amount)} to {_name(directory, payee_id)}"


def settled_line(directory: ParticipantDirectory, a: str, b: str) -> str:
    return f"All balances between {_name(directory, a)} and {_name(directory, b)} are clear."
