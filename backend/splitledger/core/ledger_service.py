"""
Balance Ledger - Pairwise balances between participants.

Responsibilities:
- Apply an expense's splits as balance deltas
- Apply direct payments as balance deltas
- Answer balance queries
- Keep an audit log of applied expenses and payments

Balances are stored once per unordered pair, keyed by (lower id, higher id).
The stored value is balance[lower][higher], the amount the higher id owes the
lower id; balance[higher][lower] is its negation, so the two directions can
never disagree.
"""
import logging
import threading
from decimal import Decimal
from typing import Dict, List, Tuple

from splitledger.utils.money import ZERO, to_decimal

from .directory import ParticipantDirectory
from .errors import InvalidAmount, InvalidPayment
from .models import Expense, Payment

logger = logging.getLogger(__name__)


def _pair_key(a: str, b: str) -> Tuple[str, str]:
    return (a, b) if a < b else (b, a)


class BalanceLedger:
    """
    Pairwise balance store.

    balance[A][B] > 0 means B owes A; < 0 means A owes B.
    """

    def __init__(self, directory: ParticipantDirectory):
        self.directory = directory
        self._balances: Dict[Tuple[str, str], Decimal] = {}
        self._expenses: List[Expense] = []
        self._payments: List[Payment] = []
        self._lock = threading.RLock()

    # ---------- mutations ----------

    def _credit(self, creditor: str, debtor: str, amount: Decimal) -> None:
        """balance[creditor][debtor] += amount (and the mirror -= amount)."""
        if creditor == debtor:
            return
        key = _pair_key(creditor, debtor)
        delta = amount if key[0] == creditor else -amount
        value = self._balances.get(key, ZERO) + delta
        if value == ZERO:
            self._balances.pop(key, None)
        else:
            self._balances[key] = value

    def apply_expense(self, expense: Expense) -> None:
        """
        Record that the payer covered everyone's share.

        Each split participant other than the payer now owes the payer their
        share. The payer's own split is skipped.
        """
        self.directory.require(expense.payer_id, *(s.participant_id for s in expense.splits))

        with self._lock:
            for split in expense.splits:
                self._credit(expense.payer_id, split.participant_id, split.amount)
            self._expenses.append(expense)

        logger.info(
            "Applied %s expense %s: %s paid %s",
            expense.kind.name, expense.id, expense.payer_id, expense.amount,
        )

    def apply_payment(self, payer_id: str, payee_id: str, amount) -> Payment:
        """
        Record a direct payment from payer to payee.

        Overpaying is allowed and simply flips who owes whom.

        Raises:
            UnknownParticipant: either id is not registered
            InvalidAmount: amount is not a positive number
            InvalidPayment: payer and payee are the same participant
        """
        self.directory.require(payer_id, payee_id)
        if payer_id == payee_id:
            raise InvalidPayment(f"{payer_id} cannot pay themselves")
        try:
            value = to_decimal(amount)
        except ValueError:
            raise InvalidAmount(f"Invalid payment amount: {amount!r}")
        if value <= ZERO:
            raise InvalidAmount(f"Payment amount must be positive, got {value}")

        payment = Payment(payer_id=payer_id, payee_id=payee_id, amount=value)
        with self._lock:
            self._credit(payer_id, payee_id, value)
            self._payments.append(payment)

        logger.info("Applied payment %s: %s paid %s to %s", payment.id, payer_id, value, payee_id)
        return payment

    # ---------- reads ----------

    def _get(self, a: str, b: str) -> Decimal:
        if a == b:
            return ZERO
        key = _pair_key(a, b)
        value = self._balances.get(key, ZERO)
        return value if key[0] == a else -value

    def net_balance(self, a: str, b: str) -> Decimal:
        """Signed balance[a][b]: positive if b owes a, negative if a owes b."""
        self.directory.require(a, b)
        with self._lock:
            return self._get(a, b)

    def balances_for(self, participant_id: str) -> List[Tuple[str, Decimal]]:
        """All non-zero (other, balance[participant][other]) pairs, sorted by other id."""
        self.directory.require(participant_id)
        with self._lock:
            result = []
            for (low, high), value in self._balances.items():
                if participant_id == low:
                    result.append((high, value))
                elif participant_id == high:
                    result.append((low, -value))
        return sorted(result, key=lambda item: item[0])

    def all_non_zero_balances(self) -> List[Tuple[str, str, Decimal]]:
        """
        Every outstanding debt once, as (creditor, debtor, amount) with amount > 0.

        Sorted by creditor id, then debtor id.
        """
        with self._lock:
            result = []
            for (low, high), value in self._balances.items():
                if value > ZERO:
                    result.append((low, high, value))
                elif value < ZERO:
                    result.append((high, low, -value))
        return sorted(result, key=lambda item: (item[0], item[1]))

    def is_settled(self, a: str, b: str) -> bool:
        """True when neither participant owes the other anything."""
        return self.net_balance(a, b) == ZERO and self.net_balance(b, a) == ZERO

    def expenses(self) -> List[Expense]:
        with self._lock:
            return list(self._expenses)

    def payments(self) -> List[Payment]:
        with self._lock:
            return list(self._payments)
