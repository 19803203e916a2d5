"""
Expense Factory - Validate a requested expense and build the Expense record.

Responsibilities:
- Validate the total amount
- Check that the payer and every split participant are registered
- Dispatch to the split strategy for the requested kind
- Verify the resolved splits add up to the total

The factory never touches the ledger; applying the expense is the caller's job.
"""
import logging
from typing import Any

from splitledger.utils.enums import SplitKind
from splitledger.utils.money import ZERO, to_decimal

from .directory import ParticipantDirectory
from .errors import InvalidAmount, InvalidSplit
from .models import Expense
from .split_service import resolve_splits

logger = logging.getLogger(__name__)


class ExpenseFactory:
    """Single place where new Expense records come into existence."""

    def __init__(self, directory: ParticipantDirectory):
        self.directory = directory

    def create_expense(
        self,
        kind: Any,
        amount: Any,
        payer_id: str,
        descriptors: Any,
        description: str = "",
    ) -> Expense:
        """
        Create an expense with resolved splits.

        Args:
            kind: SplitKind or its name ("EQUAL", "EXACT", "PERCENT")
            amount: Total amount, must be > 0
            payer_id: Participant who paid
            descriptors: Participant ids (EQUAL) or (participant, value)
                pairs / mapping (EXACT, PERCENT)
            description: Free text

        Returns:
            The new Expense

        Raises:
            InvalidAmount, InvalidSplit, UnknownParticipant
        """
        try:
            split_kind = SplitKind.parse(kind)
        except ValueError as e:
            raise InvalidSplit(str(e))

        try:
            total = to_decimal(amount)
        except ValueError:
            raise InvalidAmount(f"Invalid expense amount: {amount!r}")
        if total <= ZERO:
            raise InvalidAmount(f"Expense amount must be positive, got {total}")

        self.directory.lookup(payer_id)

        splits = resolve_splits(split_kind, total, descriptors)
        self.directory.require(*(s.participant_id for s in splits))

        splits_sum = sum((s.amount for s in splits), ZERO)
        if splits_sum != total:
            raise InvalidSplit(f"Splits sum to {splits_sum}, expected {total}")

        expense = Expense(
            kind=split_kind,
            amount=total,
            payer_id=payer_id,
            splits=tuple(splits),
            description=description or "",
        )
        logger.debug(
            "Created %s expense %s: %s paid %s split %d ways",
            split_kind.name, expense.id, payer_id, total, len(splits),
        )
        return expense
