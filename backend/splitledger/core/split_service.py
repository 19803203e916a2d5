"""
Split Strategy - Resolve an expense total into per-participant amounts.

Responsibilities:
- Calculate equal splits (rounding remainder goes to the first participant)
- Use exact amounts per participant
- Calculate percentage splits
- Validate that resolved splits sum to the total

Every strategy is a pure function of its inputs.
"""
from decimal import Decimal
from typing import Any, Callable, Dict, List, Mapping, Sequence, Tuple, Union

from splitledger.utils.enums import SplitKind
from splitledger.utils.money import HUNDRED, ZERO, round_cents, to_decimal

from .errors import InvalidAmount, InvalidSplit
from .models import Split

# (participant_id, value) pairs, or a mapping of participant_id -> value
ShareDescriptors = Union[Sequence[Tuple[str, Any]], Mapping[str, Any]]


def _normalize_shares(descriptors: ShareDescriptors, label: str) -> List[Tuple[str, Decimal]]:
    """Turn descriptors into an ordered list of (participant_id, Decimal value)."""
    items = descriptors.items() if isinstance(descriptors, Mapping) else descriptors
    shares = []
    seen = set()
    for item in items:
        try:
            participant_id, raw_value = item
        except (TypeError, ValueError):
            raise InvalidSplit(f"Expected (participant, {label}) pairs, got {item!r}")
        if participant_id in seen:
            raise InvalidSplit(f"Participant {participant_id} listed more than once")
        seen.add(participant_id)
        try:
            value = to_decimal(raw_value)
        except ValueError:
            raise InvalidSplit(f"Invalid {label} for {participant_id}: {raw_value!r}")
        if value < 0:
            raise InvalidSplit(f"Negative {label} for participant {participant_id}")
        shares.append((participant_id, value))
    if not shares:
        raise InvalidSplit("No participants provided")
    return shares


def _participant_ids(descriptors: Sequence[Any]) -> List[str]:
    """Participant ids for an equal split; (id, ignored) pairs are accepted too."""
    ids = []
    for item in descriptors:
        if isinstance(item, str):
            participant_id = item
        elif isinstance(item, Sequence) and len(item) == 2 and isinstance(item[0], str):
            participant_id = item[0]
        else:
            raise InvalidSplit(f"Expected participant ids, got {item!r}")
        if participant_id in ids:
            raise InvalidSplit(f"Participant {participant_id} listed more than once")
        ids.append(participant_id)
    return ids


class SplitCalculator:
    """Split calculations for the three split kinds."""

    @classmethod
    def calculate_equal_split(cls, total: Decimal, participant_ids: Sequence[Any]) -> List[Split]:
        """
        Split the total equally.

        Each share is the total divided by N, rounded half-up to the cent.
        The first participant absorbs whatever the rounding left over, so
        the shares always add back up to the total.

        Args:
            total: Expense amount
            participant_ids: Participant ids, in order

        Returns:
            List of Split, one per participant
        """
        ids = _participant_ids(participant_ids)
        if not ids:
            raise InvalidSplit("Equal split needs at least one participant")

        n = len(ids)
        try:
            base = round_cents(total / n)
        except ValueError:
            raise InvalidAmount(f"{total} is too large to split {n} ways")
        first_share = base + (total - base * n)
        if first_share < ZERO:
            raise InvalidSplit(f"{total} is too small to split {n} ways")

        return [
            Split(participant_id=pid, amount=first_share if i == 0 else base)
            for i, pid in enumerate(ids)
        ]

    @classmethod
    def calculate_exact_split(cls, total: Decimal, exact_amounts: ShareDescriptors) -> List[Split]:
        """
        Use exact amounts per participant.

        Raises:
            InvalidSplit: if the amounts do not add up to the total
        """
        shares = _normalize_shares(exact_amounts, "amount")

        amounts_sum = sum((value for _, value in shares), ZERO)
        if amounts_sum != total:
            raise InvalidSplit(f"Amounts sum to {amounts_sum}, expected {total}")

        return [Split(participant_id=pid, amount=value) for pid, value in shares]

    @classmethod
    def calculate_percentage_split(cls, total: Decimal, percentages: ShareDescriptors) -> List[Split]:
        """
        Split by percentage: amount = total * percent / 100.

        Raises:
            InvalidSplit: if the percentages do not add up to 100
        """
        shares = _normalize_shares(percentages, "percentage")

        total_pct = sum((value for _, value in shares), ZERO)
        if total_pct != HUNDRED:
            raise InvalidSplit(f"Percentages must sum to 100, got {total_pct}")

        return [
            Split(participant_id=pid, amount=total * pct / HUNDRED, percent=pct)
            for pid, pct in shares
        ]

    @classmethod
    def strategy_for(cls, kind: SplitKind) -> Callable[[Decimal, Any], List[Split]]:
        return _STRATEGIES[kind]


_STRATEGIES: Dict[SplitKind, Callable[[Decimal, Any], List[Split]]] = {
    SplitKind.EQUAL: SplitCalculator.calculate_equal_split,
    SplitKind.EXACT: SplitCalculator.calculate_exact_split,
    SplitKind.PERCENT: SplitCalculator.calculate_percentage_split,
}


def resolve_splits(kind: SplitKind, total: Decimal, descriptors) -> List[Split]:
    """Resolve descriptors with the strategy for `kind`."""
    return SplitCalculator.strategy_for(kind)(total, descriptors)
