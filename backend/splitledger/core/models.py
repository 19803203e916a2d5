"""
Ledger data models.

All records are frozen: a Split's amount comes from a split strategy and an
Expense is never edited after the factory builds it.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from splitledger.utils.enums import SplitKind
from splitledger.utils.money import as_float


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Participant:
    """Someone who can pay or owe. Contact fields are only used in reports."""
    id: str
    name: str
    email: str = ""
    phone: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
        }


@dataclass(frozen=True)
class Split:
    """One participant's resolved share of an expense."""
    participant_id: str
    amount: Decimal
    percent: Optional[Decimal] = None  # PERCENT splits only

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "participant_id": self.participant_id,
            "amount": as_float(self.amount),
        }
        if self.percent is not None:
            data["percent"] = as_float(self.percent)
        return data


@dataclass(frozen=True)
class Expense:
    kind: SplitKind
    amount: Decimal
    payer_id: str
    splits: Tuple[Split, ...]
    description: str = ""
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)

    def share_of(self, participant_id: str) -> Decimal:
        """Total owed by a participant in this expense (0 if not in it)."""
        return sum(
            (s.amount for s in self.splits if s.participant_id == participant_id),
            Decimal("0"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "split_type": self.kind.value,
            "amount": as_float(self.amount),
            "payer_id": self.payer_id,
            "description": self.description,
            "splits": [s.to_dict() for s in self.splits],
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class Payment:
    """A direct transfer from payer to payee, outside any expense."""
    payer_id: str
    payee_id: str
    amount: Decimal
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "payer_id": self.payer_id,
            "payee_id": self.payee_id,
            "amount": as_float(self.amount),
            "created_at": self.created_at.isoformat(),
        }
