"""Ledger engine: participants, split strategies, expenses and balances."""

from .errors import (
    LedgerError,
    UnknownParticipant,
    DuplicateParticipant,
    InvalidSplit,
    InvalidAmount,
    InvalidPayment,
)
from .models import Participant, Split, Expense, Payment
from .directory import ParticipantDirectory
from .split_service import SplitCalculator, resolve_splits
from .expense_service import ExpenseFactory
from .ledger_service import BalanceLedger

__all__ = [
    "LedgerError",
    "UnknownParticipant",
    "DuplicateParticipant",
    "InvalidSplit",
    "InvalidAmount",
    "InvalidPayment",
    "Participant",
    "Split",
    "Expense",
    "Payment",
    "ParticipantDirectory",
    "SplitCalculator",
    "resolve_splits",
    "ExpenseFactory",
    "BalanceLedger",
]
