"""Per-app ledger state: one directory, factory and ledger per Flask app."""
import logging

from flask import current_app

from splitledger.core import BalanceLedger, ExpenseFactory, ParticipantDirectory
from splitledger.participants.seed import DEFAULT_PARTICIPANTS, load_participants, seed_directory

logger = logging.getLogger(__name__)

EXTENSION_KEY = "splitledger"


class LedgerState:
    """Everything a request needs to read or change balances."""

    def __init__(self):
        self.directory = ParticipantDirectory()
        self.factory = ExpenseFactory(self.directory)
        self.ledger = BalanceLedger(self.directory)

    def record_expense(self, kind, amount, payer_id, descriptors, description=""):
        """Create an expense and apply it to the ledger in one go."""
        expense = self.factory.create_expense(kind, amount, payer_id, descriptors, description)
        self.ledger.apply_expense(expense)
        return expense


def init_ledger(app):
    state = LedgerState()

    if app.config.get("SEED_DEFAULT_PARTICIPANTS"):
        seed_directory(state.directory, DEFAULT_PARTICIPANTS)

    participants_file = app.config.get("PARTICIPANTS_FILE")
    if participants_file:
        seed_directory(state.directory, load_participants(participants_file))

    app.extensions[EXTENSION_KEY] = state
    logger.info("[Ledger] Initialized with %d participants", len(state.directory))
    return state


def get_state():
    """Get the ledger state of the current app. Must be called after init_ledger."""
    try:
        return current_app.extensions[EXTENSION_KEY]
    except KeyError:
        raise RuntimeError("Ledger not initialized. Call init_ledger first.")
