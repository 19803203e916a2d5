"""
Ledger errors.

Every failure inside the ledger engine surfaces as one of these, so callers
can tell an unknown participant from a bad split without parsing messages.
"""


class LedgerError(Exception):
    """Base class for all ledger engine failures."""

    kind = "ledger_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownParticipant(LedgerError):
    kind = "unknown_participant"

    def __init__(self, participant_id: str):
        super().__init__(f"Unknown participant: {participant_id}")
        self.participant_id = participant_id


class DuplicateParticipant(LedgerError):
    kind = "duplicate_participant"

    def __init__(self, participant_id: str):
        super().__init__(f"Participant already registered: {participant_id}")
        self.participant_id = participant_id


class InvalidSplit(LedgerError):
    kind = "invalid_split"


class InvalidAmount(LedgerError):
    kind = "invalid_amount"


class InvalidPayment(LedgerError):
    kind = "invalid_payment"
