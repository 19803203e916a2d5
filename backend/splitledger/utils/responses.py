"""JSON error responses for ledger failures."""
import logging

from flask import jsonify

from splitledger.core import DuplicateParticipant, LedgerError, UnknownParticipant

logger = logging.getLogger(__name__)

_STATUS = {
    UnknownParticipant: 404,
    DuplicateParticipant: 409,
}


def ledger_error_response(error: LedgerError):
    logger.warning("Rejected: %s", error.message)
    status = _STATUS.get(type(error), 400)
    return jsonify({"error": error.message, "kind": error.kind}), status


def bad_request(message: str):
    return jsonify({"error": message}), 400
