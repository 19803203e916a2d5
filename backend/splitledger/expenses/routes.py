# splitledger/expenses/routes.py

from flask import Blueprint, request, jsonify

from splitledger.core import LedgerError
from splitledger.extensions import get_state
from splitledger.utils.enums import SplitKind
from splitledger.utils.responses import bad_request, ledger_error_response
from splitledger.utils.validators import require_keys

expenses_bp = Blueprint("expenses", __name__)


def _descriptors(kind, data):
    """Pull share descriptors for the split kind out of the request body."""
    if kind == SplitKind.EQUAL:
        if "participants" in data:
            return list(data["participants"])
        return [s["participant_id"] for s in data.get("splits", [])]

    splits, = require_keys(data, "splits")
    descriptors = []
    for s in splits:
        participant_id, value = require_keys(s, "participant_id", "value")
        descriptors.append((participant_id, value))
    return descriptors


@expenses_bp.route("/", methods=["POST"])
def add_expense():
    """
    Create an expense and apply it to the balances.

    Request body:
    {
        "payer_id": "u1",
        "amount": 1000,
        "split_type": "equal|exact|percent",  // default: equal
        "participants": ["u1", "u2"],          // equal splits
        "splits": [{"participant_id": "u2", "value": 370}],  // exact / percent
        "description": "Dinner"                // optional
    }
    """
    data = request.get_json(silent=True) or {}

    try:
        payer_id, amount = require_keys(data, "payer_id", "amount")
        kind = SplitKind.parse(data.get("split_type", "equal"))
        descriptors = _descriptors(kind, data)
    except (ValueError, KeyError, TypeError) as e:
        return bad_request(str(e))

    try:
        expense = get_state().record_expense(
            kind,
            amount,
            str(payer_id),
            descriptors,
            data.get("description", ""),
        )
    except LedgerError as e:
        return ledger_error_response(e)

    return jsonify({"expense": expense.to_dict()}), 201


@expenses_bp.route("/", methods=["GET"])
def list_expenses():
    expenses = get_state().ledger.expenses()
    return jsonify({"expenses": [e.to_dict() for e in expenses]})
