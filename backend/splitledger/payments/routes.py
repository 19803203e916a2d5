"""
Payment routes.

Endpoints:
- POST /payments - Record a direct payment between two participants
- GET /payments - Payment history
"""
from flask import Blueprint, request, jsonify

from splitledger.balances.reports import payment_line, settled_line
from splitledger.core import LedgerError
from splitledger.extensions import get_state
from splitledger.utils.responses import bad_request, ledger_error_response
from splitledger.utils.validators import require_keys

bp = Blueprint("payments", __name__)


@bp.route("/", methods=["POST"])
def record_payment():
    """
    Record a payment from payer to payee.

    Request body:
    {
        "payer_id": "u2",
        "payee_id": "u1",
        "amount": 600.00
    }

    Response:
    {
        "payment": {...},
        "settled": false,
        "messages": ["User2 paid 600.00 to User1"]
    }
    """
    data = request.get_json(silent=True) or {}
    try:
        payer_id, payee_id, amount = require_keys(data, "payer_id", "payee_id", "amount")
    except ValueError as e:
        return bad_request(str(e))

    payer_id = str(payer_id)
    payee_id = str(payee_id)
    state = get_state()

    try:
        payment = state.ledger.apply_payment(payer_id, payee_id, amount)
        settled = state.ledger.is_settled(payer_id, payee_id)
    except LedgerError as e:
        return ledger_error_response(e)

    messages = [payment_line(state.directory, payer_id, payee_id, payment.amount)]
    if settled:
        messages.append(settled_line(state.directory, payer_id, payee_id))

    return jsonify({
        "payment": payment.to_dict(),
        "settled": settled,
        "messages": messages
    }), 201


@bp.route("/", methods=["GET"])
def list_payments():
    payments = get_state().ledger.payments()
    return jsonify({"payments": [p.to_dict() for p in payments]})
