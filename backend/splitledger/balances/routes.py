"""Balance routes: who owes whom."""
from flask import Blueprint, jsonify

from splitledger.balances.reports import NO_BALANCES, all_balance_lines, balance_lines_for
from splitledger.core import LedgerError
from splitledger.extensions import get_state
from splitledger.utils.money import as_float
from splitledger.utils.responses import ledger_error_response

bp = Blueprint("balances", __name__)


@bp.route("/", methods=["GET"])
def get_all_balances():
    """
    Every outstanding debt, reported once.

    Returns:
    {
        "debts": [{"from_user": "u2", "to_user": "u1", "amount": 620.00}],
        "lines": ["User2 owes User1: 620.00"]
    }
    """
    ledger = get_state().ledger
    debts = [
        {"from_user": debtor, "to_user": creditor, "amount": as_float(amount)}
        for creditor, debtor, amount in ledger.all_non_zero_balances()
    ]
    lines = all_balance_lines(ledger)
    return jsonify({"debts": debts, "lines": lines or [NO_BALANCES]})


@bp.route("/<participant_id>", methods=["GET"])
def get_balances(participant_id):
    """
    Non-zero balances of one participant.

    Positive balance = the other participant owes them
    Negative balance = they owe the other participant
    """
    ledger = get_state().ledger
    try:
        balances = ledger.balances_for(participant_id)
        lines = balance_lines_for(ledger, participant_id)
    except LedgerError as e:
        return ledger_error_response(e)

    return jsonify({
        "participant_id": participant_id,
        "balances": [
            {"user_id": other, "balance": as_float(amount)}
            for other, amount in balances
        ],
        "lines": lines or [NO_BALANCES]
    })


@bp.route("/<participant_id>/<other_id>", methods=["GET"])
def get_net_balance(participant_id, other_id):
    ledger = get_state().ledger
    try:
        balance = ledger.net_balance(participant_id, other_id)
    except LedgerError as e:
        return ledger_error_response(e)

    return jsonify({
        "participant_id": participant_id,
        "other_id": other_id,
        "balance": as_float(balance),
        "settled": balance == 0
    })
