from flask import Blueprint, jsonify, request

from splitledger.core import LedgerError, Participant
from splitledger.extensions import get_state
from splitledger.utils.responses import bad_request, ledger_error_response
from splitledger.utils.validators import require_keys

participants_bp = Blueprint("participants", __name__)


@participants_bp.route("/", methods=["POST"])
def register_participant():
    """
    Register a participant.

    Request body:
    {
        "id": "u5",
        "name": "User5",
        "email": "...",  // optional
        "phone": "..."   // optional
    }
    """
    data = request.get_json(silent=True) or {}
    try:
        participant_id, name = require_keys(data, "id", "name")
    except ValueError as e:
        return bad_request(str(e))

    participant = Participant(
        id=str(participant_id),
        name=str(name),
        email=data.get("email", ""),
        phone=data.get("phone", ""),
    )
    try:
        get_state().directory.register(participant)
    except LedgerError as e:
        return ledger_error_response(e)

    return jsonify({"participant": participant.to_dict()}), 201


@participants_bp.route("/", methods=["GET"])
def list_participants():
    participants = get_state().directory.all()
    return jsonify({"participants": [p.to_dict() for p in participants]})


@participants_bp.route("/<participant_id>", methods=["GET"])
def get_participant(participant_id):
    try:
        participant = get_state().directory.lookup(participant_id)
    except LedgerError as e:
        return ledger_error_response(e)
    return jsonify({"participant": participant.to_dict()})
