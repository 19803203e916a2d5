"""
Participant bootstrap data.

Either the four built-in demo users or a JSON file of the form
{"participants": [{"id": "...", "name": "...", "email": "...", "phone": "..."}]}
"""
import json
import logging
from typing import Iterable, List

from splitledger.core import Participant, ParticipantDirectory

logger = logging.getLogger(__name__)

DEFAULT_PARTICIPANTS = [
    Participant("u1", "User1", "gaurav@workat.tech", "9876543210"),
    Participant("u2", "User2", "sagar@workat.tech", "9876543210"),
    Participant("u3", "User3", "hi@workat.tech", "9876543210"),
    Participant("u4", "User4", "mock-interviews@workat.tech", "9876543210"),
]


def load_participants(path: str) -> List[Participant]:
    """Load participants from a JSON file; a missing file yields an empty list."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning("Participants file not found: %s", path)
        return []

    return [
        Participant(
            id=str(p["id"]),
            name=p.get("name") or str(p["id"]),
            email=p.get("email", ""),
            phone=p.get("phone", ""),
        )
        for p in data.get("participants", [])
    ]


def seed_directory(directory: ParticipantDirectory, participants: Iterable[Participant]) -> int:
    """Register participants, returning how many were added."""
    count = 0
    for participant in participants:
        directory.register(participant)
        count += 1
    logger.info("Seeded %d participants", count)
    return count
