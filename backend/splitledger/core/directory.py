"""
Participant Directory - Known participants by id.

Responsibilities:
- Register participants (fail fast on a duplicate id)
- Look participants up by id
- Keep registration order for listings

There is no removal: participants stay for the lifetime of the ledger.
"""
import logging
import threading
from typing import Dict, Iterator, List

from .errors import DuplicateParticipant, UnknownParticipant
from .models import Participant

logger = logging.getLogger(__name__)


class ParticipantDirectory:
    """Append-only registry of participants."""

    def __init__(self):
        self._participants: Dict[str, Participant] = {}
        self._lock = threading.Lock()

    def register(self, participant: Participant) -> Participant:
        """
        Register a participant.

        Raises:
            DuplicateParticipant: if the id is already registered
        """
        with self._lock:
            if participant.id in self._participants:
                raise DuplicateParticipant(participant.id)
            self._participants[participant.id] = participant
        logger.debug("Registered participant %s (%s)", participant.id, participant.name)
        return participant

    def lookup(self, participant_id: str) -> Participant:
        """
        Get a participant by id.

        Raises:
            UnknownParticipant: if nobody is registered under that id
        """
        try:
            return self._participants[participant_id]
        except KeyError:
            raise UnknownParticipant(participant_id) from None

    def require(self, *participant_ids: str) -> None:
        """Raise UnknownParticipant for the first id that is not registered."""
        for participant_id in participant_ids:
            self.lookup(participant_id)

    def all(self) -> List[Participant]:
        """Participants in registration order."""
        return list(self._participants.values())

    def ids(self) -> List[str]:
        return list(self._participants)

    def __contains__(self, participant_id) -> bool:
        return participant_id in self._participants

    def __len__(self) -> int:
        return len(self._participants)

    def __iter__(self) -> Iterator[Participant]:
        return iter(self.all())
