import itertools
import logging
import threading
from typing import Dict, List, Optional

from .errors import NotFound
from .events import (
    Event, tournament_created_event, tournament_updated_event, tournament_deleted_event
)
from .models import Tournament
from .pubsub import PubSubClient

logger = logging.getLogger(__name__)


class TournamentService:
    """
    Owns every tournament held in process memory.

    - One lock serializes all operations, including the traversal in list()
    - Ids and event sequence numbers come from counters advanced under that lock
    - Events are handed to the publisher after the lock is released, so
      delivery order may differ from `Event.sequence` order
    """

    def __init__(self, publisher: Optional[PubSubClient] = None, first_id: int = 1):
        self._lock = threading.Lock()
        self._tournaments: Dict[int, Tournament] = {}
        self._ids = itertools.count(first_id)
        self._sequence = itertools.count(1)
        self.publisher = publisher

    def create(self, name: str, year: int) -> Tournament:
        """Store a new tournament under a fresh id."""
        with self._lock:
            tournament = Tournament(id=next(self._ids), name=name, year=year)
            self._tournaments[tournament.id] = tournament
            event = tournament_created_event(tournament, next(self._sequence))

        logger.info(f"Created torneio {tournament.id}")
        self._publish(event)
        return tournament

    def list(self) -> List[Tournament]:
        with self._lock:
            return list(self._tournaments.values())

    def get_by_id(self, tournament_id: int) -> Tournament:
        with self._lock:
            tournament = self._tournaments.get(tournament_id)
            if tournament is None:
                raise NotFound(tournament_id)
            return tournament

    def update(self, tournament_id: int, name: str, year: int) -> Tournament:
        """Replace name and year of an existing tournament, keeping its id."""
        with self._lock:
            previous = self._tournaments.get(tournament_id)
            if previous is None:
                raise NotFound(tournament_id)

            tournament = Tournament(id=tournament_id, name=name, year=year)
            self._tournaments[tournament_id] = tournament
            event = tournament_updated_event(previous, tournament, next(self._sequence))

        logger.info(f"Updated torneio {tournament_id}")
        self._publish(event)
        return tournament

    def delete(self, tournament_id: int) -> None:
        with self._lock:
            tournament = self._tournaments.pop(tournament_id, None)
            if tournament is None:
                raise NotFound(tournament_id)
            event = tournament_deleted_event(tournament, next(self._sequence))

        logger.info(f"Deleted torneio {tournament_id}")
        self._publish(event)

    def count(self) -> int:
        with self._lock:
            return len(self._tournaments)

    def _publish(self, event: Event):
        if self.publisher is not None:
            self.publisher.publish(event)
        else:
            logger.debug(f"Local mode: {event.type.value} for torneio {event.tournament_id} (not published)")
