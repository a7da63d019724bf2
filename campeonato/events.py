from enum import Enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
import json

from .models import Tournament


class EventType(str, Enum):
    TORNEIO_CREATED = "torneio.created"
    TORNEIO_UPDATED = "torneio.updated"
    TORNEIO_DELETED = "torneio.deleted"


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"


@dataclass
class Event:
    """One store mutation. `sequence` follows the store's lock order."""
    type: EventType
    tournament_id: int
    sequence: int
    data: dict = field(default_factory=dict)
    timestamp: str = field(default_factory=_utc_timestamp)

    def to_json(self) -> str:
        return json.dumps({
            "type": self.type.value,
            "tournament_id": self.tournament_id,
            "sequence": self.sequence,
            "timestamp": self.timestamp,
            "data": self.data
        }, ensure_ascii=False)


def tournament_created_event(tournament: Tournament, sequence: int) -> Event:
    return Event(
        type=EventType.TORNEIO_CREATED,
        tournament_id=tournament.id,
        sequence=sequence,
        data=tournament.to_dict()
    )


def tournament_updated_event(previous: Tournament, current: Tournament, sequence: int) -> Event:
    return Event(
        type=EventType.TORNEIO_UPDATED,
        tournament_id=current.id,
        sequence=sequence,
        data={
            "before": previous.to_dict(),
            "after": current.to_dict()
        }
    )


def tournament_deleted_event(tournament: Tournament, sequence: int) -> Event:
    return Event(
        type=EventType.TORNEIO_DELETED,
        tournament_id=tournament.id,
        sequence=sequence,
        data=tournament.to_dict()
    )
