import os
import logging
import redis

from .events import Event

logger = logging.getLogger(__name__)


class PubSubClient:
    """Publishes tournament change events to Redis and keeps a capped event log."""

    def __init__(
        self,
        redis_url: str = None,
        channel: str = "torneios:events",
        log_key: str = "torneios:event_log",
        log_size: int = 1000,
        redis_client: redis.Redis = None
    ):
        self.redis_url = redis_url or os.getenv('REDIS_URL', 'redis://localhost:6379')
        self.redis = redis_client if redis_client is not None else redis.from_url(
            self.redis_url,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5
        )
        self.channel = channel
        self.log_key = log_key
        self.log_size = log_size
    
    def publish(self, event: Event) -> bool:
        payload = event.to_json()
        try:
            self.redis.publish(self.channel, payload)
            self.log_event(payload)
        except redis.exceptions.RedisError as e:
            logger.warning(f"Failed to publish {event.type.value} for torneio {event.tournament_id}: {e}")
            return False
        return True
    
    def log_event(self, payload: str):
        self.redis.lpush(self.log_key, payload)
        self.redis.ltrim(self.log_key, 0, self.log_size - 1)
    
    def ping(self) -> bool:
        try:
            return bool(self.redis.ping())
        except redis.exceptions.RedisError:
            return False
