"""Redis client configuration used by the rate limiter."""
import os
from typing import Optional

import redis


class RedisConfig:
    """Lazily builds a single Redis client from environment variables."""

    def __init__(self):
        self.host = os.getenv('REDIS_HOST', 'localhost')
        self.port = int(os.getenv('REDIS_PORT', '6379'))
        self.db = int(os.getenv('REDIS_DB', '0'))
        self.password = os.getenv('REDIS_PASSWORD') or None
        self._client: Optional[redis.Redis] = None

    def get_client(self) -> redis.Redis:
        if self._client is None:
            self._client = redis.Redis(
                host=self.host,
                port=self.port,
                db=self.db,
                password=self.password,
                decode_responses=True,
                socket_connect_timeout=2,
                socket_timeout=2,
            )
        return self._client


redis_config = RedisConfig()


def get_redis_client() -> redis.Redis:
    return redis_config.get_client()
