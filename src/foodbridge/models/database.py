"""Key/value backend configuration"""

import redis

from foodbridge.config import config

# Redis URL from config
REDIS_URL = config["redis_url"]

# Shared client (singleton) with connection pool configuration.
# Connections are opened lazily on first command.
redis_client = redis.from_url(
    REDIS_URL,
    decode_responses=True,
    max_connections=20,
    socket_connect_timeout=5,
    socket_keepalive=True,
    retry_on_timeout=True,
)


def get_redis():
    """Get Redis client"""
    return redis_client
