import json
import logging
from typing import Any, Dict, List

import redis

logger = logging.getLogger(__name__)

VOLUNTEERS_TABLE = "volunteers"
ADMIN_LOGINS_TABLE = "adminLogins"


class RecordStore:
    """
    Table-per-key record store on top of Redis.

    Each table is one Redis string holding a JSON array of records, stored
    under the literal table name. Writes replace the whole array; callers do
    their own read-modify-write.

    Failures never escape this class:
    - A missing key, a value that is not valid JSON, or a value that is not
      a JSON array loads as an empty table
    - Redis errors are logged and degrade to an empty load or a failed save
    """

    def __init__(self, redis_client: redis.Redis):
        """
        Initialize RecordStore with a Redis backend.

        Args:
            redis_client: Redis client instance (from dependency injection)
        """
        self.redis_client = redis_client

    def load(self, table: str) -> List[Dict[str, Any]]:
        """
        Load every record of a table in stored order.

        Args:
            table: Table name, also the Redis key

        Returns:
            List of decoded records (empty if absent, corrupt or unreachable)
        """
        try:
            raw = self.redis_client.get(table)
        except redis.RedisError as e:
            logger.error(f"Redis error loading table {table}: {e}")
            return []

        if not raw:
            return []

        try:
            records = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.error(f"Corrupted data in table {table}, treating as empty: {e}")
            return []

        if not isinstance(records, list):
            logger.error(
                f"Table {table} holds {type(records).__name__}, expected a list; treating as empty"
            )
            return []

        return records

    def save(self, table: str, records: List[Dict[str, Any]]) -> bool:
        """
        Overwrite a table with the given records.

        Args:
            table: Table name, also the Redis key
            records: JSON-serializable records

        Returns:
            True if the write went through, False otherwise
        """
        try:
            payload = json.dumps(records)
        except (TypeError, ValueError) as e:
            logger.error(f"Could not encode records for table {table}: {e}")
            return False

        try:
            self.redis_client.set(table, payload)
        except redis.RedisError as e:
            logger.error(f"Redis error saving table {table}: {e}")
            return False

        return True
