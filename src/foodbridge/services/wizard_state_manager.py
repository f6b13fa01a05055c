import json
import logging
import uuid
from typing import Optional

import redis

from foodbridge.services.signup_wizard import SignupWizard
from foodbridge.services.volunteer_repository import VolunteerRepository

logger = logging.getLogger(__name__)


class WizardStateManager:
    """
    Keeps in-progress sign-up wizards in Redis between requests.

    Drafts live under ``signup_wizard:{wizard_id}`` and expire after
    ``ttl_seconds`` of inactivity (every save refreshes the TTL).
    """

    def __init__(
        self,
        redis_client: redis.Redis,
        repository: VolunteerRepository,
        ttl_seconds: int = 1800,
    ):
        """
        Args:
            redis_client: Redis client instance (from dependency injection)
            repository: Roster the rebuilt wizards submit into
            ttl_seconds: Time-to-live in seconds (default: 1800 = 30 minutes)
        """
        self.redis_client = redis_client
        self.repository = repository
        self.ttl_seconds = ttl_seconds

    def _state_key(self, wizard_id: str) -> str:
        return f"signup_wizard:{wizard_id}"

    def create(self) -> tuple[str, SignupWizard]:
        """Start a new empty wizard and persist it"""
        wizard_id = uuid.uuid4().hex
        wizard = SignupWizard(self.repository)
        self.save(wizard_id, wizard)
        logger.info(f"Started signup wizard {wizard_id}")
        return wizard_id, wizard

    def load(self, wizard_id: str) -> Optional[SignupWizard]:
        """
        Get the wizard for an ID.

        Returns:
            The wizard, or None if unknown, expired or corrupted

        Raises:
            redis.RedisError: If Redis operation fails
        """
        key = self._state_key(wizard_id)
        try:
            state_json = self.redis_client.get(key)
        except redis.RedisError as e:
            logger.error(f"Redis error getting wizard {wizard_id}: {e}")
            raise

        if not state_json:
            return None

        try:
            return SignupWizard.from_dict(self.repository, json.loads(state_json))
        except (json.JSONDecodeError, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Corrupted state for wizard {wizard_id}, discarding: {e}")
            return None

    def save(self, wizard_id: str, wizard: SignupWizard) -> None:
        """
        Persist a wizard and refresh its TTL.

        Raises:
            redis.RedisError: If Redis operation fails
        """
        key = self._state_key(wizard_id)
        try:
            self.redis_client.setex(key, self.ttl_seconds, json.dumps(wizard.to_dict()))
        except redis.RedisError as e:
            logger.error(f"Redis error saving wizard {wizard_id}: {e}")
            raise

    def delete(self, wizard_id: str) -> None:
        key = self._state_key(wizard_id)
        try:
            self.redis_client.delete(key)
            logger.info(f"Cleared signup wizard {wizard_id}")
        except redis.RedisError as e:
            logger.error(f"Redis error clearing wizard {wizard_id}: {e}")
            raise
