"""FastAPI providers for the storage-backed services"""

import redis
from fastapi import Depends

from foodbridge.config import config
from foodbridge.models.database import get_redis
from foodbridge.services.admin_login_log import AdminLoginLog
from foodbridge.services.record_store import RecordStore
from foodbridge.services.volunteer_repository import VolunteerRepository
from foodbridge.services.wizard_state_manager import WizardStateManager


def get_record_store(redis_client: redis.Redis = Depends(get_redis)) -> RecordStore:
    return RecordStore(redis_client)


def get_volunteer_repository(
    store: RecordStore = Depends(get_record_store),
) -> VolunteerRepository:
    return VolunteerRepository(store)


def get_admin_login_log(store: RecordStore = Depends(get_record_store)) -> AdminLoginLog:
    return AdminLoginLog(store)


def get_wizard_state_manager(
    redis_client: redis.Redis = Depends(get_redis),
    repository: VolunteerRepository = Depends(get_volunteer_repository),
) -> WizardStateManager:
    return WizardStateManager(
        redis_client=redis_client,
        repository=repository,
        ttl_seconds=config["wizard_ttl_seconds"],
    )
