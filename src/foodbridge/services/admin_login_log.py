"""Append-only log of successful admin logins"""

import logging
from typing import List

from pydantic import ValidationError

from foodbridge.models.admin_login import AdminLoginRecord
from foodbridge.services.record_store import ADMIN_LOGINS_TABLE, RecordStore

logger = logging.getLogger(__name__)


class AdminLoginLog:
    def __init__(self, store: RecordStore):
        self.store = store

    def record_login(self, email: str) -> bool:
        """Append a login entry for ``email`` stamped with the current time"""
        logins = self.store.load(ADMIN_LOGINS_TABLE)
        entry = AdminLoginRecord(email=email)
        logins.append(entry.to_storage())

        saved = self.store.save(ADMIN_LOGINS_TABLE, logins)
        if saved:
            logger.info(f"Admin login saved: {email} at {entry.login_date.isoformat()}")
        else:
            logger.error(f"Error saving admin login for {email}")
        return saved

    def list(self) -> List[AdminLoginRecord]:
        """Get the valid login entries in the order they happened"""
        logins = []
        for position, row in enumerate(self.store.load(ADMIN_LOGINS_TABLE)):
            try:
                logins.append(AdminLoginRecord.model_validate(row))
            except ValidationError as e:
                logger.error(f"Skipping invalid admin login row {position}: {e}")
        return logins
