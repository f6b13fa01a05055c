"""Volunteer roster persistence"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from foodbridge.models.volunteer import VolunteerRecord, VolunteerStatus
from foodbridge.services.record_store import VOLUNTEERS_TABLE, RecordStore

logger = logging.getLogger(__name__)


def _row_id(row: Any) -> Optional[str]:
    return row.get("id") if isinstance(row, dict) else None


class VolunteerRepository:
    """Typed access to the ``volunteers`` table.

    Writes work on the stored rows as they are, so a row that no longer
    validates is carried along untouched. Only reads go through
    ``VolunteerRecord``, skipping rows that fail validation.
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def _load(self) -> List[VolunteerRecord]:
        volunteers = []
        for position, row in enumerate(self.store.load(VOLUNTEERS_TABLE)):
            try:
                volunteers.append(VolunteerRecord.model_validate(row))
            except ValidationError as e:
                logger.error(
                    f"Skipping invalid volunteer row {position} (id={_row_id(row)!r}): {e}"
                )
        return volunteers

    def append(self, volunteer: VolunteerRecord) -> bool:
        """
        Add a volunteer after all existing ones.

        Field contents are not validated here.

        Returns:
            True if saved, False if the store rejected the write
        """
        rows = self.store.load(VOLUNTEERS_TABLE)
        rows.append(volunteer.to_storage())

        saved = self.store.save(VOLUNTEERS_TABLE, rows)
        if saved:
            logger.info(f"Volunteer {volunteer.id} saved ({volunteer.email})")
        else:
            logger.error(f"Error saving volunteer {volunteer.id}")
        return saved

    def list(self) -> List[VolunteerRecord]:
        """Get all valid volunteers in registration order"""
        return self._load()

    def get(self, volunteer_id: str) -> Optional[VolunteerRecord]:
        """Get a volunteer by ID"""
        for volunteer in self._load():
            if volunteer.id == volunteer_id:
                return volunteer
        return None

    def update_status(self, volunteer_id: str, status: VolunteerStatus) -> bool:
        """
        Set the status of the volunteer with the given ID.

        The whole table is written back even when no volunteer matches, in
        which case the stored content is unchanged.

        Args:
            volunteer_id: ID of the volunteer to update
            status: New status

        Returns:
            Result of the save
        """
        status = VolunteerStatus(status)
        rows = self.store.load(VOLUNTEERS_TABLE)

        matched = False
        for row in rows:
            if _row_id(row) == volunteer_id:
                row["status"] = status.value
                matched = True

        if not matched:
            logger.info(f"No volunteer with id {volunteer_id}; roster unchanged")

        saved = self.store.save(VOLUNTEERS_TABLE, rows)
        if not saved:
            logger.error(f"Error updating status of volunteer {volunteer_id}")
        return saved

    def status_counts(self) -> Dict[VolunteerStatus, int]:
        """Get the number of volunteers per status"""
        return count_by_status(self._load())


def count_by_status(volunteers: List[VolunteerRecord]) -> Dict[VolunteerStatus, int]:
    counts = {status: 0 for status in VolunteerStatus}
    for volunteer in volunteers:
        counts[volunteer.status] += 1
    return counts
