"""Dashboard roster view and volunteer approval"""

import logging
from typing import Dict, List, Optional

from foodbridge.models.volunteer import VolunteerRecord, VolunteerStatus, can_transition
from foodbridge.services.volunteer_repository import VolunteerRepository, count_by_status

logger = logging.getLogger(__name__)


class ApprovalWorkflow:
    """
    Roster snapshot held by the admin dashboard plus the approve action.

    The snapshot is read once on construction (``refresh`` reads it again)
    and successful approvals are mirrored into it, so the dashboard does not
    have to reload the whole roster after each click.
    """

    def __init__(self, repository: VolunteerRepository):
        self.repository = repository
        self.volunteers: List[VolunteerRecord] = []
        self.refresh()

    def refresh(self) -> List[VolunteerRecord]:
        self.volunteers = self.repository.list()
        return self.volunteers

    def find(self, volunteer_id: str) -> Optional[VolunteerRecord]:
        for volunteer in self.volunteers:
            if volunteer.id == volunteer_id:
                return volunteer
        return None

    def approve(self, volunteer_id: str) -> bool:
        """
        Approve a volunteer.

        Args:
            volunteer_id: ID of the volunteer to approve

        Returns:
            True if the roster was written; False if the volunteer is already
            past approval or the write failed
        """
        current = self.find(volunteer_id)
        if current is not None and not can_transition(
            current.status, VolunteerStatus.APPROVED
        ):
            logger.warning(
                f"Refusing to approve volunteer {volunteer_id} in status {current.status.value}"
            )
            return False

        success = self.repository.update_status(volunteer_id, VolunteerStatus.APPROVED)
        if success:
            self.volunteers = [
                v.model_copy(update={"status": VolunteerStatus.APPROVED})
                if v.id == volunteer_id
                else v
                for v in self.volunteers
            ]
            logger.info(f"Volunteer {volunteer_id} approved")
        return success

    def status_counts(self) -> Dict[VolunteerStatus, int]:
        return count_by_status(self.volunteers)
