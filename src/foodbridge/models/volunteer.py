"""Volunteer roster model"""

import enum
import uuid
from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class VolunteerStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    ACTIVE = "active"


# Status only ever moves forward; nothing leads back to PENDING
ALLOWED_TRANSITIONS = {
    VolunteerStatus.PENDING: {VolunteerStatus.APPROVED, VolunteerStatus.ACTIVE},
    VolunteerStatus.APPROVED: {VolunteerStatus.ACTIVE},
    VolunteerStatus.ACTIVE: set(),
}


def can_transition(current: VolunteerStatus, target: VolunteerStatus) -> bool:
    """
    Check whether a volunteer may move from one status to another.

    Re-applying the current status is allowed so that repeated approvals
    stay idempotent.
    """
    current = VolunteerStatus(current)
    target = VolunteerStatus(target)
    return current == target or target in ALLOWED_TRANSITIONS[current]


def new_volunteer_id() -> str:
    return str(uuid.uuid4())


class VolunteerRecord(BaseModel):
    """A registered volunteer as stored in the ``volunteers`` table.

    Field names are snake_case in Python and camelCase once serialized.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=new_volunteer_id)
    first_name: str
    last_name: str
    email: str
    phone: str = ""
    availability: str = ""
    skills: List[str] = Field(default_factory=list)
    experience: str = ""
    transportation: str = ""
    emergency_contact: str = ""
    selected_slots: List[str] = Field(default_factory=list)
    registration_date: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    status: VolunteerStatus = VolunteerStatus.PENDING
    assigned_shifts: int = Field(default=0, ge=0)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_storage(self) -> dict:
        """Serialize to the JSON-ready camelCase shape kept in the store"""
        return self.model_dump(mode="json", by_alias=True)
