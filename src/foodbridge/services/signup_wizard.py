"""Two-step volunteer sign-up flow.

Step 1 (``profile``) collects who the volunteer is, step 2 (``schedule``)
which shifts they want. Completing step 2 appends one volunteer to the
roster and starts the wizard over with empty fields, whether or not the
write succeeded.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from foodbridge.models.volunteer import VolunteerRecord, VolunteerStatus
from foodbridge.services.volunteer_repository import VolunteerRepository

logger = logging.getLogger(__name__)


class WizardStep(str, enum.Enum):
    PROFILE = "profile"
    SCHEDULE = "schedule"


# Serialized (camelCase) name -> attribute name on VolunteerRecord
PROFILE_FIELDS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "phone": "phone",
    "availability": "availability",
    "experience": "experience",
    "transportation": "transportation",
    "emergencyContact": "emergency_contact",
}

REQUIRED_PROFILE_FIELDS = ("first_name", "last_name", "email")

SUCCESS_TITLE = "Registration Successful!"
SUCCESS_MESSAGE = (
    "Thank you for signing up. We'll contact you within 24 hours with next steps."
)
FAILURE_TITLE = "Error"
FAILURE_MESSAGE = "There was an issue saving your registration. Please try again."


@dataclass
class SubmissionResult:
    saved: bool
    volunteer: VolunteerRecord
    title: str
    message: str


def _resolve_field(name: str) -> str:
    if name in PROFILE_FIELDS:
        return PROFILE_FIELDS[name]
    if name in PROFILE_FIELDS.values():
        return name
    raise ValueError(f"Unknown profile field: {name}")


def _toggle(items: List[str], value: str) -> List[str]:
    if value in items:
        return [item for item in items if item != value]
    return [*items, value]


class SignupWizard:
    """State machine behind the volunteer sign-up form"""

    def __init__(self, repository: VolunteerRepository):
        self.repository = repository
        self.reset()

    def reset(self) -> None:
        """Return to step 1 with every field cleared"""
        self.step = WizardStep.PROFILE
        self.fields: Dict[str, str] = {attr: "" for attr in PROFILE_FIELDS.values()}
        self.skills: List[str] = []
        self.selected_slots: List[str] = []

    def set_field(self, name: str, value: str) -> None:
        """
        Set one profile field. Accepts camelCase or snake_case names.

        Raises:
            ValueError: If the field is not a profile field
        """
        self.fields[_resolve_field(name)] = value if value is not None else ""

    def toggle_skill(self, skill: str) -> None:
        self.skills = _toggle(self.skills, skill)

    def toggle_slot(self, slot_id: str) -> None:
        self.selected_slots = _toggle(self.selected_slots, slot_id)

    @property
    def can_continue(self) -> bool:
        # Presence only, no format checks (an email is not checked for "@")
        return all(self.fields[attr] for attr in REQUIRED_PROFILE_FIELDS)

    @property
    def can_submit(self) -> bool:
        return self.step == WizardStep.SCHEDULE and len(self.selected_slots) > 0

    def continue_to_schedule(self) -> bool:
        """
        Move from step 1 to step 2.

        Returns:
            False (and no state change) while first name, last name or email
            is empty
        """
        if self.step != WizardStep.PROFILE or not self.can_continue:
            return False
        self.step = WizardStep.SCHEDULE
        return True

    def back(self) -> bool:
        """Go back to step 1 keeping everything entered so far"""
        if self.step != WizardStep.SCHEDULE:
            return False
        self.step = WizardStep.PROFILE
        return True

    def build_volunteer(self) -> VolunteerRecord:
        return VolunteerRecord(
            **self.fields,
            skills=list(self.skills),
            selected_slots=list(self.selected_slots),
            status=VolunteerStatus.PENDING,
            assigned_shifts=0,
        )

    def submit(self) -> Optional[SubmissionResult]:
        """
        Register the volunteer and start over.

        Returns:
            None if submitting is not possible yet (wrong step or no slot
            selected); otherwise the outcome of the roster write
        """
        if not self.can_submit:
            return None

        volunteer = self.build_volunteer()
        logger.info(
            f"Volunteer signup: {volunteer.full_name} <{volunteer.email}> slots={volunteer.selected_slots}"
        )
        saved = self.repository.append(volunteer)

        # Input is not kept for a retry
        self.reset()

        if saved:
            return SubmissionResult(True, volunteer, SUCCESS_TITLE, SUCCESS_MESSAGE)
        return SubmissionResult(False, volunteer, FAILURE_TITLE, FAILURE_MESSAGE)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step": self.step.value,
            "fields": {
                name: self.fields[attr] for name, attr in PROFILE_FIELDS.items()
            },
            "skills": list(self.skills),
            "selectedSlots": list(self.selected_slots),
        }

    @classmethod
    def from_dict(
        cls, repository: VolunteerRepository, data: Dict[str, Any]
    ) -> "SignupWizard":
        """
        Rebuild a wizard from ``to_dict`` output.

        Raises:
            ValueError: If the step or a field name is not recognised
        """
        wizard = cls(repository)
        wizard.step = WizardStep(data.get("step", WizardStep.PROFILE.value))
        for name, value in (data.get("fields") or {}).items():
            wizard.set_field(name, value)
        wizard.skills = list(data.get("skills") or [])
        wizard.selected_slots = list(data.get("selectedSlots") or [])
        return wizard
