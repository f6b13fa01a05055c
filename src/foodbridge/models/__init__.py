"""Data models for FoodBridge"""

from foodbridge.models.admin_login import AdminLoginRecord
from foodbridge.models.catalog import SHIFTS, TIME_SLOTS, Shift, TimeSlot
from foodbridge.models.volunteer import (
    VolunteerRecord,
    VolunteerStatus,
    can_transition,
)

__all__ = [
    "AdminLoginRecord",
    "VolunteerRecord",
    "VolunteerStatus",
    "can_transition",
    "Shift",
    "TimeSlot",
    "SHIFTS",
    "TIME_SLOTS",
]
