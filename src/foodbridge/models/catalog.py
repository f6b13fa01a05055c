"""Static shift catalog shown to volunteers and admins.

Slot capacity figures are fixed sample data and are not derived from the
registrations held in the volunteer roster.
"""

from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

AVAILABILITY_OPTIONS = {
    "weekday-mornings": "Weekday Mornings",
    "weekday-afternoons": "Weekday Afternoons",
    "weekday-evenings": "Weekday Evenings",
    "weekends": "Weekends",
    "flexible": "Flexible",
}

SKILL_OPTIONS = [
    "Driving",
    "Heavy Lifting",
    "Customer Service",
    "Organization",
    "Language Skills",
    "Food Safety",
]

TRANSPORTATION_OPTIONS = {
    "car": "Personal Car",
    "truck": "Truck/Van",
    "public": "Public Transportation",
    "none": "No Transportation",
}


class _CatalogModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimeSlot(_CatalogModel):
    """A shift window a volunteer can pick during sign-up"""

    id: str
    date: str
    time: str
    type: str
    location: str
    slots_available: int
    total_slots: int


class Shift(_CatalogModel):
    """A staffed shift as listed on the admin dashboard"""

    id: str
    date: str
    time: str
    type: str
    location: str
    volunteers: List[str]
    max_volunteers: int


TIME_SLOTS: List[TimeSlot] = [
    TimeSlot(
        id="1",
        date="2024-07-01",
        time="09:00-12:00",
        type="Food Pickup",
        location="Downtown Market District",
        slots_available=2,
        total_slots=4,
    ),
    TimeSlot(
        id="2",
        date="2024-07-01",
        time="14:00-17:00",
        type="Food Sorting",
        location="FoodBridge Distribution Center",
        slots_available=3,
        total_slots=6,
    ),
    TimeSlot(
        id="3",
        date="2024-07-02",
        time="10:00-13:00",
        type="Delivery",
        location="East Side Community",
        slots_available=1,
        total_slots=3,
    ),
    TimeSlot(
        id="4",
        date="2024-07-02",
        time="15:00-18:00",
        type="Food Pickup",
        location="Restaurant Row",
        slots_available=4,
        total_slots=4,
    ),
    TimeSlot(
        id="5",
        date="2024-07-03",
        time="08:00-11:00",
        type="Food Sorting",
        location="FoodBridge Distribution Center",
        slots_available=2,
        total_slots=5,
    ),
]

SHIFTS: List[Shift] = [
    Shift(
        id="1",
        date="2024-07-01",
        time="09:00-12:00",
        type="Food Pickup",
        location="Downtown Market District",
        volunteers=["Mike Chen", "Emma Rodriguez"],
        max_volunteers=4,
    ),
    Shift(
        id="2",
        date="2024-07-01",
        time="14:00-17:00",
        type="Food Sorting",
        location="FoodBridge Distribution Center",
        volunteers=["Emma Rodriguez"],
        max_volunteers=6,
    ),
    Shift(
        id="3",
        date="2024-07-02",
        time="10:00-13:00",
        type="Delivery",
        location="East Side Community",
        volunteers=["Mike Chen", "Emma Rodriguez"],
        max_volunteers=3,
    ),
]


def get_time_slot(slot_id: str) -> TimeSlot | None:
    for slot in TIME_SLOTS:
        if slot.id == slot_id:
            return slot
    return None
