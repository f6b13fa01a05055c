"""CSV and JSON exports of the roster and the admin login log"""

import csv
import io
import json
from datetime import date, datetime, timezone
from typing import List, Optional

from foodbridge.models.volunteer import VolunteerRecord
from foodbridge.services.admin_login_log import AdminLoginLog
from foodbridge.services.volunteer_repository import VolunteerRepository

CSV_HEADERS = [
    "Name",
    "Email",
    "Phone",
    "Skills",
    "Availability",
    "Registration Date",
    "Status",
    "Assigned Shifts",
]


def export_filename(prefix: str, extension: str, day: Optional[date] = None) -> str:
    """Build a download name like ``volunteers_2024-07-01.csv``"""
    day = day or datetime.now(timezone.utc).date()
    return f"{prefix}_{day.isoformat()}.{extension}"


def volunteer_csv_row(volunteer: VolunteerRecord) -> List[str]:
    return [
        volunteer.full_name,
        volunteer.email,
        volunteer.phone,
        "; ".join(volunteer.skills),
        volunteer.availability,
        volunteer.to_storage()["registrationDate"],
        volunteer.status.value,
        str(volunteer.assigned_shifts),
    ]


class VolunteerExporter:
    """Point-in-time snapshots for download; later changes are not reflected"""

    def __init__(self, repository: VolunteerRepository, login_log: AdminLoginLog):
        self.repository = repository
        self.login_log = login_log

    def to_csv(self) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(CSV_HEADERS)
        for volunteer in self.repository.list():
            writer.writerow(volunteer_csv_row(volunteer))
        return buffer.getvalue()

    def to_json(self) -> str:
        return json.dumps(
            [v.to_storage() for v in self.repository.list()],
            indent=2,
            ensure_ascii=False,
        )

    def admin_logins_to_json(self) -> str:
        return json.dumps(
            [r.to_storage() for r in self.login_log.list()],
            indent=2,
            ensure_ascii=False,
        )
