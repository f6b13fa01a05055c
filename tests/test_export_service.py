"""Tests for the CSV/JSON exports"""

import csv
import io
import json
from datetime import date

import pytest

from foodbridge.models.volunteer import VolunteerStatus
from foodbridge.services.export_service import (
    CSV_HEADERS,
    VolunteerExporter,
    export_filename,
)


@pytest.fixture
def exporter(volunteer_repository, admin_login_log):
    return VolunteerExporter(volunteer_repository, admin_login_log)


def _parse_csv(text):
    return list(csv.reader(io.StringIO(text)))


def test_csv_has_header_and_one_row_per_volunteer(
    exporter, volunteer_repository, make_volunteer
):
    for n in range(3):
        volunteer_repository.append(make_volunteer(email=f"v{n}@x.com"))

    rows = _parse_csv(exporter.to_csv())

    assert len(rows) == len(volunteer_repository.list()) + 1
    assert rows[0] == CSV_HEADERS


def test_csv_empty_roster_is_header_only(exporter):
    text = exporter.to_csv()

    assert text.splitlines() == [
        '"Name","Email","Phone","Skills","Availability","Registration Date","Status","Assigned Shifts"'
    ]


def test_csv_row_layout(exporter, volunteer_repository, make_volunteer):
    volunteer = make_volunteer(
        skills=["Driving", "Food Safety"], status=VolunteerStatus.APPROVED
    )
    volunteer_repository.append(volunteer)

    text = exporter.to_csv()
    row = _parse_csv(text)[1]

    assert row == [
        "Mike Chen",
        "mike@x.com",
        "(555) 123-4567",
        "Driving; Food Safety",
        "weekends",
        volunteer.to_storage()["registrationDate"],
        "approved",
        "0",
    ]
    # every field is quoted
    assert text.splitlines()[1].startswith('"Mike Chen","mike@x.com"')


def test_json_round_trips_to_list(exporter, volunteer_repository, make_volunteer):
    volunteer_repository.append(make_volunteer())
    volunteer_repository.append(make_volunteer(first_name="Emma", skills=[]))

    text = exporter.to_json()

    assert json.loads(text) == [v.to_storage() for v in volunteer_repository.list()]
    assert text.startswith("[\n  {\n    ")


def test_snapshot_does_not_follow_later_changes(
    exporter, volunteer_repository, make_volunteer
):
    volunteer_repository.append(make_volunteer())
    snapshot = exporter.to_json()

    volunteer_repository.append(make_volunteer())

    assert len(json.loads(snapshot)) == 1
    assert len(json.loads(exporter.to_json())) == 2


def test_admin_logins_json(exporter, auth_session):
    auth_session.login("admin@ngo.org", "admin123")

    logins = json.loads(exporter.admin_logins_to_json())

    assert len(logins) == 1
    assert logins[0]["email"] == "admin@ngo.org"
    assert "loginDate" in logins[0]


def test_export_filenames():
    day = date(2024, 7, 1)

    assert export_filename("volunteers", "csv", day) == "volunteers_2024-07-01.csv"
    assert export_filename("volunteers", "json", day) == "volunteers_2024-07-01.json"
    assert (
        export_filename("admin_logins", "json", day) == "admin_logins_2024-07-01.json"
    )


def test_admin_logins_json_skips_only_invalid_rows(exporter, auth_session, redis_client):
    auth_session.login("admin@ngo.org", "admin123")
    rows = json.loads(redis_client.get("adminLogins"))
    rows.append({"loginDate": "not a date"})
    redis_client.set("adminLogins", json.dumps(rows))

    logins = json.loads(exporter.admin_logins_to_json())

    assert [entry["email"] for entry in logins] == ["admin@ngo.org"]


def test_json_keeps_non_ascii_characters(
    exporter, volunteer_repository, make_volunteer
):
    volunteer_repository.append(make_volunteer(first_name="José", last_name="Müller"))

    text = exporter.to_json()

    assert '"firstName": "José"' in text
    assert "\\u" not in text
