"""Integration tests for registration endpoints and the CSV download."""

import csv
import io
from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from event_registration.domain import Category
from event_registration.services import build_event_service
from tests.factories import event_data

pytestmark = pytest.mark.django_db


def registration_payload(event_id, **overrides) -> dict:
    body = {
        "full_name": "Ada Lovelace",
        "email": "ada@example.com",
        "college_name": "King's College",
        "department": "Mathematics",
        "event_id": event_id.value,
    }
    body.update(overrides)
    return body


@pytest.fixture
def event_id():
    today = timezone.localdate()
    return build_event_service().create_event(
        event_data(
            name="Hack Night",
            category=Category.HACKATHON,
            event_date=today + timedelta(days=14),
            start=today - timedelta(days=1),
            end=today + timedelta(days=7),
        )
    )


class TestRegister:
    def test_public_registration(self, api_client: APIClient, event_id):
        response = api_client.post("/api/registrations", registration_payload(event_id), format="json")
        assert response.status_code == 201
        assert isinstance(response.json()["id"], int)

    def test_duplicate_registration_is_declined(self, api_client: APIClient, event_id):
        api_client.post("/api/registrations", registration_payload(event_id), format="json")

        response = api_client.post(
            "/api/registrations",
            registration_payload(event_id, full_name="Someone Else"),
            format="json",
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_REGISTRATION"

    def test_unknown_event(self, api_client: APIClient, event_id):
        payload = registration_payload(event_id)
        payload["event_id"] = 9999
        response = api_client.post("/api/registrations", payload, format="json")
        assert response.status_code == 404

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("full_name", "Ada <Lovelace>"),
            ("college_name", "King's College!"),
            ("department", "Maths; DROP"),
            ("email", "not-an-email"),
        ],
    )
    def test_invalid_fields_are_rejected(self, api_client: APIClient, event_id, field, value):
        response = api_client.post(
            "/api/registrations", registration_payload(event_id, **{field: value}), format="json"
        )
        assert response.status_code == 400
        assert field in response.json()


class TestAdminListing:
    @pytest.fixture
    def registered(self, api_client: APIClient, event_id):
        for email in ["ada@example.com", "grace@example.com"]:
            api_client.post(
                "/api/registrations", registration_payload(event_id, email=email), format="json"
            )

    def test_listing_requires_admin(self, api_client: APIClient):
        assert api_client.get("/api/registrations").status_code in (401, 403)

    def test_listing_with_count(self, admin_api_client: APIClient, registered):
        response = admin_api_client.get("/api/registrations")

        body = response.json()
        assert body["count"] == 2
        assert [r["email"] for r in body["results"]] == ["grace@example.com", "ada@example.com"]
        assert body["results"][0]["category_label"] == "Hackathon"

    def test_listing_filters(self, admin_api_client: APIClient, registered):
        event_date = (timezone.localdate() + timedelta(days=14)).isoformat()

        matching = admin_api_client.get(
            "/api/registrations", {"event_date": event_date, "event_name": "Hack Night"}
        ).json()
        other = admin_api_client.get("/api/registrations", {"event_name": "Other"}).json()
        blank = admin_api_client.get("/api/registrations", {"event_date": "", "event_name": ""}).json()

        assert matching["count"] == 2
        assert other == {"count": 0, "results": []}
        assert blank["count"] == 2

    def test_filter_options(self, admin_api_client: APIClient, registered):
        event_date = (timezone.localdate() + timedelta(days=14)).isoformat()

        dates = admin_api_client.get("/api/registrations/dates").json()
        names = admin_api_client.get(f"/api/registrations/dates/{event_date}/event-names").json()

        assert [d["value"] for d in dates] == [event_date]
        assert names == [{"value": "Hack Night", "label": "Hack Night"}]

    def test_event_names_for_malformed_date(self, admin_api_client: APIClient):
        response = admin_api_client.get("/api/registrations/dates/not-a-date/event-names")
        assert response.status_code == 400


class TestExport:
    def test_csv_download(self, api_client: APIClient, admin_api_client: APIClient, event_id):
        api_client.post("/api/registrations", registration_payload(event_id), format="json")

        response = admin_api_client.get("/api/registrations/export")

        assert response.status_code == 200
        assert response["Content-Type"] == "text/csv"
        assert response["Content-Disposition"].startswith('attachment; filename="event_registrations_')
        content = b"".join(response.streaming_content).decode()
        rows = list(csv.reader(io.StringIO(content)))
        assert rows[0] == [
            "ID",
            "Full Name",
            "Email",
            "College Name",
            "Department",
            "Event Name",
            "Event Date",
            "Category",
            "Registration Date",
        ]
        assert len(rows) == 2
        assert rows[1][2] == "ada@example.com"
        assert rows[1][6] == (timezone.localdate() + timedelta(days=14)).isoformat()
        assert rows[1][7] == "Hackathon"

    def test_csv_download_respects_filters(self, admin_api_client: APIClient, event_id):
        response = admin_api_client.get("/api/registrations/export", {"event_name": "Nothing"})
        content = b"".join(response.streaming_content).decode()
        assert len(list(csv.reader(io.StringIO(content)))) == 1
