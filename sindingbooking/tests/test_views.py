"""Tests for the booking form page and JSON endpoints."""

import json
from datetime import date, timedelta
from unittest.mock import patch

import pytest
from django.db import DatabaseError
from django.test import Client
from django.urls import reverse
from django.utils import timezone

from sindingbooking.models import Booking


pytestmark = pytest.mark.django_db


def _post_data(**overrides):
    data = {
        "name": "Kari Nordmann",
        "email": "kari@example.no",
        "phone": "+47 123 45 678",
        "booking_date": (timezone.localdate() + timedelta(days=7)).isoformat(),
        "session_items[]": ["family"],
        "addon_items[]": ["extra_hour", "digital_package"],
    }
    data.update(overrides)
    return data


class TestBookingForm:
    def test_renders_catalogue(self, client):
        response = client.get(reverse("sindingbooking:form"))

        assert response.status_code == 200
        content = response.content.decode()
        assert 'value="family"' in content
        assert 'data-type="addon"' in content
        assert "NOK 8 000" in content
        assert 'id="sb-catalogue"' in content
        assert "csrfmiddlewaretoken" in content

    def test_min_date_is_tomorrow(self, client):
        response = client.get(reverse("sindingbooking:form"))
        tomorrow = (timezone.localdate() + timedelta(days=1)).isoformat()
        assert f'min="{tomorrow}"' in response.content.decode()

    def test_renders_without_time_zone_support(self, settings, client):
        settings.USE_TZ = False

        response = client.get(reverse("sindingbooking:form"))

        assert response.status_code == 200
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        assert f'min="{tomorrow}"' in response.content.decode()

    def test_contact_inputs_capped_at_column_width(self, client):
        content = client.get(reverse("sindingbooking:form")).content.decode()
        assert 'name="name" class="sb-form__input" placeholder="Jane Doe" required maxlength="100"' in content
        assert content.count('maxlength="100"') == 2

    def test_post_not_allowed(self, client):
        assert client.post(reverse("sindingbooking:form")).status_code == 405


class TestQuoteEndpoint:
    def test_quote(self, client):
        response = client.post(
            reverse("sindingbooking:quote"),
            {"session_id": "family", "addon_items[]": ["extra_hour", "digital_package"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 4500
        assert [li["id"] for li in data["line_items"]] == ["family", "extra_hour", "digital_package"]

    def test_quote_without_session(self, client):
        response = client.post(reverse("sindingbooking:quote"), {"addon_items[]": ["photo_album"]})
        assert response.json()["total"] == 2000


class TestSubmitEndpoint:
    def test_accepted(self, client, notifier, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            response = client.post(reverse("sindingbooking:submit"), _post_data())

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Your booking has been received! Check your email for a confirmation.",
        }
        booking = Booking.objects.get()
        assert booking.total_price == 4500
        assert len(notifier.sent) == 2

    def test_client_total_ignored(self, client, notifier):
        client.post(reverse("sindingbooking:submit"), _post_data(total="1", total_price="1"))
        assert Booking.objects.get().total_price == 4500

    def test_invalid_email(self, client, notifier):
        response = client.post(reverse("sindingbooking:submit"), _post_data(email="not-an-email"))

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["errors"] == {"email": "Please enter a valid email address."}
        assert not Booking.objects.exists()

    def test_overlong_fields(self, client, notifier):
        response = client.post(
            reverse("sindingbooking:submit"),
            _post_data(name="K" * 101, email="k" * 95 + "@example.no"),
        )

        assert response.status_code == 400
        assert response.json()["errors"] == {
            "name": "Please use at most 100 characters.",
            "email": "Please enter a valid email address.",
        }
        assert not Booking.objects.exists()

    def test_no_session(self, client, notifier):
        data = _post_data()
        del data["session_items[]"]

        response = client.post(reverse("sindingbooking:submit"), data)

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Please select at least one session type."}

    def test_persistence_failure(self, client, notifier):
        with patch.object(Booking.objects, "create", side_effect=DatabaseError("locked")):
            response = client.post(reverse("sindingbooking:submit"), _post_data())

        assert response.status_code == 500
        assert response.json()["message"] == "Could not save your booking. Please try again."

    def test_get_not_allowed(self, client):
        assert client.get(reverse("sindingbooking:submit")).status_code == 405

    def test_csrf_required(self, notifier):
        csrf_client = Client(enforce_csrf_checks=True)
        response = csrf_client.post(reverse("sindingbooking:submit"), _post_data())

        assert response.status_code == 403
        assert not Booking.objects.exists()

    def test_csrf_token_from_form_page(self, notifier):
        csrf_client = Client(enforce_csrf_checks=True)
        csrf_client.get(reverse("sindingbooking:form"))
        token = csrf_client.cookies["csrftoken"].value

        response = csrf_client.post(
            reverse("sindingbooking:submit"),
            _post_data(csrfmiddlewaretoken=token),
        )
        assert response.status_code == 200


class TestClientCatalogue:
    def test_json_script_matches_server_catalogue(self, client, catalogue):
        response = client.get(reverse("sindingbooking:form"))
        content = response.content.decode()
        start = content.index('id="sb-catalogue" type="application/json">') + len(
            'id="sb-catalogue" type="application/json">'
        )
        end = content.index("</script>", start)

        assert json.loads(content[start:end]) == catalogue.as_dicts()
