"""Integration tests for the rentals API endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.core import mail
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.rentals.models import RentalApplication, ReservedDate


class RentalApplicationAPITests(APITestCase):
    """Covers submission, conflicts and lookups over the ORM store."""

    def setUp(self) -> None:
        self.list_url = reverse("rental-application-list")

    def _payload(self, start: str, end: str, **extra) -> dict[str, str]:
        payload = {
            "name": "홍길동",
            "phone": "010-1234-5678",
            "startDate": start,
            "endDate": end,
        }
        payload.update(extra)
        return payload

    def test_submit_application_returns_created_record(self) -> None:
        response = self.client.post(
            self.list_url, self._payload("2025-12-24", "2025-12-26"), format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertTrue(response.data["id"])
        self.assertEqual(response.data["startDate"], "2025-12-24")
        self.assertEqual(response.data["endDate"], "2025-12-26")
        self.assertEqual(response.data["rentalPeriod"], "2nights3days")
        self.assertIsNone(response.data["email"])
        self.assertEqual(RentalApplication.objects.count(), 1)
        self.assertEqual(ReservedDate.objects.count(), 3)

    def test_overlapping_submission_is_a_conflict(self) -> None:
        first = self.client.post(self.list_url, self._payload("2025-12-24", "2025-12-26"), format="json")
        self.assertEqual(first.status_code, status.HTTP_201_CREATED, first.data)

        second = self.client.post(self.list_url, self._payload("2025-12-26", "2025-12-28"), format="json")

        self.assertEqual(second.status_code, status.HTTP_409_CONFLICT, second.data)
        self.assertIn("이미 예약", second.data["error"])
        self.assertEqual(second.data["conflictingDates"], ["2025-12-26"])
        self.assertEqual(RentalApplication.objects.count(), 1)

    def test_same_range_twice_gives_one_created_one_conflict(self) -> None:
        payload = self._payload("2025-12-24", "2025-12-26")

        codes = [
            self.client.post(self.list_url, payload, format="json").status_code
            for _ in range(2)
        ]

        self.assertEqual(codes, [status.HTTP_201_CREATED, status.HTTP_409_CONFLICT])

    def test_invalid_payload_lists_issues(self) -> None:
        response = self.client.post(
            self.list_url,
            {"name": "홍길동", "startDate": "24/12/2025", "endDate": "2025-12-26", "email": "nope"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["error"], "Invalid request data")
        fields = {issue["field"] for issue in response.data["details"]}
        self.assertEqual(fields, {"phone", "startDate", "email"})
        self.assertEqual(RentalApplication.objects.count(), 0)

    def test_reversed_range_is_rejected(self) -> None:
        response = self.client.post(self.list_url, self._payload("2025-12-26", "2025-12-24"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["details"][0]["field"], "endDate")
        self.assertEqual(ReservedDate.objects.count(), 0)

    def test_list_and_detail(self) -> None:
        created = self.client.post(
            self.list_url,
            self._payload("2025-12-01", "2025-12-01", additionalRequests="부탄가스 2개 추가"),
            format="json",
        ).data

        listing = self.client.get(self.list_url)
        detail = self.client.get(reverse("rental-application-detail", args=[created["id"]]))

        self.assertEqual(listing.status_code, status.HTTP_200_OK)
        self.assertEqual([item["id"] for item in listing.data], [created["id"]])
        self.assertEqual(detail.status_code, status.HTTP_200_OK)
        self.assertEqual(detail.data["additionalRequests"], "부탄가스 2개 추가")
        self.assertEqual(detail.data["rentalPeriodLabel"], "1박 2일 (15,000원)")

    def test_unknown_application_is_404(self) -> None:
        for application_id in ["00000000-0000-0000-0000-000000000000", "not-a-uuid"]:
            response = self.client.get(reverse("rental-application-detail", args=[application_id]))
            self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
            self.assertEqual(response.data["error"], "Application not found")

    def test_admin_is_emailed_after_commit(self) -> None:
        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.post(
                self.list_url,
                self._payload("2025-12-24", "2025-12-26", email="hong@example.com"),
                format="json",
            )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(len(mail.outbox), 1)
        message = mail.outbox[0]
        self.assertEqual(message.to, ["admin@heater-rental.test"])
        self.assertIn("홍길동", message.subject)
        self.assertIn("2025년 12월 24일", message.body)
        self.assertIn(response.data["id"], message.body)

    def test_conflict_sends_no_email(self) -> None:
        payload = self._payload("2025-12-24", "2025-12-26")
        with self.captureOnCommitCallbacks(execute=True):
            self.client.post(self.list_url, payload, format="json")
        mail.outbox.clear()

        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(mail.outbox, [])


class ReservedDatesAPITests(APITestCase):
    def setUp(self) -> None:
        self.url = reverse("reserved-dates")
        self.list_url = reverse("rental-application-list")

    def _reserve(self, start, end) -> None:
        response = self.client.post(
            self.list_url,
            {"name": "김철수", "phone": "010-0000-0000", "startDate": str(start), "endDate": str(end)},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)

    def test_defaults_to_dates_from_today(self) -> None:
        today = timezone.localdate()
        self._reserve(today - timedelta(days=3), today - timedelta(days=2))
        self._reserve(today + timedelta(days=1), today + timedelta(days=2))

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data["reservedDates"],
            [str(today + timedelta(days=1)), str(today + timedelta(days=2))],
        )

    def test_explicit_bounds(self) -> None:
        self._reserve("2025-12-01", "2025-12-05")

        response = self.client.get(self.url, {"from": "2025-12-02", "to": "2025-12-03"})

        self.assertEqual(response.data["reservedDates"], ["2025-12-02", "2025-12-03"])

    def test_malformed_bound_is_400(self) -> None:
        response = self.client.get(self.url, {"from": "yesterday"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["details"][0]["field"], "from")
