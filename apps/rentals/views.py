"""API views for the rentals domain."""

from __future__ import annotations

from datetime import date

from django.utils import timezone  # type: ignore
from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from .apps import get_reservation_service
from .domain.exceptions import ValidationError
from .serializers import RentalApplicationCreateSerializer, RentalApplicationSerializer


class ReservationServiceMixin:
    """Resolves the reservation service wired up at startup.

    ``service`` can be overridden per view via ``as_view(service=...)``.
    """

    service = None
    authentication_classes: list = []
    permission_classes = [permissions.AllowAny]

    def get_service(self):
        return self.service or get_reservation_service()


class RentalApplicationListCreateView(ReservationServiceMixin, APIView):
    """Submit a rental application or list the accepted ones."""

    def get(self, request):  # type: ignore
        records = self.get_service().list_applications()
        return Response(RentalApplicationSerializer(records, many=True).data)

    def post(self, request):  # type: ignore
        serializer = RentalApplicationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        record = self.get_service().submit_application(serializer.to_command())
        return Response(RentalApplicationSerializer(record).data, status=status.HTTP_201_CREATED)


class RentalApplicationDetailView(ReservationServiceMixin, APIView):
    """Single application by id."""

    def get(self, request, application_id):  # type: ignore
        record = self.get_service().get_application(application_id)
        return Response(RentalApplicationSerializer(record).data)


class ReservedDatesView(ReservationServiceMixin, APIView):
    """Dates already taken, for rendering the booking calendar.

    ``from`` defaults to today in the project time zone; ``to`` is open
    ended unless given.
    """

    def get(self, request):  # type: ignore
        start = self._parse_date(request.query_params.get("from"), "from") or timezone.localdate()
        end = self._parse_date(request.query_params.get("to"), "to")
        reserved = self.get_service().reserved_dates(start, end)
        return Response({"reservedDates": [d.isoformat() for d in reserved]})

    @staticmethod
    def _parse_date(value: str | None, field: str) -> date | None:
        if not value:
            return None
        try:
            return date.fromisoformat(value)
        except ValueError:
            raise ValidationError.single(field, "날짜는 YYYY-MM-DD 형식이어야 합니다.")
