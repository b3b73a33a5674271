"""URL routing for the rentals domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import (
    RentalApplicationDetailView,
    RentalApplicationListCreateView,
    ReservedDatesView,
)

urlpatterns = [
    path(
        "rental-applications",
        RentalApplicationListCreateView.as_view(),
        name="rental-application-list",
    ),
    path(
        "rental-applications/<str:application_id>",
        RentalApplicationDetailView.as_view(),
        name="rental-application-detail",
    ),
    path("reserved-dates", ReservedDatesView.as_view(), name="reserved-dates"),
]
