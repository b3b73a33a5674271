"""URL configuration for the heater rental project.

The JSON API lives under ``/api/``; the Django admin is a read-only view of
the rental ledger.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore

from apps.core.views import healthz

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('apps.rentals.urls')),
    path('healthz', healthz, name='healthz'),
]
