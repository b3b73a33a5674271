"""Admin registration for rentals.

Applications and their reserved dates are a permanent ledger, so the
admin is read-only: no add, change or delete.
"""

from __future__ import annotations

from django.contrib import admin

from .models import RentalApplication, ReservedDate


class ReadOnlyAdminMixin:
    def has_add_permission(self, request):  # type: ignore
        return False

    def has_change_permission(self, request, obj=None):  # type: ignore
        return False

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False


class ReservedDateInline(ReadOnlyAdminMixin, admin.TabularInline):
    model = ReservedDate
    fields = ("date",)
    extra = 0


@admin.register(RentalApplication)
class RentalApplicationAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = (
        "name",
        "phone",
        "email",
        "start_date",
        "end_date",
        "rental_period",
        "created_at",
    )
    list_filter = ("rental_period", "start_date")
    search_fields = ("name", "phone", "email")
    inlines = [ReservedDateInline]


@admin.register(ReservedDate)
class ReservedDateAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ("date", "application")
    date_hierarchy = "date"
