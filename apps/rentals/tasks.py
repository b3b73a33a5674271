"""Celery tasks for the rentals domain."""

from __future__ import annotations

import logging
from datetime import date

from celery import shared_task  # type: ignore
from django.conf import settings  # type: ignore
from django.core.mail import send_mail  # type: ignore
from django.template.loader import render_to_string  # type: ignore
from django.utils.html import strip_tags  # type: ignore

from .domain.rental_periods import label_for

logger = logging.getLogger(__name__)


def format_korean_date(value: str) -> str:
    """``2025-12-24`` -> ``2025년 12월 24일``"""
    try:
        day = date.fromisoformat(value)
    except (TypeError, ValueError):
        return value or ""
    return f"{day.year}년 {day.month}월 {day.day}일"


@shared_task(name="rentals.send_application_notification", ignore_result=True)
def send_application_notification(application: dict) -> bool:
    """
    Email the administrator about a new rental application.

    ``application`` is the API representation of the record. Failures
    are logged and reported as False; the reservation stands either way.
    """

    admin_email = getattr(settings, "RENTALS", {}).get("ADMIN_EMAIL")
    if not admin_email:
        logger.info("Email notification skipped: RENTALS['ADMIN_EMAIL'] is not configured")
        return False

    context = {
        "application": application,
        "start_date": format_korean_date(application.get("startDate")),
        "end_date": format_korean_date(application.get("endDate")),
        "rental_period_label": label_for(application.get("rentalPeriod") or ""),
    }
    subject = f"[캠핑난로] 새로운 대여 신청 - {application.get('name')}님"

    try:
        html_message = render_to_string("rentals/email/application_submitted.html", context)
        send_mail(
            subject=subject,
            message=strip_tags(html_message),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[admin_email],
            html_message=html_message,
            fail_silently=False,
        )
    except Exception as e:
        logger.error(
            f"Failed to send notification for application {application.get('id')}: {e}",
            exc_info=True,
        )
        return False

    logger.info(f"Notification sent to {admin_email} for application {application.get('id')}")
    return True
