import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="RentalApplication",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                ("phone", models.CharField(max_length=30)),
                ("email", models.EmailField(blank=True, max_length=254)),
                ("start_date", models.DateField()),
                ("end_date", models.DateField()),
                (
                    "rental_period",
                    models.CharField(
                        choices=[
                            ("1night2days", "1박 2일 (15,000원)"),
                            ("2nights3days", "2박 3일 (25,000원)"),
                            ("3nights4days", "3박 4일 (35,000원)"),
                            ("4nightsPlus", "4박 5일 이상 (5,000원/1박 추가)"),
                        ],
                        help_text="Billed duration, descriptive only.",
                        max_length=20,
                    ),
                ),
                ("additional_requests", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Rental application",
                "verbose_name_plural": "Rental applications",
                "ordering": ["-start_date", "-created_at"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("end_date__gte", models.F("start_date"))),
                        name="rental_application_valid_dates",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="ReservedDate",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateField(unique=True)),
                (
                    "application",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="reserved_dates",
                        to="rentals.rentalapplication",
                    ),
                ),
            ],
            options={
                "verbose_name": "Reserved date",
                "verbose_name_plural": "Reserved dates",
                "ordering": ["date"],
            },
        ),
    ]
