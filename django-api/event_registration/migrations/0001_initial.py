import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("online_workshop", "Online Workshop"),
                            ("hackathon", "Hackathon"),
                            ("conference", "Conference"),
                            ("one_day_workshop", "One-day Workshop"),
                        ],
                        max_length=64,
                    ),
                ),
                ("event_date", models.DateField()),
                ("registration_start_date", models.DateField()),
                ("registration_end_date", models.DateField()),
                ("created_at", models.DateTimeField()),
                ("updated_at", models.DateTimeField()),
            ],
            options={
                "ordering": ["event_date"],
                "indexes": [
                    models.Index(fields=["category", "event_date"], name="event_category_date_idx"),
                    models.Index(
                        fields=["registration_start_date", "registration_end_date"],
                        name="event_reg_window_idx",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Registration",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("full_name", models.CharField(max_length=255)),
                ("email", models.CharField(max_length=255)),
                ("college_name", models.CharField(max_length=255)),
                ("department", models.CharField(max_length=255)),
                ("category", models.CharField(max_length=64)),
                ("event_date", models.DateField()),
                ("event_name", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField()),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="registrations",
                        to="event_registration.event",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["event_date", "event_name"], name="registration_date_name_idx"),
                    models.Index(fields=["-created_at"], name="registration_created_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("email", "event_date"),
                        name="unique_registration_email_event_date",
                    ),
                ],
            },
        ),
    ]
