"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models

from event_registration.domain.value_objects import Category


class Event(models.Model):
    """Persistence model for events."""

    name = models.CharField(max_length=255)
    category = models.CharField(max_length=64, choices=Category.choices())
    event_date = models.DateField()
    registration_start_date = models.DateField()
    registration_end_date = models.DateField()
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        ordering = ["event_date"]
        indexes = [
            models.Index(fields=["category", "event_date"], name="event_category_date_idx"),
            models.Index(
                fields=["registration_start_date", "registration_end_date"],
                name="event_reg_window_idx",
            ),
        ]

    def __str__(self) -> str:
        return self.name


class Registration(models.Model):
    """Persistence model for registrations.

    Event category, date and name are stored as a snapshot taken at
    registration time.
    """

    full_name = models.CharField(max_length=255)
    email = models.CharField(max_length=255)
    college_name = models.CharField(max_length=255)
    department = models.CharField(max_length=255)
    event = models.ForeignKey(Event, on_delete=models.PROTECT, related_name="registrations")
    category = models.CharField(max_length=64)
    event_date = models.DateField()
    event_name = models.CharField(max_length=255)
    created_at = models.DateTimeField()

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["event_date", "event_name"], name="registration_date_name_idx"),
            models.Index(fields=["-created_at"], name="registration_created_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["email", "event_date"],
                name="unique_registration_email_event_date",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.full_name} - {self.event_name}"
