"""Serializers for validating input and transforming domain models to API responses."""

from django.core.validators import RegexValidator
from rest_framework import serializers

from event_registration.domain import (
    Category,
    EventData,
    EventId,
    RegistrationData,
    RegistrationFilters,
    RegistrationWindow,
)
from event_registration.domain.value_objects import (
    EVENT_NAME_PATTERN,
    INSTITUTION_PATTERN,
    PERSON_NAME_PATTERN,
    category_label,
)


class EventInputSerializer(serializers.Serializer):
    """Validates event create/update payloads."""

    name = serializers.CharField(
        max_length=255,
        validators=[
            RegexValidator(
                EVENT_NAME_PATTERN,
                "Event name contains invalid characters. Only letters, numbers, spaces, "
                "hyphens, underscores, periods, commas, and ampersands are allowed.",
            )
        ],
    )
    category = serializers.ChoiceField(choices=Category.choices())
    event_date = serializers.DateField()
    registration_start_date = serializers.DateField()
    registration_end_date = serializers.DateField()

    def validate(self, attrs: dict) -> dict:
        try:
            RegistrationWindow(
                start=attrs["registration_start_date"],
                end=attrs["registration_end_date"],
                event_date=attrs["event_date"],
            )
        except ValueError as exc:
            raise serializers.ValidationError({"registration_end_date": [str(exc)]}) from exc
        return attrs

    def to_event_data(self) -> EventData:
        data = self.validated_data
        return EventData(
            name=data["name"],
            category=Category(data["category"]),
            event_date=data["event_date"],
            registration_start_date=data["registration_start_date"],
            registration_end_date=data["registration_end_date"],
        )


class RegistrationInputSerializer(serializers.Serializer):
    """Validates public registration payloads."""

    full_name = serializers.CharField(
        max_length=255,
        validators=[
            RegexValidator(
                PERSON_NAME_PATTERN,
                "Full name contains invalid characters. Only letters, numbers, spaces, "
                "periods, and hyphens are allowed.",
            )
        ],
    )
    email = serializers.EmailField(max_length=255)
    college_name = serializers.CharField(
        max_length=255,
        validators=[
            RegexValidator(
                INSTITUTION_PATTERN,
                "College name contains invalid characters. Only letters, numbers, spaces, "
                "periods, hyphens, commas, apostrophes, and ampersands are allowed.",
            )
        ],
    )
    department = serializers.CharField(
        max_length=255,
        validators=[
            RegexValidator(
                INSTITUTION_PATTERN,
                "Department contains invalid characters. Only letters, numbers, spaces, "
                "periods, hyphens, commas, apostrophes, and ampersands are allowed.",
            )
        ],
    )
    event_id = serializers.IntegerField(min_value=1)

    def to_registration_data(self) -> RegistrationData:
        data = self.validated_data
        return RegistrationData(
            full_name=data["full_name"],
            email=data["email"],
            college_name=data["college_name"],
            department=data["department"],
            event_id=EventId(data["event_id"]),
        )


class RegistrationFilterSerializer(serializers.Serializer):
    """Parses the optional ``event_date`` and ``event_name`` query parameters."""

    event_date = serializers.DateField(required=False, allow_null=True)
    event_name = serializers.CharField(required=False, allow_blank=True)

    def to_filters(self) -> RegistrationFilters:
        data = self.validated_data
        return RegistrationFilters(
            event_date=data.get("event_date"),
            event_name=data.get("event_name") or None,
        )


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    category = serializers.CharField(source="category.value")
    category_label = serializers.CharField(source="category.label")
    event_date = serializers.DateField()
    registration_start_date = serializers.DateField()
    registration_end_date = serializers.DateField()
    status = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_status(self, event) -> str:
        return event.registration_status(self.context["today"]).value


class RegistrationSerializer(serializers.Serializer):
    """Serializer for Registration domain model."""

    id = serializers.IntegerField(source="id.value")
    full_name = serializers.CharField()
    email = serializers.CharField()
    college_name = serializers.CharField()
    department = serializers.CharField()
    event_id = serializers.IntegerField(source="event_id.value")
    event_name = serializers.CharField()
    event_date = serializers.DateField()
    category = serializers.CharField()
    category_label = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()

    def get_category_label(self, registration) -> str:
        return category_label(registration.category)


def options(mapping: dict) -> list[dict]:
    """Render an ordered mapping as ``[{"value": ..., "label": ...}]``."""
    return [
        {"value": key.isoformat() if hasattr(key, "isoformat") else key, "label": label}
        for key, label in mapping.items()
    ]
