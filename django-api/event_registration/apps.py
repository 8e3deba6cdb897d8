from django.apps import AppConfig


class EventRegistrationConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "event_registration"
    verbose_name = "Event Registration"
