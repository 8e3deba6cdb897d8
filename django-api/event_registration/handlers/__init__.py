from event_registration.handlers.views import (
    ActiveEventListView,
    CategoryOptionsView,
    DateOptionsView,
    EventDetailView,
    EventListView,
    EventOptionsView,
    RegistrationDateOptionsView,
    RegistrationEventNameOptionsView,
    RegistrationExportView,
    RegistrationListView,
)

__all__ = [
    "ActiveEventListView",
    "CategoryOptionsView",
    "DateOptionsView",
    "EventDetailView",
    "EventListView",
    "EventOptionsView",
    "RegistrationDateOptionsView",
    "RegistrationEventNameOptionsView",
    "RegistrationExportView",
    "RegistrationListView",
]
