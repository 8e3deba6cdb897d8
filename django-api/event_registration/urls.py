from django.urls import path

from event_registration.handlers import (
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

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/active", ActiveEventListView.as_view(), name="event-active-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "availability/categories",
        CategoryOptionsView.as_view(),
        name="availability-categories",
    ),
    path(
        "availability/categories/<str:category>/dates",
        DateOptionsView.as_view(),
        name="availability-dates",
    ),
    path(
        "availability/categories/<str:category>/dates/<str:event_date>/events",
        EventOptionsView.as_view(),
        name="availability-events",
    ),
    path("registrations", RegistrationListView.as_view(), name="registration-list"),
    path(
        "registrations/dates",
        RegistrationDateOptionsView.as_view(),
        name="registration-dates",
    ),
    path(
        "registrations/dates/<str:event_date>/event-names",
        RegistrationEventNameOptionsView.as_view(),
        name="registration-event-names",
    ),
    path(
        "registrations/export",
        RegistrationExportView.as_view(),
        name="registration-export",
    ),
]
