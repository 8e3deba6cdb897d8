from django.contrib import admin

from event_registration.models import Event, Registration


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = [
        "name",
        "category",
        "event_date",
        "registration_start_date",
        "registration_end_date",
    ]
    list_filter = ["category"]
    search_fields = ["name"]


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ["full_name", "email", "event_name", "event_date", "created_at"]
    list_filter = ["event_date", "category"]
    search_fields = ["full_name", "email", "event_name"]
    readonly_fields = [field.name for field in Registration._meta.fields]

    def has_add_permission(self, request) -> bool:
        return False

    def has_delete_permission(self, request, obj=None) -> bool:
        return False
