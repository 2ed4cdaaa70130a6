"""Admin registrations for properties domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Owner, Property, PropertyImage, PropertyTrace


class PropertyImageInline(admin.TabularInline):
    model = PropertyImage
    extra = 0
    fields = ("file", "enabled")


class PropertyTraceInline(admin.TabularInline):
    model = PropertyTrace
    extra = 0
    fields = ("date_sale", "name", "value", "tax")
    readonly_fields = fields
    can_delete = False

    def has_add_permission(self, request, obj=None):  # type: ignore
        return False


@admin.register(Owner)
class OwnerAdmin(admin.ModelAdmin):
    list_display = ("name", "address", "birthday")
    search_fields = ("name", "address")


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    list_display = ("code_internal", "name", "address", "price", "year", "owner")
    list_filter = ("year",)
    search_fields = ("name", "address", "code_internal", "owner__name")
    inlines = (PropertyImageInline, PropertyTraceInline)
    def get_readonly_fields(self, request, obj=None):  # type: ignore
        # Price transitions must leave a trace, so they go through the API only
        return ("price",) if obj else ()


@admin.register(PropertyTrace)
class PropertyTraceAdmin(admin.ModelAdmin):
    list_display = ("property", "date_sale", "name", "value", "tax")
    search_fields = ("property__code_internal", "name")

    def has_change_permission(self, request, obj=None):  # type: ignore
        return False

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False
