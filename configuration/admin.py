from django.contrib import admin
from .models import SiteSettings


@admin.register(SiteSettings)
class SiteSettingsAdmin(admin.ModelAdmin):
    list_display = ('site_title', 'facility_name', 'contact_email', 'contact_phone', 'maintenance_mode', 'updated_at')
    readonly_fields = ('last_updated_by', 'update_history', 'created_at', 'updated_at')

    def has_add_permission(self, request):
        return not SiteSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
