from django.contrib import admin
from .models import Media


@admin.register(Media)
class MediaAdmin(admin.ModelAdmin):
    list_display = ('title', 'filename', 'media_type', 'category', 'status', 'is_active', 'is_public', 'uploaded_by', 'created_at')
    list_filter = ('media_type', 'category', 'status', 'is_active', 'is_public', 'storage_service')
    search_fields = ('title', 'filename', 'original_name', 'uploaded_by__email')
    readonly_fields = ('views', 'downloads', 'shares', 'deleted_by', 'deleted_at', 'created_at', 'updated_at')

    def get_queryset(self, request):
        # Admins see soft-deleted media too
        return Media.all_objects.all()
