from django.contrib import admin
from .models import Tag, Page, PageVersion


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ('name', 'slug', 'color', 'is_active', 'created_at')
    list_filter = ('is_active',)
    search_fields = ('name', 'slug')
    readonly_fields = ('created_at', 'updated_at')


class PageVersionInline(admin.TabularInline):
    model = PageVersion
    extra = 0
    can_delete = False
    fields = ('version_number', 'title', 'author', 'changes', 'created_at')
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ('title', 'slug', 'page_type', 'status', 'author', 'current_version', 'page_views', 'published_at')
    list_filter = ('status', 'page_type', 'template', 'is_public', 'is_home_page')
    search_fields = ('title', 'slug', 'author__email')
    readonly_fields = ('created_at', 'updated_at', 'published_at', 'current_version', 'page_views', 'last_analytics_update')
    filter_horizontal = ('related_pages', 'restricted_users')
    inlines = [PageVersionInline]


@admin.register(PageVersion)
class PageVersionAdmin(admin.ModelAdmin):
    list_display = ('page', 'version_number', 'title', 'author', 'created_at')
    search_fields = ('page__slug', 'title')
    readonly_fields = ('page', 'version_number', 'title', 'content', 'author', 'changes', 'created_at')
