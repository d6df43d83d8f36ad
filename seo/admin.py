from django.contrib import admin
from .models import SEO


@admin.register(SEO)
class SEOAdmin(admin.ModelAdmin):
    list_display = ('page_slug', 'page_title', 'page_type', 'robots_meta', 'include_in_sitemap', 'sitemap_priority', 'updated_at')
    list_filter = ('page_type', 'robots_meta', 'include_in_sitemap', 'sitemap_changefreq')
    search_fields = ('page_slug', 'page_title', 'focus_keyword')
    readonly_fields = ('created_at', 'updated_at')
