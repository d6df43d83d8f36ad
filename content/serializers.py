"""
Serializers for Tag, Page and PageVersion models.
"""
from rest_framework import serializers
from .models import Tag, Page, PageVersion


class TagSerializer(serializers.ModelSerializer):

    class Meta:
        model = Tag
        fields = '__all__'
        read_only_fields = ('id', 'created_at', 'updated_at')


class PageVersionSerializer(serializers.ModelSerializer):

    class Meta:
        model = PageVersion
        fields = ('id', 'version_number', 'title', 'content', 'author', 'changes', 'created_at')
        read_only_fields = fields


class PageSerializer(serializers.ModelSerializer):
    """Serializer for Page model, including derived url / read_time / is_published."""
    url = serializers.CharField(read_only=True)
    read_time = serializers.IntegerField(read_only=True)
    is_published = serializers.BooleanField(read_only=True)
    version_history = PageVersionSerializer(many=True, read_only=True)

    class Meta:
        model = Page
        exclude = ('access_password',)
        read_only_fields = (
            'id', 'created_at', 'updated_at', 'current_version', 'published_at',
            'page_views', 'last_analytics_update',
        )
