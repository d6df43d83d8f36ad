"""
Serializers for the media library.
"""
from rest_framework import serializers
from .models import Media


class MediaSerializer(serializers.ModelSerializer):
    """Serializer for Media model."""
    icon = serializers.CharField(read_only=True)
    readable_file_size = serializers.CharField(read_only=True)

    class Meta:
        model = Media
        fields = '__all__'
        read_only_fields = (
            'id', 'views', 'downloads', 'shares', 'deleted_by', 'deleted_at',
            'created_at', 'updated_at',
        )
