"""
Serializers for site settings.
"""
from rest_framework import serializers
from .models import SiteSettings


class SiteSettingsSerializer(serializers.ModelSerializer):

    class Meta:
        model = SiteSettings
        fields = '__all__'
        read_only_fields = ('id', 'last_updated_by', 'update_history', 'created_at', 'updated_at')
