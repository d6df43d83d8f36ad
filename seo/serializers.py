"""
Serializers for SEO entries.
"""
from rest_framework import serializers
from .models import SEO


class SEOSerializer(serializers.ModelSerializer):
    full_canonical_url = serializers.CharField(read_only=True)

    class Meta:
        model = SEO
        fields = '__all__'
        read_only_fields = ('id', 'created_at', 'updated_at')
