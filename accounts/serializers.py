"""
Serializers for user accounts.
"""
from rest_framework import serializers
from .models import User, SECRET_FIELDS


class UserSerializer(serializers.ModelSerializer):
    """Public projection of a user. Never exposes password or token fields."""

    class Meta:
        model = User
        exclude = SECRET_FIELDS + ('groups', 'user_permissions')
        read_only_fields = ('id', 'created_at', 'updated_at', 'last_login')
