"""Serializers for account requests and responses."""

from rest_framework import serializers


class SignupSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    fullName = serializers.CharField(required=False, allow_blank=True, default="")


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class ProfileUpdateSerializer(serializers.Serializer):
    fullName = serializers.CharField(max_length=150, allow_blank=True)
    phone = serializers.CharField(max_length=32, allow_blank=True, required=False, default="")


class ProfileSerializer(serializers.Serializer):
    """Serializer for Profile domain model."""

    id = serializers.CharField(source="user_id")
    email = serializers.EmailField()
    fullName = serializers.CharField(source="full_name")
    phone = serializers.CharField()
    avatarUrl = serializers.CharField(source="avatar_url")
    updatedAt = serializers.DateTimeField(source="updated_at", allow_null=True)
