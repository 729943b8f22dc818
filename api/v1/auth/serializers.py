"""
Authentication serializers for the Horoscope API.
"""
from django.utils import timezone
from rest_framework import serializers

from apps.accounts.models import Profile


class UserSerializer(serializers.ModelSerializer):
    """Public profile fields returned after register/login."""
    id = serializers.IntegerField(source='user_id', read_only=True)
    email = serializers.EmailField(read_only=True)

    class Meta:
        model = Profile
        fields = ['id', 'name', 'email', 'birthdate', 'zodiac_sign']
        read_only_fields = fields


class ProfileSerializer(UserSerializer):
    """Serializer for the authenticated user's profile."""
    zodiac_display = serializers.CharField(read_only=True)

    class Meta(UserSerializer.Meta):
        fields = UserSerializer.Meta.fields + ['zodiac_display', 'created_at']
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    """Serializer for user registration."""
    name = serializers.CharField(required=True, min_length=2, max_length=50)
    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        min_length=6,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )
    birthdate = serializers.DateField(required=True, input_formats=['%Y-%m-%d', 'iso-8601'])

    def validate_name(self, value):
        value = value.strip()
        if len(value) < 2:
            raise serializers.ValidationError('Name must be between 2 and 50 characters.')
        return value

    def validate_email(self, value):
        return value.strip().lower()

    def validate_birthdate(self, value):
        """Birthdates can't be in the future."""
        if value > timezone.localdate():
            raise serializers.ValidationError('Birthdate cannot be in the future.')
        return value


class LoginSerializer(serializers.Serializer):
    """Serializer for email/password login."""
    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )


class AuthResponseSerializer(serializers.Serializer):
    """Documentation shape of register/login responses."""
    status = serializers.CharField()
    message = serializers.CharField()
    data = serializers.DictField()
