"""
Horoscope serializers for the Horoscope API.
"""
from rest_framework import serializers


class HoroscopeEntrySerializer(serializers.Serializer):
    """A day's horoscope, stored or freshly generated."""
    zodiac_sign = serializers.CharField()
    content = serializers.CharField()
    date = serializers.DateField()
    affirmation = serializers.CharField()
    lucky_numbers = serializers.ListField(child=serializers.IntegerField())
    created_at = serializers.DateTimeField(required=False)
    saved = serializers.BooleanField()


class HoroscopeHistorySerializer(serializers.Serializer):
    """Serializer for the history window."""
    horoscopes = HoroscopeEntrySerializer(many=True)
    total_days = serializers.IntegerField()
    saved_count = serializers.IntegerField()
    generated_count = serializers.IntegerField()


class HoroscopeStatsSerializer(serializers.Serializer):
    """Serializer for horoscope statistics."""
    total_horoscopes = serializers.IntegerField()
    first_horoscope = serializers.DateField(allow_null=True)
    latest_horoscope = serializers.DateField(allow_null=True)
    current_streak = serializers.IntegerField()
    longest_streak = serializers.IntegerField()
    zodiac_sign = serializers.CharField()
    member_since = serializers.DateTimeField()


class ZodiacSignSerializer(serializers.Serializer):
    """Serializer for the zodiac sign catalogue."""
    sign = serializers.CharField()
    symbol = serializers.CharField()
    element = serializers.CharField()
    date_range = serializers.CharField()
    affirmation = serializers.CharField()
