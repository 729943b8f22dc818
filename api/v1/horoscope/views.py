"""
Horoscope views for the Horoscope API.
"""
from datetime import datetime

from django.conf import settings
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.horoscopes.services import (
    FutureDateError,
    affirmation,
    entry_from_record,
    get_history,
    get_horoscope_for_date,
    get_or_create_horoscope,
    get_stats,
)
from apps.horoscopes.zodiac import ZODIAC_SIGN_NAMES, get_zodiac_data

from .serializers import (
    HoroscopeEntrySerializer,
    HoroscopeHistorySerializer,
    HoroscopeStatsSerializer,
    ZodiacSignSerializer,
)


def parse_history_days(value):
    """
    Read the `days` query parameter.

    Missing or non-numeric values fall back to the default, decimals are
    truncated and values above the maximum are capped.
    """
    default = settings.HOROSCOPE_HISTORY_DEFAULT_DAYS
    maximum = settings.HOROSCOPE_HISTORY_MAX_DAYS

    try:
        days = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default

    if days < 1:
        raise ValidationError(f'days must be between 1 and {maximum}.')
    return min(days, maximum)


class TodayHoroscopeView(APIView):
    """
    Get today's horoscope, creating it on the first request of the day.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Get today's horoscope",
        description="Returns today's horoscope for the current user, with affirmation and lucky numbers.",
        responses={200: HoroscopeEntrySerializer}
    )
    def get(self, request):
        horoscope, _ = get_or_create_horoscope(request.user)
        return Response({
            'status': 'success',
            'data': {
                'horoscope': HoroscopeEntrySerializer(entry_from_record(horoscope)).data,
            }
        })


class HoroscopeHistoryView(APIView):
    """
    Get the last N days of horoscopes.

    Days without a stored horoscope are filled with generated readings
    that are not saved.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Get horoscope history",
        description="Horoscopes for the last N days, newest first.",
        parameters=[
            OpenApiParameter(
                name='days', type=int, required=False,
                description='Number of days to fetch (1-30, default 7)'
            ),
        ],
        responses={200: HoroscopeHistorySerializer}
    )
    def get(self, request):
        days = parse_history_days(request.query_params.get('days'))
        history = get_history(request.user, days)
        return Response({
            'status': 'success',
            'data': HoroscopeHistorySerializer(history).data,
        })


class HoroscopeByDateView(APIView):
    """
    Get the horoscope for a specific date (YYYY-MM-DD).
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Get horoscope for a date",
        description="Stored horoscope for the date if one exists, otherwise a generated one. "
                    "Today's horoscope is created if missing. Future dates are rejected.",
        responses={200: HoroscopeEntrySerializer}
    )
    def get(self, request, date):
        try:
            day = datetime.strptime(date, '%Y-%m-%d').date()
        except ValueError:
            raise ValidationError('Invalid date format. Please use YYYY-MM-DD format.')

        try:
            entry = get_horoscope_for_date(request.user, day)
        except FutureDateError as e:
            raise ValidationError(str(e))

        return Response({
            'status': 'success',
            'data': {
                'horoscope': HoroscopeEntrySerializer(entry).data,
            }
        })


class HoroscopeStatsView(APIView):
    """
    Get the user's horoscope statistics.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Get horoscope statistics",
        description="Totals, first and latest stored horoscope, and streaks.",
        responses={200: HoroscopeStatsSerializer}
    )
    def get(self, request):
        return Response({
            'status': 'success',
            'data': {
                'stats': HoroscopeStatsSerializer(get_stats(request.user)).data,
            }
        })


class ZodiacSignListView(APIView):
    """
    List the twelve zodiac signs with their date ranges.
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        summary="List zodiac signs",
        responses={200: ZodiacSignSerializer(many=True)}
    )
    def get(self, request):
        signs = [
            dict(get_zodiac_data(sign), affirmation=affirmation(sign))
            for sign in ZODIAC_SIGN_NAMES
        ]
        return Response({
            'status': 'success',
            'data': {
                'signs': ZodiacSignSerializer(signs, many=True).data,
            }
        })
