"""
Horoscope URL patterns for the Horoscope API.
"""
from django.urls import path

from .views import (
    HoroscopeByDateView,
    HoroscopeHistoryView,
    HoroscopeStatsView,
    TodayHoroscopeView,
    ZodiacSignListView,
)

urlpatterns = [
    path('today/', TodayHoroscopeView.as_view(), name='today'),
    path('history/', HoroscopeHistoryView.as_view(), name='history'),
    path('date/<str:date>/', HoroscopeByDateView.as_view(), name='by_date'),
    path('stats/', HoroscopeStatsView.as_view(), name='stats'),
    path('signs/', ZodiacSignListView.as_view(), name='signs'),
]
