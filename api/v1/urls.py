"""
API v1 URL configuration.
"""
from django.urls import path, include

app_name = 'v1'

urlpatterns = [
    path('auth/', include(('api.v1.auth.urls', 'auth'))),
    path('horoscope/', include(('api.v1.horoscope.urls', 'horoscope'))),
]
