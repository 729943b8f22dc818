"""
Main API URL configuration.
Routes to versioned API endpoints.
"""
from django.urls import path, include
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)

from .views import HealthCheckView

app_name = 'api'

urlpatterns = [
    # API v1
    path('v1/', include('api.v1.urls', namespace='v1')),

    path('health/', HealthCheckView.as_view(), name='health'),

    # API Documentation
    path('schema/', SpectacularAPIView.as_view(), name='schema'),
    path('docs/', SpectacularSwaggerView.as_view(url_name='api:schema'), name='swagger-ui'),
    path('redoc/', SpectacularRedocView.as_view(url_name='api:schema'), name='redoc'),
]
