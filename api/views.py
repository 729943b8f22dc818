"""
Service-level views for the Horoscope API.
"""
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema


class HealthCheckView(APIView):
    """
    Liveness check for load balancers and uptime monitors.
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="Health check")
    def get(self, request):
        return Response({'status': 'online', 'message': 'Horoscope API is running'})
