"""
Authentication views for the Horoscope API.
"""
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiExample

from apps.accounts.services import (
    DuplicateAccountError,
    InvalidCredentialsError,
    login_user,
    register_user,
)
from api.exceptions import AuthenticationError, DuplicateResourceError

from .serializers import (
    AuthResponseSerializer,
    LoginSerializer,
    ProfileSerializer,
    RegisterSerializer,
    UserSerializer,
)


class RegisterView(APIView):
    """
    Register a new user account.

    Derives the zodiac sign from the birthdate and returns a bearer token
    for immediate use.
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        summary="Register a new user",
        description="Create an account. The zodiac sign is calculated from the birthdate.",
        request=RegisterSerializer,
        responses={201: AuthResponseSerializer},
        examples=[
            OpenApiExample(
                'Register Request',
                value={
                    'name': 'John Doe',
                    'email': 'john@example.com',
                    'password': 'Password123',
                    'birthdate': '1990-05-15'
                },
                request_only=True
            )
        ]
    )
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            user, token = register_user(**serializer.validated_data)
        except DuplicateAccountError as e:
            raise DuplicateResourceError(str(e))

        return Response({
            'status': 'success',
            'message': 'User registered successfully',
            'data': {
                'user': UserSerializer(user.profile).data,
                'token': token,
            }
        }, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """
    Login endpoint - exchange email and password for a bearer token.
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        summary="Login with email and password",
        description="Authenticate with email and password to receive a bearer token.",
        request=LoginSerializer,
        responses={200: AuthResponseSerializer},
        examples=[
            OpenApiExample(
                'Login Request',
                value={
                    'email': 'john@example.com',
                    'password': 'Password123'
                },
                request_only=True
            )
        ]
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            user, token = login_user(
                serializer.validated_data['email'],
                serializer.validated_data['password'],
                request=request,
            )
        except InvalidCredentialsError as e:
            raise AuthenticationError(str(e))

        return Response({
            'status': 'success',
            'message': 'Login successful',
            'data': {
                'user': UserSerializer(user.profile).data,
                'token': token,
            }
        })


class ProfileView(APIView):
    """
    Get the authenticated user's profile.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Get user profile",
        description="Returns the current user's profile and zodiac sign.",
        responses={200: ProfileSerializer}
    )
    def get(self, request):
        return Response({
            'status': 'success',
            'data': {
                'user': ProfileSerializer(request.user.profile).data,
            }
        })
