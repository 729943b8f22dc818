"""
Account registration, login and bearer token services.

Business logic for authentication, separated from views.
"""
import logging

from django.contrib.auth import authenticate
from django.contrib.auth.models import User
from django.db import IntegrityError, transaction
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from apps.horoscopes.zodiac import parse_date, resolve_zodiac_sign

from ..models import Profile

logger = logging.getLogger(__name__)


class AccountError(Exception):
    """Base exception for account operations."""
    pass


class DuplicateAccountError(AccountError):
    """An account with this email address already exists."""
    pass


class InvalidCredentialsError(AccountError):
    """Email/password pair or bearer token did not match an active account."""
    pass


def normalize_email(email):
    return email.strip().lower()


def issue_token(user):
    """Signed bearer token for a user."""
    return str(AccessToken.for_user(user))


@transaction.atomic
def register_user(name, email, password, birthdate):
    """
    Create a user with a horoscope profile.

    The zodiac sign is derived from the birthdate.

    Returns:
        tuple: (user, token)

    Raises:
        DuplicateAccountError: if the email is already registered
        InvalidDateError: if the birthdate cannot be parsed
    """
    email = normalize_email(email)
    birthdate = parse_date(birthdate)
    zodiac_sign = resolve_zodiac_sign(birthdate)

    if User.objects.filter(username=email).exists():
        raise DuplicateAccountError('User with this email already exists')

    try:
        # Nested atomic block so a lost race leaves the outer transaction usable
        with transaction.atomic():
            user = User.objects.create_user(
                username=email,  # Use email as username
                email=email,
                password=password,
            )
    except IntegrityError as e:
        raise DuplicateAccountError('User with this email already exists') from e

    Profile.objects.create(user=user, name=name.strip(), birthdate=birthdate)

    logger.info(f"Registered {email} as {zodiac_sign}")
    return user, issue_token(user)


def login_user(email, password, request=None):
    """
    Check credentials and issue a token.

    Unknown email and wrong password fail the same way.

    Returns:
        tuple: (user, token)

    Raises:
        InvalidCredentialsError: if the credentials don't match an active
            user with a horoscope profile
    """
    user = authenticate(
        request=request,
        username=normalize_email(email),
        password=password,
    )
    if user is None or not user.is_active or not hasattr(user, 'profile'):
        logger.info(f"Failed login attempt for {normalize_email(email)}")
        raise InvalidCredentialsError('Invalid email or password')

    return user, issue_token(user)


def authenticate_token(raw_token):
    """
    Resolve a bearer token to its user.

    Checks signature and expiry, then that the owner still exists, is
    active and has a horoscope profile.

    Raises:
        InvalidCredentialsError: for any invalid, expired or orphaned token
    """
    if isinstance(raw_token, bytes):
        raw_token = raw_token.decode('utf-8', errors='replace')

    try:
        token = AccessToken(raw_token)
        user_id = token[api_settings.USER_ID_CLAIM]
    except (TokenError, KeyError) as e:
        raise InvalidCredentialsError('Invalid token') from e

    try:
        user = User.objects.select_related('profile').get(
            **{api_settings.USER_ID_FIELD: user_id}
        )
    except (User.DoesNotExist, ValueError) as e:
        raise InvalidCredentialsError('Invalid token') from e

    if not user.is_active or not hasattr(user, 'profile'):
        raise InvalidCredentialsError('Invalid token')

    return user
