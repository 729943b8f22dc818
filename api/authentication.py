"""
Bearer token authentication for the Horoscope API.
"""
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication

from apps.accounts.services import InvalidCredentialsError, authenticate_token


class BearerTokenAuthentication(JWTAuthentication):
    """
    Authenticate requests carrying `Authorization: Bearer <token>`.

    Requests without the header stay anonymous; permission classes decide
    whether that is allowed.
    """

    def authenticate(self, request):
        header = self.get_header(request)
        if header is None:
            return None

        raw_token = self.get_raw_token(header)
        if raw_token is None:
            return None

        try:
            user = authenticate_token(raw_token)
        except InvalidCredentialsError as e:
            raise AuthenticationFailed(str(e))

        return user, raw_token
