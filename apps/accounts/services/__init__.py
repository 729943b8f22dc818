from .auth import (
    AccountError,
    DuplicateAccountError,
    InvalidCredentialsError,
    register_user,
    login_user,
    authenticate_token,
    issue_token,
)

__all__ = [
    'AccountError',
    'DuplicateAccountError',
    'InvalidCredentialsError',
    'register_user',
    'login_user',
    'authenticate_token',
    'issue_token',
]
