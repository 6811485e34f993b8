from __future__ import annotations


class PostsServiceError(Exception):
    """Base exception for all posts-service domain errors."""


class UserAlreadyExistsError(PostsServiceError):
    """Signup with an email that is already registered."""


class PasswordMismatchError(PostsServiceError):
    """Signup where password and confirm_password differ."""


class UserNotFoundError(PostsServiceError):
    """Login with an email that has no account."""


class InvalidCredentialsError(PostsServiceError):
    """Login with a wrong password."""


class AuthTokenError(PostsServiceError):
    """Missing, malformed, expired or otherwise invalid access token."""
