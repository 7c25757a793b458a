"""
JSON Web Token helpers.

Tokens carry the user's primary key in a ``userId`` claim and are signed
with ``BLOGIFY['JWT_SECRET']`` (SECRET_KEY by default).
"""
from datetime import datetime, timedelta, timezone

import jwt
from django.contrib.auth import get_user_model
from jwt.exceptions import ExpiredSignatureError, PyJWTError

from .conf import blog_settings
from .exceptions import AuthenticationError


def issue_token(user):
    """Return a signed access token for ``user``."""
    now = datetime.now(timezone.utc)
    payload = {
        "userId": user.pk,
        "iat": now,
        "exp": now + timedelta(hours=blog_settings.JWT_EXPIRATION_HOURS),
    }
    return jwt.encode(
        payload,
        blog_settings.JWT_SECRET,
        algorithm=blog_settings.JWT_ALGORITHM,
    )


def decode_token(token):
    """
    Verify a token and return its payload.

    Raises:
        AuthenticationError: if the token is expired, tampered with or malformed
    """
    try:
        payload = jwt.decode(
            token,
            blog_settings.JWT_SECRET,
            algorithms=[blog_settings.JWT_ALGORITHM],
        )
    except ExpiredSignatureError as exc:
        raise AuthenticationError("Token has expired") from exc
    except PyJWTError as exc:
        raise AuthenticationError("Invalid token") from exc

    if "userId" not in payload:
        raise AuthenticationError("Invalid token")
    return payload


def user_from_token(token):
    """Return the active user a token was issued to."""
    payload = decode_token(token)
    User = get_user_model()
    user = User.objects.filter(pk=payload["userId"], is_active=True).first()
    if user is None:
        raise AuthenticationError("Invalid token")
    return user


def user_from_request(request):
    """Return the user named by a request's ``Authorization: Bearer`` header."""
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Authentication token required")
    return user_from_token(token.strip())
