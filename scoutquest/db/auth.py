"""
Wrappers around the Supabase auth provider.

Provider refusals become AuthenticationError / RegistrationError; anything
else (network failures, unexpected responses) becomes BackendError.
"""

import logging
from typing import Optional, Tuple

from scoutquest.core.errors import AuthenticationError, BackendError, RegistrationError
from supabase import AuthError, Client

logger = logging.getLogger(__name__)


def _tokens(session) -> Tuple[Optional[str], Optional[str]]:
    if session is None:
        return None, None
    return session.access_token, session.refresh_token


def sign_in(client: Client, email: str, password: str) -> Tuple[str, Optional[str]]:
    """Sign in with email and password. Returns (access_token, refresh_token)."""
    try:
        response = client.auth.sign_in_with_password(
            {"email": email, "password": password}
        )
    except AuthError as e:
        logger.info(f"Sign in rejected for {email}: {e.message}")
        raise AuthenticationError(e.message) from e
    except Exception as e:
        logger.error(f"Sign in failed for {email}: {e}")
        raise BackendError("sign_in", str(e)) from e

    access_token, refresh_token = _tokens(response.session)
    if not access_token:
        raise AuthenticationError("Invalid email or password")

    return access_token, refresh_token


def sign_up(client: Client, email: str, password: str, name: str):
    """
    Create an auth account. Returns (user_id, access_token, refresh_token).

    The tokens are None while the project requires email confirmation.
    """
    try:
        response = client.auth.sign_up(
            {
                "email": email,
                "password": password,
                "options": {"data": {"full_name": name}},
            }
        )
    except AuthError as e:
        logger.info(f"Sign up rejected for {email}: {e.message}")
        raise RegistrationError(e.message) from e
    except Exception as e:
        logger.error(f"Sign up failed for {email}: {e}")
        raise BackendError("sign_up", str(e)) from e

    if response.user is None:
        raise RegistrationError()

    access_token, refresh_token = _tokens(response.session)
    return str(response.user.id), access_token, refresh_token


def sign_out(client: Client, access_token: str) -> None:
    """Revoke the session belonging to ``access_token``."""
    try:
        client.auth.admin.sign_out(access_token)
    except AuthError as e:
        raise AuthenticationError(e.message) from e
    except Exception as e:
        logger.error(f"Sign out failed: {e}")
        raise BackendError("sign_out", str(e)) from e


def delete_user(client: Client, user_id: str) -> None:
    """Delete an auth account. Needs the service role key."""
    try:
        client.auth.admin.delete_user(user_id)
    except Exception as e:
        logger.error(f"Deleting user {user_id} failed: {e}")
        raise BackendError("delete_user", str(e)) from e
