import logging

from fastapi import APIRouter, Depends

from scoutquest.core.auth import ScoutSession, get_scout_session
from scoutquest.core.errors import BackendError
from scoutquest.db import auth as auth_provider
from scoutquest.db import repository
from scoutquest.db.supabase import get_auth_client, get_db
from scoutquest.schemas.auth import (
    SignInRequest,
    SignUpRequest,
    SignUpResponse,
    TokenResponse,
)
from supabase import Client

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/signup", response_model=SignUpResponse, status_code=201)
def sign_up(
    body: SignUpRequest,
    auth_client: Client = Depends(get_auth_client),
    client: Client = Depends(get_db),
):
    """Create an account and the matching scout profile."""
    user_id, access_token, refresh_token = auth_provider.sign_up(
        auth_client, body.email, body.password, body.name
    )

    try:
        scout = repository.create_scout(
            client,
            {
                "user_id": user_id,
                "name": body.name,
                "rank_id": 1,
                "points": 0,
                "is_admin": False,
            },
        )
    except BackendError as profile_error:
        # No account without a scout profile
        logger.warning(f"Removing user {user_id} after failed scout profile insert")
        try:
            auth_provider.delete_user(client, user_id)
        except BackendError as cleanup_error:
            logger.error(f"User {user_id} left without a scout profile: {cleanup_error}")
            raise profile_error from cleanup_error
        raise

    logger.info(f"Created scout {scout.id} for user {user_id}")

    return SignUpResponse(
        access_token=access_token, refresh_token=refresh_token, scout=scout
    )


@router.post("/signin", response_model=TokenResponse)
def sign_in(body: SignInRequest, auth_client: Client = Depends(get_auth_client)):
    access_token, refresh_token = auth_provider.sign_in(
        auth_client, body.email, body.password
    )
    return TokenResponse(access_token=access_token, refresh_token=refresh_token)


@router.post("/signout")
def sign_out(
    session: ScoutSession = Depends(get_scout_session),
    client: Client = Depends(get_db),
):
    auth_provider.sign_out(client, session.access_token)
    return {"message": "Signed out successfully"}
