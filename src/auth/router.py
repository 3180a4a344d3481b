import logging

from fastapi import APIRouter, Depends

from src.auth.dtos import LoginRequest, TokenResponse
from src.auth.read_model import SqlUserReadModel, UserReadModel
from src.auth.security import create_access_token, verify_password
from src.auth.urls import LOGIN_URL
from src.exceptions import Unauthorized

logger = logging.getLogger(__name__)

router = APIRouter()


def get_user_read_model() -> UserReadModel:
    return SqlUserReadModel()


@router.post(LOGIN_URL, response_model=TokenResponse)
async def login(
    request: LoginRequest,
    read_model: UserReadModel = Depends(get_user_read_model),
) -> TokenResponse:
    """Exchange email and password for a bearer token."""
    credentials = await read_model.get_credentials(request.email)
    if (
        credentials is None
        or not credentials.is_active
        or not credentials.hashed_password
        or not verify_password(request.password, credentials.hashed_password)
    ):
        logger.info("Failed login for %s", request.email)
        raise Unauthorized("Incorrect email or password")

    return TokenResponse(access_token=create_access_token(credentials.user))
