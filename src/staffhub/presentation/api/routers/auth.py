"""Authentication router: login, credential updates and password recovery."""

import logging

from fastapi import APIRouter, Response, status

from staffhub.domain.shared.result import Failure
from staffhub.presentation.api.dependencies import (
    CurrentToken,
    DBSession,
    LoginHandler,
    RecoverPasswordHandler,
    UpdateCredentialsHandler,
)
from staffhub.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RecoverPasswordRequest,
    UpdateCredentialsRequest,
)
from staffhub.presentation.api.schemas.users import UserResponse
from staffhub_auth.application.commands import (
    LoginCommand,
    RecoverPasswordCommand,
    UpdateCredentialsCommand,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(request: LoginRequest, handler: LoginHandler) -> LoginResponse:
    """
    Authenticate with email and password.

    Returns the user profile and a short-lived access token.
    """
    result = await handler.execute(
        LoginCommand(email=request.email, password=request.password),
    )
    if isinstance(result, Failure):
        raise result.error

    response = result.value
    return LoginResponse(
        user=UserResponse.from_domain(response.user),
        access_token=response.access_token,
        expires_in=response.expires_in_seconds,
    )


@router.put(
    "/credentials",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Change login email and password",
    responses={
        204: {"description": "Credentials updated"},
        400: {"description": "Malformed email or weak password"},
        401: {"description": "Not authenticated or current password incorrect"},
        404: {"description": "No credentials for the authenticated user"},
        409: {"description": "Email already registered"},
    },
)
async def update_credentials(
    request: UpdateCredentialsRequest,
    token: CurrentToken,
    handler: UpdateCredentialsHandler,
    session: DBSession,
) -> Response:
    """
    Replace the authenticated user's email and password.

    The user is taken from the bearer token, never from the request body.
    """
    result = await handler.execute(
        UpdateCredentialsCommand(
            user_id=token.user_id,
            email=request.email,
            password=request.password,
            current_password=request.current_password,
        ),
    )
    if isinstance(result, Failure):
        await session.rollback()
        raise result.error

    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/recover-password",
    status_code=status.HTTP_202_ACCEPTED,
    summary="Email a temporary password",
    responses={
        202: {"description": "Temporary password sent"},
        404: {"description": "Email not registered"},
        503: {"description": "Recovery could not be completed"},
    },
)
async def recover_password(
    request: RecoverPasswordRequest,
    handler: RecoverPasswordHandler,
    session: DBSession,
) -> MessageResponse:
    """
    Replace a forgotten password with a temporary one sent by email.
    """
    result = await handler.execute(RecoverPasswordCommand(email=request.email))
    if isinstance(result, Failure):
        await session.rollback()
        raise result.error

    await session.commit()
    return MessageResponse(detail="A temporary password has been sent")
