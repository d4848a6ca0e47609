"""Users router: account creation."""

from fastapi import APIRouter, status

from staffhub.application.commands import CreateUserCommand
from staffhub.domain.shared.result import Failure
from staffhub.presentation.api.dependencies import CreateUserHandler, DBSession
from staffhub.presentation.api.schemas.users import CreateUserRequest, UserResponse

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        201: {"description": "User created"},
        400: {"description": "Invalid input"},
        404: {"description": "Department not found"},
        409: {"description": "Email already registered"},
    },
)
async def create_user(
    request: CreateUserRequest,
    handler: CreateUserHandler,
    session: DBSession,
) -> UserResponse:
    result = await handler.execute(
        CreateUserCommand(
            name=request.name,
            phone=request.phone,
            role=request.role,
            department_id=request.department_id,
            email=request.email,
            password=request.password,
        ),
    )
    if isinstance(result, Failure):
        await session.rollback()
        raise result.error

    await session.commit()
    return UserResponse.from_domain(result.value)
