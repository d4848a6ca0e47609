import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from uuid import UUID, uuid4

from staffhub.domain.department import DepartmentNotFoundError, DepartmentRepository
from staffhub.domain.shared.option import Absent, Present
from staffhub.domain.shared.result import Failure, Result, Success
from staffhub.domain.user import (
    EmailAlreadyInUseError,
    InvalidUserDataError,
    User,
    UserRepository,
    UserRole,
)
from staffhub_auth.repositories import Credentials, CredentialsRepository
from staffhub_auth.services import CredentialsValidator, CryptoService

logger = logging.getLogger(__name__)

PHONE_PATTERN = re.compile(r"^\+?[0-9]{7,15}$")
MAX_NAME_LENGTH = 120


@dataclass(frozen=True)
class CreateUserCommand:
    name: str
    phone: str
    role: str
    department_id: UUID
    email: str
    password: str = field(repr=False)


class CreateUserCommandHandler:
    """Command to create a user together with its login credentials."""

    def __init__(  # noqa: PLR0913
        self,
        user_repository: UserRepository,
        department_repository: DepartmentRepository,
        credentials_repository: CredentialsRepository,
        crypto_service: CryptoService,
        validator: CredentialsValidator,
        id_factory: Callable[[], UUID] = uuid4,
    ):
        self._user_repo = user_repository
        self._department_repo = department_repository
        self._credentials_repo = credentials_repository
        self._crypto_service = crypto_service
        self._validator = validator
        self._id_factory = id_factory

    async def execute(self, command: CreateUserCommand) -> Result[User]:
        department = await self._department_repo.get_department_by_id(
            command.department_id,
        )
        if isinstance(department, Absent):
            return Failure(DepartmentNotFoundError(str(command.department_id)))

        profile_error = self._check_profile(command)
        if profile_error is not None:
            return Failure(profile_error)

        validated = self._validator.validate(command.email, command.password)
        if isinstance(validated, Failure):
            return validated
        email = validated.value

        existing = await self._credentials_repo.get_credentials_by_email(email)
        if isinstance(existing, Present):
            return Failure(EmailAlreadyInUseError(email))

        user = User.create(
            id=self._id_factory(),
            name=command.name.strip(),
            phone=command.phone.strip(),
            department_id=command.department_id,
            role=UserRole(command.role),
        )
        password_hash = await self._crypto_service.hash(command.password)

        await self._user_repo.save_user(user)
        try:
            await self._credentials_repo.add_credentials(
                Credentials(
                    id=uuid4(),
                    user_id=user.id,
                    email=email,
                    password_hash=password_hash,
                ),
            )
        except EmailAlreadyInUseError as e:
            return Failure(e)

        logger.info("User created: %s (role: %s)", user.id, user.role.value)
        return Success(user)

    def _check_profile(self, command: CreateUserCommand) -> InvalidUserDataError | None:
        name = command.name.strip()
        if not name or len(name) > MAX_NAME_LENGTH:
            return InvalidUserDataError(
                "name",
                f"Name must be between 1 and {MAX_NAME_LENGTH} characters",
            )
        if not PHONE_PATTERN.match(command.phone.strip()):
            return InvalidUserDataError("phone", f"Invalid phone number: {command.phone}")
        if command.role not in {role.value for role in UserRole}:
            return InvalidUserDataError("role", f"Unknown role: {command.role}")
        return None
