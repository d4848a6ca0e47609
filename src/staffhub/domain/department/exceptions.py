from staffhub.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class DepartmentNotFoundError(EntityNotFoundError):
    """Department not found."""

    def __init__(self, department_id: str) -> None:
        self.department_id = department_id
        super().__init__(
            f"Department not found: {department_id}",
            ErrorCode.DEPARTMENT_NOT_FOUND,
        )
