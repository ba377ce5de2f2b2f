"""User domain exceptions."""

from discipline.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class UserAlreadyExistsError(ConflictError):
    """Username already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            message="User with such name already exists",
            code=ErrorCode.USER_ALREADY_EXISTS,
            details={"name": name},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_ref: str) -> None:
        self.user_ref = user_ref
        super().__init__(
            message="User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user": user_ref},
        )
