"""Success/failure outcome of a command.

A ``Result`` is either ``Success(value)`` or ``Failure(error)``. Command
handlers return expected business outcomes (wrong password, unknown email,
malformed input) as ``Failure`` instead of raising, so every failure path is
visible at the call site::

    result = await handler.execute(command)
    if isinstance(result, Failure):
        ...  # result.error is a DomainException
    else:
        response = result.value
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from staffhub.domain.shared.exceptions import DomainException, UnwrapError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> NoReturn:
        msg = "Called unwrap_error() on a Success result"
        raise UnwrapError(msg)


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying the domain error that caused it."""

    error: DomainException

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        msg = f"Called unwrap() on a Failure result: {self.error.message}"
        raise UnwrapError(msg) from self.error

    def unwrap_error(self) -> DomainException:
        return self.error


Result = Union[Success[T], Failure]
