"""Present/absent outcome of a repository lookup.

Repositories return ``Absent()`` when nothing matches. Absence is a normal
outcome, not an error, and is kept distinct from ``Failure``.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from staffhub.domain.shared.exceptions import UnwrapError

T = TypeVar("T")


@dataclass(frozen=True)
class Present(Generic[T]):
    """A lookup that found a value."""

    value: T

    @property
    def is_present(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Absent:
    """A lookup that found nothing."""

    @property
    def is_present(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        msg = "Called unwrap() on an Absent option"
        raise UnwrapError(msg)


Option = Union[Present[T], Absent]


def option_of(value: T | None) -> Option[T]:
    """Wrap a nullable value, mapping ``None`` to ``Absent()``."""
    if value is None:
        return Absent()
    return Present(value)
