"""Department entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Department:
    """A department staff members belong to."""

    id: UUID
    name: str
