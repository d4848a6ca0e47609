"""Outbound notification port."""

from abc import ABC, abstractmethod


class NotificationService(ABC):
    """Delivers a message to an account's email address."""

    @abstractmethod
    def send(self, to_email: str, subject: str, body: str) -> None:
        """Deliver ``subject`` and ``body`` to ``to_email``.

        Called from a worker thread, so implementations may block.
        Raises on delivery failure.
        """
