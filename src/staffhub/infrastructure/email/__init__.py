from staffhub.infrastructure.email.email_service import EmailNotificationService

__all__ = ["EmailNotificationService"]
