import logging
import smtplib
import ssl
from email.mime.text import MIMEText

from staffhub_auth.services import NotificationService
from staffhub_config.settings import Settings

logger = logging.getLogger(__name__)


class EmailNotificationService(NotificationService):
    """Delivers notifications as plain-text email over SMTP."""

    def __init__(self, settings: Settings):
        self._settings = settings

    def _create_message(self, to_email: str, subject: str, body: str) -> MIMEText:
        msg = MIMEText(body, "plain", "utf-8")
        msg["Subject"] = subject
        msg["From"] = f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        msg["To"] = to_email
        return msg

    def send(self, to_email: str, subject: str, body: str) -> None:
        if not self._settings.smtp_enabled:
            # The body can hold a secret; only the recipient is logged.
            logger.warning("SMTP disabled, email not sent to %s", to_email)
            msg = "SMTP is disabled"
            raise RuntimeError(msg)

        if not self._settings.smtp_host:
            msg = "SMTP host not configured"
            raise RuntimeError(msg)

        message = self._create_message(to_email, subject, body)
        smtp_password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )

        try:
            if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
                # Implicit TLS (port 465)
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    context=context,
                    timeout=self._settings.smtp_timeout,
                ) as server:
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)
            else:
                # STARTTLS (port 587) or plain
                with smtplib.SMTP(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    timeout=self._settings.smtp_timeout,
                ) as server:
                    if self._settings.smtp_starttls:
                        context = ssl.create_default_context()
                        server.starttls(context=context)
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)

            logger.info("Email sent to %s", to_email)

        except Exception as e:
            logger.error("Failed to send email to %s: %s", to_email, e)
            raise
