# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Built-in notification senders.

- LoggingNotificationSender: writes every email to the application log
- InMemoryNotificationSender: keeps every email in an outbox list
"""

from academic_core.core.config.settings import Settings, get_settings
from academic_core.infrastructure.notifications.base import EmailMessage, NotificationSender


class LoggingNotificationSender(NotificationSender):
    """Sender that logs emails instead of delivering them."""

    def __init__(self, from_name: str = "Academic Registrar") -> None:
        super().__init__()
        self.from_name = from_name

    def send_email(self, recipient: str, subject: str, body: str) -> None:
        self.logger.info(
            "Email from %s to %s: %s | %s",
            self.from_name,
            recipient,
            subject,
            body,
        )


class InMemoryNotificationSender(NotificationSender):
    """Sender that records emails in an outbox.

    Attributes:
        outbox: Messages in the order they were sent.
    """

    def __init__(self) -> None:
        super().__init__()
        self.outbox: list[EmailMessage] = []

    def send_email(self, recipient: str, subject: str, body: str) -> None:
        message = EmailMessage(recipient=recipient, subject=subject, body=body)
        self.outbox.append(message)
        self.logger.debug("Queued email to %s: %s", recipient, subject)

    def messages_for(self, recipient: str) -> list[EmailMessage]:
        """Messages sent to one recipient, oldest first."""
        return [message for message in self.outbox if message.recipient == recipient]

    def clear(self) -> None:
        self.outbox.clear()


def get_notification_sender(settings: Settings | None = None) -> NotificationSender:
    """Build the sender selected by NOTIFICATION_SENDER.

    Args:
        settings: Settings to read; defaults to get_settings().

    Returns:
        A new notification sender.
    """
    settings = settings or get_settings()
    if settings.notification.sender == "memory":
        return InMemoryNotificationSender()
    return LoggingNotificationSender(from_name=settings.notification.from_name)
