# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Notification senders for enrollment confirmations.

Usage:
    from academic_core.infrastructure.notifications import get_notification_sender

    sender = get_notification_sender()
    sender.send_email("naura@mail.com", "Enrollment Confirmation", "...")

Configuration (environment variables):
- NOTIFICATION_SENDER: "log" (default) or "memory"
- NOTIFICATION_FROM_NAME: Sender display name
"""

from academic_core.infrastructure.notifications.base import EmailMessage, NotificationSender
from academic_core.infrastructure.notifications.senders import (
    InMemoryNotificationSender,
    LoggingNotificationSender,
    get_notification_sender,
)

__all__ = [
    "NotificationSender",
    "EmailMessage",
    "LoggingNotificationSender",
    "InMemoryNotificationSender",
    "get_notification_sender",
]
