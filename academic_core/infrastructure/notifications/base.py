# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Base class and shared types for notification senders.

The enrollment workflow treats sending as fire-and-forget: it calls
send_email() and consumes no result. Delivery errors raised by a sender
propagate to the caller.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from academic_core.utils.datetime import utc_now


@dataclass(frozen=True)
class EmailMessage:
    """An email handed to a sender.

    Attributes:
        recipient: Destination email address.
        subject: Subject line.
        body: Plain text body.
        sent_at: When the sender accepted the message.
    """

    recipient: str
    subject: str
    body: str
    sent_at: datetime = field(default_factory=utc_now)


class NotificationSender(ABC):
    """Abstract base class for outbound email senders."""

    def __init__(self) -> None:
        """Initialize the sender."""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def send_email(self, recipient: str, subject: str, body: str) -> None:
        """Send an email.

        Args:
            recipient: Destination email address.
            subject: Subject line.
            body: Plain text body.
        """
        ...
