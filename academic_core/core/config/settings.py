# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

Settings are loaded from environment variables (and an optional .env file)
with defaults that match the registrar's standard policy. The Settings
class aggregates all subsettings; get_settings() returns a cached instance.

Example:
    >>> from academic_core.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> settings.enrollment.id_prefix
    'ENR-'
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnrollmentSettings(BaseSettings):
    """Enrollment workflow configuration.

    Attributes:
        id_prefix: Textual prefix of generated enrollment identifiers.
        confirmation_subject: Subject of the email sent after enrolling.
        drop_subject: Subject of the email sent after dropping a course.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENROLLMENT_",
        extra="ignore",
    )

    id_prefix: str = Field(default="ENR-", min_length=1)
    confirmation_subject: str = "Enrollment Confirmation"
    drop_subject: str = "Course Drop Confirmation"


class NotificationSettings(BaseSettings):
    """Notification delivery configuration.

    Attributes:
        sender: Which built-in sender to use when none is injected.
            "log" writes each message to the application log, "memory"
            keeps messages in an in-process outbox.
        from_name: Display name used as the sender of outgoing emails.
    """

    model_config = SettingsConfigDict(
        env_prefix="NOTIFICATION_",
        extra="ignore",
    )

    sender: Literal["log", "memory"] = "log"
    from_name: str = "Academic Registrar"


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Attributes:
        environment: Current environment.
        debug: Enable debug mode (console log rendering).
        log_level: Logging level.
        enrollment: Enrollment workflow settings.
        notification: Notification delivery settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Subsettings - loaded with their own env prefixes
    enrollment: EnrollmentSettings = Field(default_factory=EnrollmentSettings)
    notification: NotificationSettings = Field(default_factory=NotificationSettings)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Call clear_settings_cache() to reload settings from the environment.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Useful for testing or after changing environment variables.
    """
    get_settings.cache_clear()
