# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for academic_core.

Example:
    >>> from academic_core.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.environment
    'development'
"""

from academic_core.core.config.settings import (
    EnrollmentSettings,
    NotificationSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "clear_settings_cache",
    "EnrollmentSettings",
    "NotificationSettings",
]
