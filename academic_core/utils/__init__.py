# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers for academic_core.

This package contains cross-cutting utilities:
- logging: Structured logging with structlog
- datetime: Timezone-aware datetime operations
"""

from academic_core.utils.datetime import utc_now
from academic_core.utils.logging import (
    bind_context,
    clear_context,
    get_logger,
    remove_handler,
    setup_logging,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "remove_handler",
    # Datetime
    "utc_now",
]
