# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities for academic_core.

All timestamps produced by the core are timezone-aware UTC datetimes, so
enrollment dates never mix naive and aware values.

Usage:
    from academic_core.utils.datetime import utc_now

    enrollment_date = utc_now()
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Example:
        >>> now = utc_now()
        >>> now.tzinfo
        datetime.timezone.utc
    """
    return datetime.now(timezone.utc)

