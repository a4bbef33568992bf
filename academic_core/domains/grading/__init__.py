# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Grading domain package.

This package provides grade and standing rules including:
- GPA computation
- Academic status by semester band
- Credit-load limits
"""

from academic_core.domains.grading.calculator import (
    MAX_CREDITS_TABLE,
    STATUS_TABLES,
    AcademicStanding,
    GradeCalculator,
    GradingError,
    InvalidGradeInputError,
)

__all__ = [
    "GradeCalculator",
    "AcademicStanding",
    "GradingError",
    "InvalidGradeInputError",
    "MAX_CREDITS_TABLE",
    "STATUS_TABLES",
]
