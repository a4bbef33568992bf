# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared enums and bounds for academic models."""

from enum import Enum

MIN_GRADE_POINT = 0.0
MAX_GRADE_POINT = 4.0


class StudentStatus(str, Enum):
    """Academic status of a student.

    Values compare equal to their plain strings, e.g.
    StudentStatus.ACTIVE == "ACTIVE".
    """

    ACTIVE = "ACTIVE"
    PROBATION = "PROBATION"
    SUSPENDED = "SUSPENDED"


class EnrollmentStatus(str, Enum):
    """Status of an enrollment record."""

    APPROVED = "APPROVED"
