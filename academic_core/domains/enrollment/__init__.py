# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment domain package.

This package provides course registration functionality including:
- Student enrollment in courses
- Course drops
- Credit-load validation
"""

from academic_core.domains.enrollment.identifiers import EnrollmentIdGenerator
from academic_core.domains.enrollment.service import (
    CourseFullError,
    CourseNotFoundError,
    EnrollmentNotAllowedError,
    EnrollmentService,
    EnrollmentServiceError,
    PrerequisiteNotMetError,
    StudentNotFoundError,
    create_enrollment_service,
)

__all__ = [
    "EnrollmentService",
    "EnrollmentIdGenerator",
    "create_enrollment_service",
    "EnrollmentServiceError",
    "StudentNotFoundError",
    "CourseNotFoundError",
    "EnrollmentNotAllowedError",
    "CourseFullError",
    "PrerequisiteNotMetError",
]
