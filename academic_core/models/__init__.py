# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain models for students, courses, grades and enrollments."""

from academic_core.models.common import (
    MAX_GRADE_POINT,
    MIN_GRADE_POINT,
    EnrollmentStatus,
    StudentStatus,
)
from academic_core.models.course import Course
from academic_core.models.enrollment import Enrollment
from academic_core.models.grade import CourseGrade
from academic_core.models.student import Student

__all__ = [
    "Student",
    "Course",
    "CourseGrade",
    "Enrollment",
    "StudentStatus",
    "EnrollmentStatus",
    "MIN_GRADE_POINT",
    "MAX_GRADE_POINT",
]
