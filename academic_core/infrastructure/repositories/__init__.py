# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student and course repositories."""

from academic_core.infrastructure.repositories.base import CourseRepository, StudentRepository
from academic_core.infrastructure.repositories.memory import (
    InMemoryCourseRepository,
    InMemoryStudentRepository,
)

__all__ = [
    "StudentRepository",
    "CourseRepository",
    "InMemoryStudentRepository",
    "InMemoryCourseRepository",
]
