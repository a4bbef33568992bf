# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Abstract repositories the enrollment workflow reads from and writes to.

Implementations own persistence. The enrollment workflow performs no
locking, so a store shared by concurrent callers must make update()
safe on its own (for example with a compare-and-update on
enrolled_count).
"""

from abc import ABC, abstractmethod

from academic_core.models.course import Course
from academic_core.models.student import Student


class StudentRepository(ABC):
    """Student lookup by identifier."""

    @abstractmethod
    def find_by_id(self, student_id: str) -> Student | None:
        """Return the student, or None if no such student exists."""
        ...


class CourseRepository(ABC):
    """Course lookup, update and prerequisite check."""

    @abstractmethod
    def find_by_course_code(self, course_code: str) -> Course | None:
        """Return the course, or None if no such course exists."""
        ...

    @abstractmethod
    def update(self, course: Course) -> None:
        """Persist the current state of a course."""
        ...

    @abstractmethod
    def is_prerequisite_met(self, student_id: str, course_code: str) -> bool:
        """Whether the student satisfied every prerequisite of the course."""
        ...
