# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Dictionary-backed repositories.

Suitable for tests, local tooling and single-process deployments.
Stored models are copied on the way in and out so callers cannot change
stored state without going through update().
"""

import logging
from collections import defaultdict
from collections.abc import Iterable

from academic_core.infrastructure.repositories.base import CourseRepository, StudentRepository
from academic_core.models.course import Course
from academic_core.models.student import Student

logger = logging.getLogger(__name__)


class InMemoryStudentRepository(StudentRepository):
    """Student store keyed by student_id."""

    def __init__(self, students: Iterable[Student] = ()) -> None:
        self._students: dict[str, Student] = {}
        for student in students:
            self.add(student)

    def add(self, student: Student) -> None:
        """Insert or replace a student."""
        self._students[student.student_id] = student.model_copy()

    def find_by_id(self, student_id: str) -> Student | None:
        student = self._students.get(student_id)
        return student.model_copy() if student is not None else None


class InMemoryCourseRepository(CourseRepository):
    """Course store keyed by course_code, with a prerequisite graph.

    A course's prerequisites are met when the student has a recorded
    completion for every prerequisite code. Courses without
    prerequisites are always open.
    """

    def __init__(self, courses: Iterable[Course] = ()) -> None:
        self._courses: dict[str, Course] = {}
        self._prerequisites: dict[str, frozenset[str]] = {}
        self._completed: defaultdict[str, set[str]] = defaultdict(set)
        for course in courses:
            self.add(course)

    def add(self, course: Course) -> None:
        """Insert or replace a course."""
        self._courses[course.course_code] = course.model_copy()

    def find_by_course_code(self, course_code: str) -> Course | None:
        course = self._courses.get(course_code)
        return course.model_copy() if course is not None else None

    def update(self, course: Course) -> None:
        """Replace the stored course.

        Raises:
            KeyError: If the course was never added.
        """
        if course.course_code not in self._courses:
            raise KeyError(course.course_code)
        self._courses[course.course_code] = course.model_copy()
        logger.debug(
            "Course updated: code=%s, enrolled=%d/%d",
            course.course_code,
            course.enrolled_count,
            course.capacity,
        )

    def set_prerequisites(self, course_code: str, prerequisite_codes: Iterable[str]) -> None:
        """Declare the courses that must be completed before course_code."""
        self._prerequisites[course_code] = frozenset(prerequisite_codes)

    def record_completion(self, student_id: str, course_code: str) -> None:
        """Mark a course as completed by a student."""
        self._completed[student_id].add(course_code)

    def is_prerequisite_met(self, student_id: str, course_code: str) -> bool:
        required = self._prerequisites.get(course_code, frozenset())
        return required <= self._completed.get(student_id, set())
