# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the in-memory repositories."""

import pytest

from academic_core.infrastructure.repositories import (
    InMemoryCourseRepository,
    InMemoryStudentRepository,
)


class TestInMemoryStudentRepository:
    """Tests for InMemoryStudentRepository."""

    def test_find_by_id(self, active_student) -> None:
        """Test stored students are found by id."""
        repository = InMemoryStudentRepository([active_student])

        assert repository.find_by_id("S123") == active_student

    def test_find_missing_returns_none(self) -> None:
        """Test unknown ids return None."""
        assert InMemoryStudentRepository().find_by_id("S999") is None

    def test_returned_student_is_a_copy(self, active_student) -> None:
        """Test callers cannot change stored state by mutating results."""
        repository = InMemoryStudentRepository([active_student])

        repository.find_by_id("S123").gpa = 1.0

        assert repository.find_by_id("S123").gpa == 3.7


class TestInMemoryCourseRepository:
    """Tests for InMemoryCourseRepository."""

    def test_update_persists_changes(self, available_course) -> None:
        """Test update() replaces the stored course."""
        repository = InMemoryCourseRepository([available_course])
        course = repository.find_by_course_code("PPL301")

        course.enrolled_count = 26
        assert repository.find_by_course_code("PPL301").enrolled_count == 25

        repository.update(course)
        assert repository.find_by_course_code("PPL301").enrolled_count == 26

    def test_update_unknown_course_raises(self, available_course) -> None:
        """Test update() requires an existing course."""
        repository = InMemoryCourseRepository()

        with pytest.raises(KeyError):
            repository.update(available_course)

    def test_course_without_prerequisites_is_open(self, available_course) -> None:
        """Test courses with no prerequisites are always open."""
        repository = InMemoryCourseRepository([available_course])

        assert repository.is_prerequisite_met("S123", "PPL301") is True

    def test_prerequisites_require_every_completion(self, available_course) -> None:
        """Test all prerequisite courses must be completed."""
        repository = InMemoryCourseRepository([available_course])
        repository.set_prerequisites("PPL301", ["ALG101", "OOP201"])

        repository.record_completion("S123", "ALG101")
        assert repository.is_prerequisite_met("S123", "PPL301") is False

        repository.record_completion("S123", "OOP201")
        assert repository.is_prerequisite_met("S123", "PPL301") is True
        assert repository.is_prerequisite_met("S456", "PPL301") is False
