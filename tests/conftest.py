# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across the unit tests:
- Settings isolation
- Sample students and courses
- Mocked and in-memory collaborators
"""

from collections.abc import Generator
from unittest.mock import MagicMock

import pytest

from academic_core.core.config import clear_settings_cache
from academic_core.domains.grading import GradeCalculator
from academic_core.infrastructure.notifications import NotificationSender
from academic_core.infrastructure.repositories import CourseRepository, StudentRepository
from academic_core.models import Course, Student, StudentStatus

STUDENT_ID = "S123"
COURSE_CODE = "PPL301"


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings() -> Generator[None, None, None]:
    """Drop cached settings before and after every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "scenario: mark test as an end-to-end enrollment scenario"
    )


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def active_student() -> Student:
    """An active student with a 3.7 GPA."""
    return Student(
        student_id=STUDENT_ID,
        name="Naura",
        email="naura@mail.com",
        major="TI",
        semester=4,
        gpa=3.7,
        status=StudentStatus.ACTIVE,
    )


@pytest.fixture
def suspended_student() -> Student:
    """A suspended student."""
    return Student(
        student_id="S456",
        name="Rina",
        email="rina@mail.com",
        major="SI",
        semester=5,
        gpa=1.0,
        status=StudentStatus.SUSPENDED,
    )


@pytest.fixture
def available_course() -> Course:
    """A course with 25 of 30 seats taken."""
    return Course(
        course_code=COURSE_CODE,
        course_name="Pemrograman Java",
        credits=3,
        capacity=30,
        enrolled_count=25,
        instructor="Dosen A",
    )


@pytest.fixture
def full_course() -> Course:
    """A course with every seat taken."""
    return Course(
        course_code="DB201",
        course_name="Basis Data",
        credits=3,
        capacity=25,
        enrolled_count=25,
        instructor="Dosen B",
    )


# =============================================================================
# Collaborator Fixtures
# =============================================================================


@pytest.fixture
def student_repository() -> MagicMock:
    """Mock student repository."""
    return MagicMock(spec=StudentRepository)


@pytest.fixture
def course_repository() -> MagicMock:
    """Mock course repository."""
    return MagicMock(spec=CourseRepository)


@pytest.fixture
def notification_sender() -> MagicMock:
    """Mock notification sender."""
    return MagicMock(spec=NotificationSender)


@pytest.fixture
def grade_calculator() -> GradeCalculator:
    """Real grade calculator."""
    return GradeCalculator()
