# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment scenarios wired with the in-memory collaborators."""

import pytest

from academic_core.domains.enrollment import (
    CourseFullError,
    EnrollmentService,
    PrerequisiteNotMetError,
)
from academic_core.infrastructure.notifications import InMemoryNotificationSender
from academic_core.infrastructure.repositories import (
    InMemoryCourseRepository,
    InMemoryStudentRepository,
)
from academic_core.models import Course, EnrollmentStatus, Student

pytestmark = pytest.mark.scenario


@pytest.fixture
def students(active_student: Student, suspended_student: Student) -> InMemoryStudentRepository:
    """Student store holding an active and a suspended student."""
    return InMemoryStudentRepository([active_student, suspended_student])


@pytest.fixture
def courses(available_course: Course, full_course: Course) -> InMemoryCourseRepository:
    """Course store holding an open and a full course."""
    return InMemoryCourseRepository([available_course, full_course])


@pytest.fixture
def outbox() -> InMemoryNotificationSender:
    """Sender that records emails."""
    return InMemoryNotificationSender()


@pytest.fixture
def service(
    students: InMemoryStudentRepository,
    courses: InMemoryCourseRepository,
    outbox: InMemoryNotificationSender,
) -> EnrollmentService:
    """Enrollment service over in-memory collaborators."""
    return EnrollmentService(students, courses, outbox)


def test_enroll_into_open_course(service, courses, outbox) -> None:
    """A 3.7 GPA student takes seat 26 of 30."""
    enrollment = service.enroll_course("S123", "PPL301")

    assert enrollment.status == EnrollmentStatus.APPROVED
    assert courses.find_by_course_code("PPL301").enrolled_count == 26
    assert len(outbox.outbox) == 1
    assert outbox.outbox[0].subject == "Enrollment Confirmation"


def test_enroll_into_full_course_changes_nothing(service, courses, outbox) -> None:
    """A full course rejects the student and stays at 25/25."""
    with pytest.raises(CourseFullError):
        service.enroll_course("S123", "DB201")

    assert courses.find_by_course_code("DB201").enrolled_count == 25
    assert outbox.outbox == []


def test_drop_frees_a_seat(service, courses, outbox) -> None:
    """Dropping takes the count from 25 to 24 and sends one email."""
    service.drop_course("S123", "PPL301")

    assert courses.find_by_course_code("PPL301").enrolled_count == 24
    assert [message.subject for message in outbox.messages_for("naura@mail.com")] == [
        "Course Drop Confirmation"
    ]


def test_prerequisites_gate_enrollment(service, courses, outbox) -> None:
    """Enrollment opens once every prerequisite is completed."""
    courses.set_prerequisites("PPL301", ["ALG101", "OOP201"])
    courses.record_completion("S123", "ALG101")

    with pytest.raises(PrerequisiteNotMetError):
        service.enroll_course("S123", "PPL301")
    assert outbox.outbox == []

    courses.record_completion("S123", "OOP201")
    service.enroll_course("S123", "PPL301")

    assert courses.find_by_course_code("PPL301").enrolled_count == 26


def test_last_seat_then_full(service, courses) -> None:
    """The final seat can be taken, after which the course is full."""
    courses.add(
        Course(
            course_code="SEM499",
            course_name="Seminar",
            credits=2,
            capacity=1,
            enrolled_count=0,
            instructor="Dosen C",
        )
    )

    service.enroll_course("S123", "SEM499")

    assert courses.find_by_course_code("SEM499").is_full
    with pytest.raises(CourseFullError):
        service.enroll_course("S123", "SEM499")
