# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment service for course registration rules.

This module provides the EnrollmentService class for:
- Enrolling a student into a course
- Dropping a course
- Validating a requested credit load

All preconditions are checked before any state changes, so a failed
call never updates the course or sends a notification.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from academic_core.core.config.settings import Settings, get_settings
from academic_core.domains.enrollment.identifiers import EnrollmentIdGenerator
from academic_core.domains.grading.calculator import GradeCalculator
from academic_core.infrastructure.notifications.base import NotificationSender
from academic_core.infrastructure.notifications.senders import get_notification_sender
from academic_core.infrastructure.repositories.base import CourseRepository, StudentRepository
from academic_core.models.common import EnrollmentStatus, StudentStatus
from academic_core.models.course import Course
from academic_core.models.enrollment import Enrollment
from academic_core.models.student import Student
from academic_core.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class EnrollmentServiceError(Exception):
    """Base exception for enrollment service errors.

    Attributes:
        message: Human-readable error description.
        details: Identifiers and counts describing the failure.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class StudentNotFoundError(EnrollmentServiceError):
    """Raised when student is not found."""

    pass


class CourseNotFoundError(EnrollmentServiceError):
    """Raised when course is not found."""

    pass


class EnrollmentNotAllowedError(EnrollmentServiceError):
    """Raised when the student's status forbids enrolling."""

    pass


class CourseFullError(EnrollmentServiceError):
    """Raised when the course has no seats left."""

    pass


class PrerequisiteNotMetError(EnrollmentServiceError):
    """Raised when the student has not completed the course prerequisites."""

    pass


class EnrollmentService:
    """Service for course enrollment, drops and credit-load checks.

    Calls run synchronously on the caller's thread. The service holds no
    locks; concurrent enrollments into the same course must be
    serialized by the course repository.

    Attributes:
        student_repository: Student lookup.
        course_repository: Course lookup, update and prerequisite check.
        notification_sender: Outbound email sender.
        grade_calculator: Grading rules used for credit limits.
    """

    def __init__(
        self,
        student_repository: StudentRepository,
        course_repository: CourseRepository,
        notification_sender: NotificationSender,
        grade_calculator: GradeCalculator | None = None,
        id_generator: Callable[[], str] | None = None,
        confirmation_subject: str = "Enrollment Confirmation",
        drop_subject: str = "Course Drop Confirmation",
    ) -> None:
        """Initialize enrollment service.

        Args:
            student_repository: Student lookup.
            course_repository: Course lookup, update and prerequisite check.
            notification_sender: Sender for confirmation emails.
            grade_calculator: Grading rules; a new GradeCalculator by default.
            id_generator: Callable returning a fresh enrollment id.
            confirmation_subject: Subject of the enrollment email.
            drop_subject: Subject of the drop email.
        """
        self.student_repository = student_repository
        self.course_repository = course_repository
        self.notification_sender = notification_sender
        self.grade_calculator = grade_calculator or GradeCalculator()
        self._next_id = id_generator or EnrollmentIdGenerator()
        self.confirmation_subject = confirmation_subject
        self.drop_subject = drop_subject

    def enroll_course(self, student_id: str, course_code: str) -> Enrollment:
        """Enroll a student in a course.

        Checks run in order: student exists, course exists, student not
        suspended, course has a free seat, prerequisites met.

        Args:
            student_id: Student identifier.
            course_code: Course code.

        Returns:
            The approved enrollment.

        Raises:
            StudentNotFoundError: If student not found.
            CourseNotFoundError: If course not found.
            EnrollmentNotAllowedError: If the student is suspended.
            CourseFullError: If the course is at capacity.
            PrerequisiteNotMetError: If prerequisites are not met.
        """
        student = self._get_student(student_id)
        course = self._get_course(course_code)

        if student.status == StudentStatus.SUSPENDED:
            logger.warning(
                "Enrollment rejected, student suspended: student=%s, course=%s",
                student_id,
                course_code,
            )
            raise EnrollmentNotAllowedError(
                "Student is suspended and cannot enroll",
                details={"student_id": student_id, "status": student.status.value},
            )

        if course.enrolled_count >= course.capacity:
            logger.warning(
                "Enrollment rejected, course full: student=%s, course=%s, enrolled=%d/%d",
                student_id,
                course_code,
                course.enrolled_count,
                course.capacity,
            )
            raise CourseFullError(
                "Course is full",
                details={
                    "course_code": course_code,
                    "enrolled_count": course.enrolled_count,
                    "capacity": course.capacity,
                },
            )

        if not self.course_repository.is_prerequisite_met(student_id, course_code):
            logger.warning(
                "Enrollment rejected, prerequisites not met: student=%s, course=%s",
                student_id,
                course_code,
            )
            raise PrerequisiteNotMetError(
                "Prerequisites not met",
                details={"student_id": student_id, "course_code": course_code},
            )

        course.enrolled_count += 1
        self.course_repository.update(course)

        enrollment = Enrollment(
            enrollment_id=self._next_id(),
            student_id=student_id,
            course_code=course_code,
            status=EnrollmentStatus.APPROVED,
            enrollment_date=utc_now(),
        )

        self.notification_sender.send_email(
            student.email,
            self.confirmation_subject,
            f"You have been enrolled in: {course.course_name}",
        )

        logger.info(
            "Enrolled student: enrollment=%s, student=%s, course=%s, enrolled=%d/%d",
            enrollment.enrollment_id,
            student_id,
            course_code,
            course.enrolled_count,
            course.capacity,
        )

        return enrollment

    def validate_credit_limit(self, student_id: str, requested_credits: int) -> bool:
        """Check a requested credit load against the student's GPA limit.

        Args:
            student_id: Student identifier.
            requested_credits: Total credits the student wants to take.

        Returns:
            True if requested_credits does not exceed the maximum.

        Raises:
            StudentNotFoundError: If student not found.
        """
        student = self._get_student(student_id)
        max_credits = self.grade_calculator.calculate_max_credits(student.gpa)
        return requested_credits <= max_credits

    def drop_course(self, student_id: str, course_code: str) -> None:
        """Drop a course for a student.

        No status or capacity rules apply to a drop.

        Args:
            student_id: Student identifier.
            course_code: Course code.

        Raises:
            StudentNotFoundError: If student not found.
            CourseNotFoundError: If course not found.
        """
        student = self._get_student(student_id)
        course = self._get_course(course_code)

        if course.enrolled_count == 0:
            logger.warning("Drop on course with no enrollments: course=%s", course_code)
        course.enrolled_count = max(course.enrolled_count - 1, 0)
        self.course_repository.update(course)

        self.notification_sender.send_email(
            student.email,
            self.drop_subject,
            f"You have dropped: {course.course_name}",
        )

        logger.info(
            "Dropped course: student=%s, course=%s, enrolled=%d/%d",
            student_id,
            course_code,
            course.enrolled_count,
            course.capacity,
        )

    def _get_student(self, student_id: str) -> Student:
        student = self.student_repository.find_by_id(student_id)
        if student is None:
            logger.warning("Student not found: %s", student_id)
            raise StudentNotFoundError(
                f"Student not found: {student_id}",
                details={"student_id": student_id},
            )
        return student

    def _get_course(self, course_code: str) -> Course:
        course = self.course_repository.find_by_course_code(course_code)
        if course is None:
            logger.warning("Course not found: %s", course_code)
            raise CourseNotFoundError(
                f"Course not found: {course_code}",
                details={"course_code": course_code},
            )
        return course


def create_enrollment_service(
    student_repository: StudentRepository,
    course_repository: CourseRepository,
    notification_sender: NotificationSender | None = None,
    settings: Settings | None = None,
) -> EnrollmentService:
    """Build an EnrollmentService configured from settings.

    Args:
        student_repository: Student lookup.
        course_repository: Course lookup, update and prerequisite check.
        notification_sender: Sender to use; picked from settings if None.
        settings: Settings to read; defaults to get_settings().

    Returns:
        Configured enrollment service.
    """
    settings = settings or get_settings()
    return EnrollmentService(
        student_repository=student_repository,
        course_repository=course_repository,
        notification_sender=notification_sender or get_notification_sender(settings),
        id_generator=EnrollmentIdGenerator(prefix=settings.enrollment.id_prefix),
        confirmation_subject=settings.enrollment.confirmation_subject,
        drop_subject=settings.enrollment.drop_subject,
    )
