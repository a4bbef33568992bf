# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Grade-point average and academic standing rules.

This module provides the GradeCalculator class for:
- Credit-weighted GPA computation
- Semester-tiered academic status (ACTIVE / PROBATION / SUSPENDED)
- Maximum credit load allowed for a GPA

Threshold tables are ordered (lower_bound, value) tuples scanned from the
highest bound down. Every lower bound is inclusive.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from academic_core.models.common import MAX_GRADE_POINT, MIN_GRADE_POINT, StudentStatus
from academic_core.models.grade import CourseGrade

logger = logging.getLogger(__name__)

T = TypeVar("T")

# GPA lower bound -> maximum credits per semester
MAX_CREDITS_TABLE: tuple[tuple[float, int], ...] = (
    (3.0, 24),
    (2.5, 21),
    (2.0, 18),
    (0.0, 15),
)

# Semester lower bound -> (GPA lower bound -> status) table
STATUS_TABLES: tuple[tuple[int, tuple[tuple[float, StudentStatus], ...]], ...] = (
    (
        5,
        (
            (2.5, StudentStatus.ACTIVE),
            (2.0, StudentStatus.PROBATION),
            (0.0, StudentStatus.SUSPENDED),
        ),
    ),
    (
        3,
        (
            (2.25, StudentStatus.ACTIVE),
            (2.0, StudentStatus.PROBATION),
            (0.0, StudentStatus.SUSPENDED),
        ),
    ),
    (
        1,
        (
            (2.0, StudentStatus.ACTIVE),
            (0.0, StudentStatus.PROBATION),
        ),
    ),
)


class GradingError(Exception):
    """Base exception for grading errors."""

    pass


class InvalidGradeInputError(GradingError, ValueError):
    """Raised when a GPA, grade point or semester is out of range."""

    pass


@dataclass(frozen=True)
class AcademicStanding:
    """GPA together with the status and credit limit it implies.

    Attributes:
        gpa: Credit-weighted grade-point average.
        status: Academic status for the evaluated semester.
        max_credits: Maximum credits the student may take.
    """

    gpa: float
    status: StudentStatus
    max_credits: int


def _lookup(table: Sequence[tuple[float, T]], key: float) -> T:
    """Return the value of the first row whose lower bound is <= key."""
    for lower_bound, value in table:
        if key >= lower_bound:
            return value
    raise InvalidGradeInputError(f"No threshold covers value: {key}")


def _is_valid_point(value: float) -> bool:
    # Written so that NaN is rejected as well
    return MIN_GRADE_POINT <= value <= MAX_GRADE_POINT


class GradeCalculator:
    """Pure, side-effect-free grading rules.

    Example:
        >>> calculator = GradeCalculator()
        >>> calculator.calculate_gpa([CourseGrade("CS101", 3, 4.0), CourseGrade("CS102", 3, 3.0)])
        3.5
        >>> calculator.determine_academic_status(2.2, 3)
        <StudentStatus.PROBATION: 'PROBATION'>
        >>> calculator.calculate_max_credits(2.75)
        21
    """

    def calculate_gpa(self, grades: Sequence[CourseGrade] | None) -> float:
        """Compute the credit-weighted grade-point average.

        Args:
            grades: Graded courses. None or empty yields 0.0.

        Returns:
            sum(credits * grade_point) / sum(credits), unrounded. 0.0 when
            the credits sum to zero.

        Raises:
            InvalidGradeInputError: If any grade point is outside [0.0, 4.0]
                or any credit value is negative.
        """
        if not grades:
            return 0.0

        total_points = 0.0
        total_credits = 0
        for grade in grades:
            if not _is_valid_point(grade.grade_point):
                raise InvalidGradeInputError(f"Invalid grade point: {grade.grade_point}")
            if grade.credits < 0:
                raise InvalidGradeInputError(f"Invalid credits: {grade.credits}")
            total_points += grade.credits * grade.grade_point
            total_credits += grade.credits

        if total_credits == 0:
            return 0.0

        return total_points / total_credits

    def determine_academic_status(self, gpa: float, semester: int) -> StudentStatus:
        """Classify a student's standing for a semester.

        Args:
            gpa: Grade-point average, 0.0 to 4.0.
            semester: Current semester, starting at 1.

        Returns:
            ACTIVE, PROBATION or SUSPENDED. Semesters 1-2 never suspend.

        Raises:
            InvalidGradeInputError: If gpa is out of range or semester < 1.
        """
        if not _is_valid_point(gpa):
            raise InvalidGradeInputError(f"Invalid GPA: {gpa}")
        if semester < 1:
            raise InvalidGradeInputError(f"Invalid semester: {semester}")

        status_table = _lookup(STATUS_TABLES, semester)
        return _lookup(status_table, gpa)

    def calculate_max_credits(self, gpa: float) -> int:
        """Maximum credits a student with this GPA may take.

        Raises:
            InvalidGradeInputError: If gpa is outside [0.0, 4.0].
        """
        if not _is_valid_point(gpa):
            raise InvalidGradeInputError(f"Invalid GPA: {gpa}")

        return _lookup(MAX_CREDITS_TABLE, gpa)

    def evaluate_standing(
        self,
        grades: Sequence[CourseGrade] | None,
        semester: int,
    ) -> AcademicStanding:
        """Compute GPA, status and credit limit in one pass.

        Args:
            grades: Graded courses for the student.
            semester: Semester the status is evaluated for.

        Returns:
            AcademicStanding for the student.

        Raises:
            InvalidGradeInputError: If any input is out of range.
        """
        gpa = self.calculate_gpa(grades)
        standing = AcademicStanding(
            gpa=gpa,
            status=self.determine_academic_status(gpa, semester),
            max_credits=self.calculate_max_credits(gpa),
        )
        logger.debug(
            "Evaluated standing: gpa=%.3f, semester=%d, status=%s, max_credits=%d",
            standing.gpa,
            semester,
            standing.status.value,
            standing.max_credits,
        )
        return standing
