# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course grade input for GPA computation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CourseGrade:
    """A graded course: credit weight and the grade point earned.

    Values are not range-checked here; GradeCalculator rejects grade
    points outside [0.0, 4.0] when computing a GPA.

    Attributes:
        course_code: Code of the graded course.
        credits: Credit weight of the course.
        grade_point: Grade point earned, 0.0 to 4.0.
    """

    course_code: str
    credits: int
    grade_point: float
