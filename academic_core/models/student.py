# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student model."""

from pydantic import BaseModel, ConfigDict, Field

from academic_core.models.common import MAX_GRADE_POINT, MIN_GRADE_POINT, StudentStatus


class Student(BaseModel):
    """A student as seen by the enrollment workflow.

    The core only reads students; status gates enrollment and gpa drives
    the credit limit.
    """

    model_config = ConfigDict(validate_assignment=True)

    student_id: str = Field(min_length=1, description="Unique student identifier")
    name: str
    email: str
    major: str
    semester: int = Field(ge=1, description="Current semester, starting at 1")
    gpa: float = Field(ge=MIN_GRADE_POINT, le=MAX_GRADE_POINT)
    status: StudentStatus = StudentStatus.ACTIVE
