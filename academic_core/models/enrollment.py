# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment record model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from academic_core.models.common import EnrollmentStatus
from academic_core.utils.datetime import utc_now


class Enrollment(BaseModel):
    """An approved link between a student and a course.

    Created once per successful enrollment and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    enrollment_id: str
    student_id: str
    course_code: str
    status: EnrollmentStatus = EnrollmentStatus.APPROVED
    enrollment_date: datetime = Field(default_factory=utc_now)
