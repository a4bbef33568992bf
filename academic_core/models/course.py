# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course model."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Course(BaseModel):
    """A course offering with a fixed seat capacity.

    enrolled_count is the only field the enrollment workflow mutates.
    Assignment is validated, so the count can never leave
    [0, capacity].
    """

    model_config = ConfigDict(validate_assignment=True)

    course_code: str = Field(min_length=1, description="Unique course code")
    course_name: str
    credits: int = Field(gt=0)
    capacity: int = Field(ge=0)
    enrolled_count: int = Field(default=0, ge=0)
    instructor: str

    @model_validator(mode="after")
    def check_capacity(self) -> Self:
        """Reject an enrolled count above capacity."""
        if self.enrolled_count > self.capacity:
            raise ValueError(
                f"enrolled_count {self.enrolled_count} exceeds capacity {self.capacity}"
            )
        return self

    @property
    def is_full(self) -> bool:
        """Whether no seats are left."""
        return self.enrolled_count >= self.capacity

    @property
    def available_seats(self) -> int:
        return max(self.capacity - self.enrolled_count, 0)
