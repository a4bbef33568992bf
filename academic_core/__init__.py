"""Academic Core.

Academic-enrollment business rules for a student-information system:
course enrollment and drop workflows, credit-load validation, grade-point
averages and academic standing.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
