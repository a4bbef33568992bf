# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment identifier generation.

Identifiers combine a random token drawn once per process with a
sequence number shared by every generator in that process, e.g.
``ENR-3F2A9C1B7D4E-000042``. The sequence makes ids unique within the
process; the token keeps separate processes apart.
"""

import itertools
from uuid import uuid4

DEFAULT_ID_PREFIX = "ENR-"

PROCESS_TOKEN = uuid4().hex[:12].upper()

# itertools.count is advanced atomically under the GIL
_sequence = itertools.count(1)


class EnrollmentIdGenerator:
    """Generates prefixed enrollment identifiers.

    Generators differ only in their prefix; all of them draw from the
    same process-wide sequence, so no two calls ever return the same id.
    """

    def __init__(self, prefix: str = DEFAULT_ID_PREFIX) -> None:
        self.prefix = prefix

    def __call__(self) -> str:
        return f"{self.prefix}{PROCESS_TOKEN}-{next(_sequence):06d}"
