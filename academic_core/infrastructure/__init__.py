# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Infrastructure adapters for academic_core.

Collaborators the enrollment workflow depends on:
- repositories: Student and course stores
- notifications: Outbound email senders
"""
