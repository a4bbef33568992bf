# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Core package for academic_core.

This package contains shared framework pieces:
- config: Application configuration and settings
"""
