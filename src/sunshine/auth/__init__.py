# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Admin authentication helpers.

This package provides:
- PIN check against the configured ADMIN_PIN
- Signed, time-limited admin cookies (itsdangerous)
"""
