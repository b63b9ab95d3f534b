# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Module-level ASGI application for servers and serverless hosts.

  uvicorn sunshine.asgi:app
"""

from __future__ import annotations

from sunshine.app import create_app

app = create_app()
