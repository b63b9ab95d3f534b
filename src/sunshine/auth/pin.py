# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import hmac

from sunshine.auth.session import sign_admin
from sunshine.config import Settings
from sunshine.errors import InvalidPin


def check_pin(submitted: str, expected: str) -> bool:
    # Exact string equality, constant time.
    return hmac.compare_digest((submitted or "").encode("utf-8"), (expected or "").encode("utf-8"))


def authenticate(pin: str, settings: Settings) -> str:
    """Return a signed admin credential for the correct PIN, else raise InvalidPin.

    There is no lockout or delay between attempts.
    """
    if not check_pin(pin, settings.admin_pin):
        raise InvalidPin("Invalid PIN")
    return sign_admin(settings.cookie_secret)
