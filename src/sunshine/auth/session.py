# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from itsdangerous import BadSignature, BadTimeSignature, URLSafeTimedSerializer

from sunshine.config import SESSION_MAX_AGE_SECONDS

COOKIE_NAME = "admin_ok"
SESSION_SALT = "sunshine.admin.v1"


def _serializer(secret: str) -> URLSafeTimedSerializer:
    if not secret:
        raise RuntimeError("Missing cookie signing secret")
    return URLSafeTimedSerializer(secret_key=secret, salt=SESSION_SALT)


def sign_admin(secret: str) -> str:
    s = _serializer(secret)
    return s.dumps({"admin": True})


def verify_admin(token: str, secret: str, *, max_age: int = SESSION_MAX_AGE_SECONDS) -> bool:
    """True when token carries our signature and is at most max_age seconds old."""
    if not token:
        return False
    s = _serializer(secret)
    try:
        data = s.loads(token, max_age=max_age)
    except (BadSignature, BadTimeSignature):
        return False
    return isinstance(data, dict) and data.get("admin") is True
