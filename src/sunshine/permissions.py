# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from fastapi import HTTPException, Request, Response

from sunshine.auth.session import COOKIE_NAME, verify_admin
from sunshine.config import Settings
from sunshine.errors import Unauthenticated

LOGIN_URL = "/admin/login"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def is_authenticated(request: Request) -> bool:
    settings = get_settings(request)
    token = request.cookies.get(COOKIE_NAME, "")
    return verify_admin(token, settings.cookie_secret, max_age=settings.session_max_age)


def check_admin(request: Request) -> None:
    if not is_authenticated(request):
        raise Unauthenticated(request.url.path)


def require_admin(request: Request) -> None:
    """Dependency for admin-only routes: redirect to the login page, never an error page."""
    try:
        check_admin(request)
    except Unauthenticated:
        raise HTTPException(status_code=303, headers={"Location": LOGIN_URL})


def cookie_settings(settings: Settings) -> dict:
    return {"httponly": True, "samesite": "lax", "secure": settings.cookie_secure}


def issue_credential(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        COOKIE_NAME,
        token,
        max_age=settings.session_max_age,
        **cookie_settings(settings),
    )


def clear_credential(response: Response) -> None:
    response.delete_cookie(COOKIE_NAME)
