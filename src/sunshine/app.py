# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from sunshine.auth.pin import authenticate
from sunshine.config import Settings, load_settings
from sunshine.core.utils import attachment, display_time
from sunshine.errors import InvalidPin
from sunshine.models.registration import FORM_FIELDS
from sunshine.permissions import (
    clear_credential,
    get_settings,
    is_authenticated,
    issue_credential,
    require_admin,
)
from sunshine.services.registration_store import RegistrationStore

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
templates.env.filters["display_time"] = display_time

PANEL_URL = "/admin/panel"
LOGIN_URL = "/admin/login"


def get_store(request: Request) -> RegistrationStore:
    return request.app.state.store


def _render(request: Request, template_name: str, ctx: Optional[dict] = None):
    """TemplateResponse wrapper injecting the event title."""
    base_ctx = {"event_title": get_settings(request).event_title}
    merged = {**base_ctx, **(ctx or {})}
    return templates.TemplateResponse(request, template_name, merged)


async def _submitted_fields(request: Request) -> Dict[str, Any]:
    """Registration fields from a urlencoded/multipart form or a JSON object body."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            body = None
        data = body if isinstance(body, dict) else {}
    else:
        data = dict(await request.form())
    return {k: data.get(k) for k in FORM_FIELDS}


# ------------------ Routes ------------------


def home(request: Request):
    return _render(request, "register.html")


async def register(request: Request, store: RegistrationStore = Depends(get_store)):
    record = store.append(await _submitted_fields(request))
    return _render(request, "registered.html", {"record": record})


def admin_entry(request: Request):
    target = PANEL_URL if is_authenticated(request) else LOGIN_URL
    return RedirectResponse(url=target, status_code=303)


def login_get(request: Request):
    if is_authenticated(request):
        return RedirectResponse(url=PANEL_URL, status_code=303)
    return _render(request, "login.html", {"error": ""})


def login_post(request: Request, pin: str = Form("")):
    settings = get_settings(request)
    try:
        token = authenticate(pin, settings)
    except InvalidPin:
        logger.warning("Admin login failed from %s", request.client.host if request.client else "-")
        return _render(request, "login.html", {"error": "Invalid PIN"})
    logger.info("Admin login from %s", request.client.host if request.client else "-")
    resp = RedirectResponse(url=PANEL_URL, status_code=303)
    issue_credential(resp, token, settings)
    return resp


def logout(request: Request):
    resp = RedirectResponse(url="/", status_code=303)
    clear_credential(resp)
    return resp


def admin_panel(request: Request, store: RegistrationStore = Depends(get_store)):
    records = store.list()
    return _render(request, "panel.html", {"records": records, "total": len(records)})


def export_json(store: RegistrationStore = Depends(get_store)):
    return attachment(store.to_json(), filename="registrations.json", media_type="application/json")


def export_csv(store: RegistrationStore = Depends(get_store)):
    return attachment(store.to_csv(), filename="registrations.csv", media_type="text/csv")


def reset(store: RegistrationStore = Depends(get_store)):
    store.clear()
    return RedirectResponse(url=PANEL_URL, status_code=303)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own store, loaded once from settings.db_path."""
    settings = settings or load_settings()

    store = RegistrationStore(settings.db_path)
    store.load()

    app = FastAPI(title=f"{settings.event_title} Registration")
    app.state.settings = settings
    app.state.store = store

    admin = [Depends(require_admin)]

    app.add_api_route("/", home, methods=["GET"], response_class=HTMLResponse)
    app.add_api_route("/register", register, methods=["POST"], response_class=HTMLResponse)
    app.add_api_route("/admin", admin_entry, methods=["GET"])
    app.add_api_route(LOGIN_URL, login_get, methods=["GET"], response_class=HTMLResponse)
    app.add_api_route(LOGIN_URL, login_post, methods=["POST"])
    app.add_api_route("/logout", logout, methods=["GET"])
    app.add_api_route(PANEL_URL, admin_panel, methods=["GET"], response_class=HTMLResponse, dependencies=admin)
    app.add_api_route("/admin/export/json", export_json, methods=["GET"], dependencies=admin)
    app.add_api_route("/admin/export/csv", export_csv, methods=["GET"], dependencies=admin)
    app.add_api_route("/admin/reset", reset, methods=["GET"], dependencies=admin)
    return app
