# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from sunshine.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_PIN = "0000"
DEFAULT_EVENT_TITLE = "Sunshine Workshop"
SESSION_MAX_AGE_SECONDS = 12 * 60 * 60  # 12 hours

_TRUTHY = {"1", "true", "yes", "y"}


def _flag(env: Mapping[str, str], name: str) -> bool:
    return (env.get(name) or "false").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    admin_pin: str
    cookie_secret: str
    db_path: Path
    secret_is_derived: bool = False
    cookie_secure: bool = False
    event_title: str = DEFAULT_EVENT_TITLE
    session_max_age: int = SESSION_MAX_AGE_SECONDS


def default_db_path(env: Mapping[str, str]) -> Path:
    """Serverless hosts (VERCEL set) only offer a writable /tmp."""
    if env.get("VERCEL"):
        return Path("/tmp/db.json")
    return Path("data") / "db.json"


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Read configuration from the environment.

    Without COOKIE_SECRET the signing secret is derived from the PIN. Anyone who
    knows the PIN can then forge the admin cookie, so this is logged loudly; set
    REQUIRE_COOKIE_SECRET=1 to refuse to start instead.
    """
    env = os.environ if env is None else env

    pin = env.get("ADMIN_PIN") or DEFAULT_ADMIN_PIN
    secret = env.get("COOKIE_SECRET") or ""
    derived = not secret
    if derived:
        if _flag(env, "REQUIRE_COOKIE_SECRET"):
            raise ConfigError("COOKIE_SECRET is required (REQUIRE_COOKIE_SECRET is set)")
        secret = pin + "_secret"
        logger.warning(
            "COOKIE_SECRET not set: admin cookies are signed with a secret derived from ADMIN_PIN. "
            "This is insecure; configure an independent COOKIE_SECRET."
        )

    db_path = Path(env.get("DB_PATH") or default_db_path(env))

    return Settings(
        admin_pin=pin,
        cookie_secret=secret,
        db_path=db_path,
        secret_is_derived=derived,
        cookie_secure=_flag(env, "COOKIE_SECURE"),
        event_title=(env.get("EVENT_TITLE") or DEFAULT_EVENT_TITLE).strip(),
    )
