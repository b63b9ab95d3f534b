# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Registration record model."""
from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, fields
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

# Persisted/exported key order; also the CSV column order.
RECORD_KEYS = ("id", "ts", "name", "email", "phone", "branch", "year", "college", "note")
FORM_FIELDS = RECORD_KEYS[2:]


def new_id() -> str:
    return uuid.uuid4().hex


def utc_timestamp() -> str:
    """ISO 8601 UTC with milliseconds and a Z suffix, e.g. 2026-10-18T09:30:00.123Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    # Lone surrogates (e.g. "\ud800" in a JSON body) cannot be written as UTF-8.
    return text.encode("utf-8", "replace").decode("utf-8")


@dataclass(frozen=True)
class Registration:
    """One submitted registration. Immutable once created."""

    id: str
    ts: str  # ISO 8601 creation time
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    branch: Optional[str] = None
    year: Optional[str] = None
    college: Optional[str] = None
    note: Optional[str] = None

    @classmethod
    def create(cls, submitted: Mapping[str, Any]) -> "Registration":
        """Build a new record from submitted fields; unknown keys are ignored."""
        values = {k: _text(submitted.get(k)) for k in FORM_FIELDS}
        return cls(id=new_id(), ts=utc_timestamp(), **values)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Registration":
        known = {f.name for f in fields(cls)}
        values = {k: _text(v) for k, v in raw.items() if k in known}
        values["id"] = values.get("id") or new_id()
        values["ts"] = values.get("ts") or ""
        return cls(**values)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)
