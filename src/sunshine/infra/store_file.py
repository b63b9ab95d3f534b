# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from sunshine.errors import StoreLoadFailure, StorePersistFailure


def read_records(path: Path) -> Optional[List[Dict[str, Any]]]:
    """Read the persisted JSON array of records.

    - Returns None when the file does not exist (first run).
    - Raises StoreLoadFailure for unreadable or malformed content, including a
      document that is not an array of objects.
    """
    if not path.exists():
        return None
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise StoreLoadFailure(f"Cannot read store file {path}: {e}") from e

    if not isinstance(raw, list):
        raise StoreLoadFailure(f"Store file {path} does not contain a JSON array")
    bad = [i for i, item in enumerate(raw) if not isinstance(item, dict)]
    if bad:
        raise StoreLoadFailure(f"Store file {path} has non-object entries at {bad[:5]}")
    return raw


def write_bytes(path: Path, payload: bytes) -> None:
    """Overwrite the store file with payload, creating the parent directory."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except OSError as e:
        raise StorePersistFailure(f"Cannot write store file {path}: {e}") from e
