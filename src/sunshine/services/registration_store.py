# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory registration store with best-effort file persistence.

The in-memory list is the system of record. Every mutation attempts to rewrite
the whole store file; a failed write is logged and otherwise ignored, so the
store keeps working on read-only or ephemeral filesystems.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, List, Mapping, Tuple

from sunshine.core.utils import rows_to_csv, rows_to_json
from sunshine.errors import StoreLoadFailure, StorePersistFailure
from sunshine.infra.store_file import read_records, write_bytes
from sunshine.models.registration import RECORD_KEYS, Registration

logger = logging.getLogger(__name__)


class RegistrationStore:
    def __init__(self, path: Path):
        self.path = Path(path)
        self._records: List[Registration] = []
        self._lock = threading.Lock()

    # ------------------ Mutations ------------------

    def append(self, submitted: Mapping[str, Any]) -> Registration:
        """Create, store and return a new record. Fields are not validated."""
        record = Registration.create(submitted or {})
        with self._lock:
            self._records.append(record)
            snapshot = tuple(self._records)
        logger.info("Registration %s recorded (%d total)", record.id, len(snapshot))
        self._persist_snapshot(snapshot)
        return record

    def clear(self) -> None:
        with self._lock:
            dropped = len(self._records)
            self._records = []
        logger.warning("Registration store reset, %d record(s) removed", dropped)
        self._persist_snapshot(())

    # ------------------ Reads ------------------

    def list(self) -> Tuple[Registration, ...]:
        with self._lock:
            return tuple(self._records)

    def count(self) -> int:
        return len(self._records)

    def to_json(self) -> bytes:
        return rows_to_json(r.to_dict() for r in self.list())

    def to_csv(self) -> bytes:
        return rows_to_csv([r.to_dict() for r in self.list()], RECORD_KEYS)

    # ------------------ Persistence ------------------

    def persist(self) -> bool:
        """Write the current records to disk. Never raises; returns False on failure."""
        return self._persist_snapshot(self.list())

    def _persist_snapshot(self, snapshot: Tuple[Registration, ...]) -> bool:
        try:
            write_bytes(self.path, rows_to_json(r.to_dict() for r in snapshot))
        except (StorePersistFailure, TypeError, ValueError) as e:
            logger.warning("Store persist failed, keeping in-memory state: %s", e)
            return False
        return True

    def load(self) -> None:
        """Replace the in-memory records with the store file's contents.

        A missing file starts an empty store. Unreadable or malformed content is
        logged and also leaves the store empty.
        """
        try:
            raw = read_records(self.path)
        except StoreLoadFailure as e:
            logger.error("Store load failed, starting empty: %s", e)
            raw = []

        if raw is None:
            logger.info("No store file at %s, starting empty", self.path)
            raw = []

        records = [Registration.from_dict(item) for item in raw]
        with self._lock:
            self._records = records
        if records:
            logger.info("Loaded %d registration(s) from %s", len(records), self.path)
