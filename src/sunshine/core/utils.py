# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import csv
import io
import json
from datetime import datetime
from typing import Any, Dict, Iterable, Sequence

import pandas as pd
from fastapi.responses import Response


def rows_to_json(rows: Iterable[Dict[str, Any]]) -> bytes:
    """Pretty-printed JSON array (indent 2), UTF-8."""
    return json.dumps(list(rows), indent=2, ensure_ascii=False).encode("utf-8")


def rows_to_csv(rows: Sequence[Dict[str, Any]], columns: Sequence[str]) -> bytes:
    """CSV with a bare header line and every data field double-quoted.

    Missing values become "" and lines are joined with \\n, without a trailing newline.
    """
    header = ",".join(columns)
    if not rows:
        return header.encode("utf-8")

    cells = [{c: "" if r.get(c) is None else str(r.get(c)) for c in columns} for r in rows]
    df = pd.DataFrame(cells, columns=list(columns))
    buf = io.StringIO()
    df.to_csv(buf, index=False, header=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
    body = buf.getvalue()
    if body.endswith("\n"):
        body = body[:-1]
    return (header + "\n" + body).encode("utf-8")


def attachment(content: bytes, *, filename: str, media_type: str) -> Response:
    """Send content as a download without writing to disk."""
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def display_time(ts: str) -> str:
    """Render an ISO timestamp like 18/10/2026, 9:30:00 am; unparsable input is returned as is."""
    s = (ts or "").strip()
    if not s:
        return ""
    try:
        dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError:
        return s
    hour = dt.hour % 12 or 12
    suffix = "am" if dt.hour < 12 else "pm"
    return f"{dt:%d/%m/%Y}, {hour}:{dt:%M:%S} {suffix}"
