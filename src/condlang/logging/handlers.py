"""JSON log formatting for condlang.

Each record becomes one JSON object per line. Values passed through
``extra=`` are grouped under ``context``, so a debug line from the solver
can carry the expression it was reducing:

    logger.debug("Solved %r", text, extra={"expression": text, "reduced": result})
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries; anything else came from ``extra=``.
# 'message' and 'asctime' appear once another formatter has seen the record.
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {
    "message",
    "asctime",
}


def _extras(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON.

    Keys: ``timestamp`` (ISO-8601, UTC), ``level``, ``message``, and when
    present ``logger`` (omitted for the root logger), ``context`` and
    ``exception``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }

        if record.name not in ("", "root"):
            entry["logger"] = record.name

        context = _extras(record)
        if context:
            entry["context"] = context

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        # str() covers UNDEFINED and any other value json cannot encode
        return json.dumps(entry, default=str)
