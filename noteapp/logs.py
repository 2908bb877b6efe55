from __future__ import annotations

import json
import logging
import sys
import time
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger("noteapp.oplog")

LOG_FILENAME = "noteapp.log"


def setup_logging(
    level: str | int = "INFO",
    log_dir: Optional[Path] = None,
    console_level: int = logging.WARNING,
) -> Optional[Path]:
    """
    Configure the ``noteapp`` logger: console always, rotating file when ``log_dir`` is given.

    Safe to call more than once; previous handlers are replaced. Returns the log file path, if any.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    app_logger = logging.getLogger("noteapp")
    app_logger.setLevel(level)
    for h in list(app_logger.handlers):
        app_logger.removeHandler(h)
        h.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(max(level, console_level))
    console.setFormatter(logging.Formatter("%(levelname)-8s | %(name)s | %(message)s"))
    app_logger.addHandler(console)

    if log_dir is None:
        return None

    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILENAME
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    app_logger.addHandler(file_handler)
    return log_path


class LogContext:
    """One log record per note operation: action, entity, result, latency."""

    def __init__(self, action: str, user: str = "owner"):
        self.action = action
        self.user = user
        self.request_id = str(uuid.uuid4())
        self.start = time.perf_counter()
        self.payload = None
        self.entity_type = None
        self.entity_id = None
        self.result: Optional[str] = None

    def set_entity(self, etype: str, eid: Optional[str]):
        self.entity_type = etype
        self.entity_id = eid

    def set_payload(self, obj: Any): self.payload = obj

    def write(self, result: str = "OK", err: Optional[str] = None):
        self.result = result
        elapsed_ms = int((time.perf_counter() - self.start) * 1000)
        rec = {
            "user": self.user,
            "action": self.action,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "request_id": self.request_id,
            "payload": self.payload,
            "result": result,
            "err_msg": err,
            "latency_ms": elapsed_ms,
        }
        level = logging.INFO if err is None else logging.WARNING
        logger.log(level, "%s %s", self.action, json.dumps(rec, ensure_ascii=False))

    def __enter__(self) -> "LogContext":
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.result is None:
            if exc is None:
                self.write("OK")
            else:
                self.write("ERROR", str(exc))
        return False
