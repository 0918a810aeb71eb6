"""Resolution logging for the xdgdir CLI.

Each event is one line on stderr; stdout only ever carries resolved paths.
Lines are ``key=value`` text by default, or one JSON object each with
XDGDIR_LOG_FORMAT=json. XDGDIR_LOG_SILENT=1 drops every event and debug events
need XDGDIR_DEBUG=1. The resolver itself never logs.
"""

import json
import os
import sys
import time
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Generator, Optional

from xdgdir.core.services.environment import EnvironmentSource, ProcessEnvironment
from xdgdir.core.services.error_codes import ErrorCode, XdgdirError
from xdgdir.core.services.resolver import CHECK_ORDER, HOME_VAR, RUNTIME_VAR

# Variables with no fallback: HOME is required, XDG_RUNTIME_DIR stays unset.
_NO_DEFAULT = (HOME_VAR, RUNTIME_VAR)

_HEAD_KEYS = ("timestamp", "run_id", "level", "operation")

_current_run_id: Optional[str] = None


def get_run_id() -> str:
    """Return XDGDIR_RUN_ID when it is a valid UUID, else a fresh UUIDv4."""
    candidate = os.environ.get("XDGDIR_RUN_ID")
    if candidate:
        try:
            return str(uuid.UUID(candidate))
        except ValueError:
            pass
    return str(uuid.uuid4())


def get_current_run_id() -> str:
    global _current_run_id
    if _current_run_id is None:
        _current_run_id = get_run_id()
    return _current_run_id


def is_debug_enabled() -> bool:
    return os.environ.get("XDGDIR_DEBUG") == "1"


def is_log_silenced() -> bool:
    return os.environ.get("XDGDIR_LOG_SILENT") == "1"


def variable_sources(env: EnvironmentSource) -> Dict[str, str]:
    """Report where each checked variable comes from, in check order.

    ``env`` when it is set and non-empty, otherwise ``default`` for the
    XDG_*_HOME variables and ``unset`` for HOME and XDG_RUNTIME_DIR. Values
    are not validated here.
    """
    sources: Dict[str, str] = {}
    for name in CHECK_ORDER:
        if env.lookup(name):
            sources[name] = "env"
        elif name in _NO_DEFAULT:
            sources[name] = "unset"
        else:
            sources[name] = "default"
    return sources


def _text_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict):
        return ",".join(f"{k}:{_text_value(v)}" for k, v in value.items())
    return str(value)


def format_entry(entry: Dict[str, Any], log_format: str) -> str:
    if log_format == "json":
        return json.dumps(entry, separators=(",", ":"), default=str)
    head = f"{entry['timestamp']} [{entry['run_id']}] {entry['level'].upper()} {entry['operation']}"
    fields = [f"{key}={_text_value(value)}" for key, value in entry.items() if key not in _HEAD_KEYS]
    return " ".join([head, *fields])


def emit(operation: str, level: str = "info", run_id: Optional[str] = None, **fields: Any) -> None:
    """Write one event to stderr. Fields set to None are left out."""
    if is_log_silenced() or (level == "debug" and not is_debug_enabled()):
        return
    entry: Dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "run_id": run_id or get_current_run_id(),
        "level": level,
        "operation": operation,
    }
    entry.update((key, value) for key, value in fields.items() if value is not None)
    log_format = os.environ.get("XDGDIR_LOG_FORMAT", "text")
    print(format_entry(entry, log_format), file=sys.stderr, flush=True)


@contextmanager
def log_resolution(
    app_name: Optional[str] = None,
    env: Optional[EnvironmentSource] = None,
    run_id: Optional[str] = None,
) -> Generator[Dict[str, Any], None, None]:
    """Time one resolution and log it as a ``resolve_dirs`` event.

    The event records the application name, where every variable came from,
    the duration and, on failure, the error code. Yields the event's fields
    so the caller can add to them.
    """
    fields: Dict[str, Any] = {
        "app_name": app_name,
        "sources": variable_sources(env if env is not None else ProcessEnvironment()),
    }
    start = time.monotonic()
    try:
        yield fields
    except Exception as e:
        code = e.code if isinstance(e, XdgdirError) else ErrorCode.UNKNOWN_ERROR
        emit(
            "resolve_dirs",
            level="error",
            run_id=run_id,
            success=False,
            error_code=code.value,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
            **fields,
        )
        raise
    emit(
        "resolve_dirs",
        run_id=run_id,
        success=True,
        duration_ms=round((time.monotonic() - start) * 1000, 2),
        **fields,
    )
