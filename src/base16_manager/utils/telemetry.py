"""Local event log: one JSON object per line, validated before it is written."""

from __future__ import annotations

import json
import sys
import time
from collections import Counter
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Iterable, Iterator

import jsonschema

from base16_manager.settings import RuntimeSettings

EVENTS = frozenset({"install", "uninstall", "update", "set-theme", "clean"})
LEVELS = frozenset({"info", "warn", "error"})

_UNWRITABLE: set[Path] = set()


def telemetry_enabled(settings: RuntimeSettings) -> bool:
    return settings.telemetry


def record_event(
    settings: RuntimeSettings,
    event: str,
    payload: dict[str, Any] | None = None,
    *,
    level: str = "info",
    status: str | None = None,
) -> bool:
    """Append one event to the log and report whether it was written.

    An unwritable log is reported once per path on stderr; the command that
    emitted the event carries on.
    """

    if not telemetry_enabled(settings):
        return False
    record = _build_record(event, payload, level, status)
    _telemetry_validator().validate(record)
    log_path = settings.telemetry_file
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, ensure_ascii=False) + "\n")
    except OSError as exc:
        if log_path not in _UNWRITABLE:
            _UNWRITABLE.add(log_path)
            sys.stderr.write(f"base16-manager: event log {log_path} is not writable ({exc})\n")
        return False
    return True


def iter_events(settings: RuntimeSettings) -> Iterator[dict[str, Any]]:
    """Yield logged events in order, skipping lines that are not JSON objects."""

    log_path = settings.telemetry_file
    if not log_path.is_file():
        return
    with log_path.open("r", encoding="utf-8") as fh:
        for raw in fh:
            try:
                record = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if isinstance(record, dict):
                yield record


def summarize(events: Iterable[dict[str, Any]]) -> dict[str, Any]:
    """Count events per command and theme outcomes per repository."""

    by_event: Counter[str] = Counter()
    repositories: dict[str, Counter[str]] = {}
    last_theme: str | None = None
    for evt in events:
        name = evt.get("event", "unknown")
        by_event[name] += 1
        if name != "set-theme":
            continue
        payload = evt.get("payload") or {}
        repository = payload.get("repository")
        if repository:
            repositories.setdefault(repository, Counter())[evt.get("status", "unknown")] += 1
        last_theme = payload.get("theme", last_theme)
    return {
        "total": sum(by_event.values()),
        "by_event": dict(by_event),
        "repositories": {name: dict(counts) for name, counts in sorted(repositories.items())},
        "last_theme": last_theme,
    }


def clear(settings: RuntimeSettings) -> bool:
    log_path = settings.telemetry_file
    if not log_path.is_file():
        return False
    log_path.unlink()
    return True


def _build_record(event: str, payload: dict[str, Any] | None, level: str, status: str | None) -> dict[str, Any]:
    if event not in EVENTS:
        raise ValueError(f"Unknown event '{event}', expected one of {', '.join(sorted(EVENTS))}")
    if level not in LEVELS:
        raise ValueError(f"Event level '{level}' is not supported")
    record: dict[str, Any] = {"ts": time.time(), "event": event, "payload": dict(payload or {}), "level": level}
    if status:
        record["status"] = status
    return record


@lru_cache(maxsize=1)
def _telemetry_validator() -> jsonschema.Draft202012Validator:
    schema_resource = resources.files("base16_manager.resources") / "telemetry.schema.json"
    return jsonschema.Draft202012Validator(json.loads(schema_resource.read_text(encoding="utf-8")))


__all__ = ["EVENTS", "clear", "iter_events", "record_event", "summarize", "telemetry_enabled"]
