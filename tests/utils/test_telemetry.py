from __future__ import annotations

import dataclasses
from pathlib import Path

import jsonschema
import pytest

from base16_manager.utils import telemetry

from conftest import make_runtime_settings


def test_record_and_summarize(runtime_settings) -> None:
    telemetry.record_event(runtime_settings, "install", {"repository": "a/b"}, status="ok")
    telemetry.record_event(
        runtime_settings, "set-theme", {"repository": "a/b", "theme": "ocean"}, level="warn", status="error"
    )
    telemetry.record_event(runtime_settings, "set-theme", {"repository": "a/b", "theme": "eighties"}, status="ok")
    telemetry.record_event(
        runtime_settings, "set-theme", {"repository": "c/d", "theme": "eighties"}, level="warn", status="unsupported"
    )

    events = list(telemetry.iter_events(runtime_settings))
    assert [evt["event"] for evt in events] == ["install", "set-theme", "set-theme", "set-theme"]
    assert isinstance(events[0]["ts"], float)

    assert telemetry.summarize(events) == {
        "total": 4,
        "by_event": {"install": 1, "set-theme": 3},
        "repositories": {"a/b": {"error": 1, "ok": 1}, "c/d": {"unsupported": 1}},
        "last_theme": "eighties",
    }


def test_summarize_empty_log(runtime_settings) -> None:
    assert telemetry.summarize(telemetry.iter_events(runtime_settings)) == {
        "total": 0,
        "by_event": {},
        "repositories": {},
        "last_theme": None,
    }


def test_disabled_telemetry_writes_nothing(tmp_path: Path) -> None:
    settings = make_runtime_settings(tmp_path, telemetry=False)
    assert telemetry.record_event(settings, "install") is False
    assert not settings.telemetry_file.exists()
    assert list(telemetry.iter_events(settings)) == []


def test_unwritable_log_is_reported_once(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    settings = make_runtime_settings(tmp_path)
    blocked = tmp_path / "blocked"
    blocked.write_text("", encoding="utf-8")
    settings = dataclasses.replace(settings, log_dir=blocked)

    assert telemetry.record_event(settings, "clean") is False
    assert telemetry.record_event(settings, "clean") is False
    assert capsys.readouterr().err.count("is not writable") == 1


def test_corrupt_lines_are_skipped(runtime_settings) -> None:
    telemetry.record_event(runtime_settings, "clean")
    with runtime_settings.telemetry_file.open("a", encoding="utf-8") as fh:
        fh.write("{not json\n\n[1, 2]\n")
    assert [evt["event"] for evt in telemetry.iter_events(runtime_settings)] == ["clean"]


def test_clear_removes_log(runtime_settings) -> None:
    telemetry.record_event(runtime_settings, "clean")
    assert telemetry.clear(runtime_settings) is True
    assert not runtime_settings.telemetry_file.exists()
    assert telemetry.clear(runtime_settings) is False


def test_invalid_records_are_rejected(runtime_settings) -> None:
    with pytest.raises(ValueError):
        telemetry.record_event(runtime_settings, "deploy")
    with pytest.raises(ValueError):
        telemetry.record_event(runtime_settings, "install", level="debug")
    with pytest.raises(jsonschema.ValidationError):
        telemetry.record_event(runtime_settings, "install", status="maybe")
