from __future__ import annotations

import tempfile
from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from base16_manager.app.targets.strategies import set_generic
from base16_manager.domain.editing import LineSyntax

SYNTAX = LineSyntax(comment="#", separator="=")

keys = st.sampled_from(["fg", "bg", "color1", "color10", "font", "cursor"])
values = st.sampled_from(["1", "#ffffff", "red", " #2b303b"])
assignments = st.builds(lambda key, pad, value: f"{key}{pad}={value}", keys, st.sampled_from(["", " ", "    "]), values)
comments = st.sampled_from(["# note", "# fg=old", "#color1 = #000000", "# Base16 Ocean", "# Author: Chris", "# Ocean scheme by Chris", "#"])
sections = st.sampled_from(["[colors]", "[options]"])
lines = st.one_of(assignments, comments, sections, st.just(""))
documents = st.lists(lines, max_size=12).map(lambda items: "\n".join(items))
trailing = st.sampled_from(["", "\n"])


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@settings(max_examples=150, deadline=None)
@given(config=documents, config_end=trailing, artifact=documents, artifact_end=trailing)
def test_generic_merge_is_idempotent(config: str, config_end: str, artifact: str, artifact_end: str) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        theme = root / "repo" / "base16-ocean.config"
        target = root / "home" / "config"
        _write(theme, artifact + artifact_end)
        _write(target, config + config_end)

        set_generic(theme, target, SYNTAX)
        once = target.read_text(encoding="utf-8")
        set_generic(theme, target, SYNTAX)
        assert target.read_text(encoding="utf-8") == once


@settings(max_examples=75, deadline=None)
@given(config=documents, artifact=documents)
def test_backup_holds_previous_content(config: str, artifact: str) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        theme = root / "base16-ocean.config"
        target = root / "config"
        _write(theme, artifact + "\n")
        _write(target, config)

        set_generic(theme, target, SYNTAX)
        assert (root / "config.bac").read_text(encoding="utf-8") == config
        previous = target.read_text(encoding="utf-8")
        set_generic(theme, target, SYNTAX)
        assert (root / "config.bac").read_text(encoding="utf-8") == previous


@settings(max_examples=75, deadline=None)
@given(config=documents)
def test_previous_definitions_are_removed(config: str) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        theme = root / "base16-ocean.config"
        target = root / "config"
        _write(theme, "foo=red\n")
        _write(target, "foo=1\n" + config + "\nfoo=2\n")

        set_generic(theme, target, SYNTAX)
        assert [line for line in target.read_text(encoding="utf-8").splitlines() if "foo" in line] == ["foo=red"]
