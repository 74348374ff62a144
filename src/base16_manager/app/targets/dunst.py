"""base16-dunst: replace the base16 urgency sections of dunstrc."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from base16_manager.domain.editing import (
    append_block,
    atomic_write,
    backup,
    delete_exact,
    read_lines,
    remove_section,
    split_lines,
    strip_banners,
)
from base16_manager.domain.repository import RepositoryId

from . import TargetAction, TargetAdapter, TargetContext
from .strategies import read_artifact

SECTION_HEADER = "[base16_low]"
SECTION_TERMINATOR = re.compile(r"^\s*\[(?!base16_)")
PROCESS_NAME = "dunst"
RELOAD_SIGNAL = "TERM"


def dunstrc(context: TargetContext) -> Path:
    return context.config_home / "dunst" / "dunstrc"


class DunstTarget(TargetAdapter):
    suffix = ".dunstrc"

    def apply_artifact(self, repo_id: RepositoryId, theme: str, artifact: Path, context: TargetContext) -> List[TargetAction]:
        config = dunstrc(context)
        content = read_artifact(artifact)
        lines = remove_section(read_lines(config), SECTION_HEADER, SECTION_TERMINATOR)
        lines = delete_exact(lines, [line for line in split_lines(content) if line.strip()])
        lines = strip_banners(lines, "#")
        while lines and not lines[-1].strip():
            lines.pop()
        existed = backup(config) is not None
        atomic_write(config, append_block(lines, content))
        actions = [TargetAction(config, "updated" if existed else "created")]
        if context.signaler.signal_reload(PROCESS_NAME, RELOAD_SIGNAL):
            actions.append(TargetAction(None, "reloaded"))
        return actions


__all__ = ["DunstTarget", "SECTION_HEADER", "SECTION_TERMINATOR", "dunstrc"]
