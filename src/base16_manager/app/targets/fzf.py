"""base16-fzf: fixed colors file sourced from shell startup files."""

from __future__ import annotations

from pathlib import Path
from typing import List

from base16_manager.domain.editing import atomic_write, ensure_line, join_lines, read_lines
from base16_manager.domain.repository import RepositoryId

from . import TargetAction, TargetAdapter, TargetContext
from .strategies import read_artifact

RC_FILES = (".bashrc", ".zshrc")


def colors_file(context: TargetContext) -> Path:
    return context.config_home / "base16-fzf" / "colors.sh"


def source_line(path: Path) -> str:
    return f'[ -f "{path}" ] && source "{path}"'


class FzfTarget(TargetAdapter):
    suffix = ".config"

    def apply_artifact(self, repo_id: RepositoryId, theme: str, artifact: Path, context: TargetContext) -> List[TargetAction]:
        target = colors_file(context)
        atomic_write(target, read_artifact(artifact))
        actions = [TargetAction(target, "replaced")]
        line = source_line(target)
        for name in RC_FILES:
            rc = context.home / name
            if not rc.exists():
                continue
            lines, added = ensure_line(read_lines(rc), line)
            if added:
                atomic_write(rc, join_lines(lines))
                actions.append(TargetAction(rc, "updated"))
        return actions


__all__ = ["FzfTarget", "RC_FILES", "colors_file", "source_line"]
