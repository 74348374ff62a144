"""Declaration-line rewrites for X resources and rofi."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Pattern, Sequence

from base16_manager.domain.editing import atomic_write, backup, join_lines, read_lines
from base16_manager.domain.repository import RepositoryId

from . import PathResolver, TargetAction, TargetAdapter, TargetContext


def rewrite_declaration(config: Path, patterns: Sequence[Pattern[str]], declaration: str) -> TargetAction:
    lines = read_lines(config)
    kept = [line for line in lines if not any(pattern.match(line) for pattern in patterns)]
    existed = backup(config) is not None
    atomic_write(config, join_lines(kept + [declaration]))
    return TargetAction(config, "updated" if existed else "created")


class DeclarationTarget(TargetAdapter):
    """Drops stale theme declarations and appends one for the new artifact."""

    patterns: Sequence[Pattern[str]] = ()
    template = ""

    def __init__(self, target: PathResolver) -> None:
        self._target = target

    def apply_artifact(self, repo_id: RepositoryId, theme: str, artifact: Path, context: TargetContext) -> List[TargetAction]:
        config = self._target(context)
        return [rewrite_declaration(config, self.patterns, self.template.format(path=artifact))]


class XresourcesTarget(DeclarationTarget):
    suffix = ".Xresources"
    patterns = (re.compile(r'^\s*#include\s+".*base16-[^"]*"'),)
    template = '#include "{path}"'

    def apply_artifact(self, repo_id: RepositoryId, theme: str, artifact: Path, context: TargetContext) -> List[TargetAction]:
        actions = super().apply_artifact(repo_id, theme, artifact, context)
        config = actions[0].path
        code = context.runner.run(["xrdb", "-load", str(config)])
        actions.append(TargetAction(config, "reloaded" if code == 0 else "reload-failed"))
        return actions


class RofiTarget(DeclarationTarget):
    suffix = ".rasi"
    patterns = (
        re.compile(r"^\s*@theme\s"),
        re.compile(r'^\s*@import\s+".*base16-[^"]*"'),
    )
    template = '@theme "{path}"'


def xresources_file(context: TargetContext) -> Path:
    return context.home / ".Xresources"


def rofi_config(context: TargetContext) -> Path:
    return context.config_home / "rofi" / "config.rasi"


__all__ = [
    "DeclarationTarget",
    "RofiTarget",
    "XresourcesTarget",
    "rewrite_declaration",
    "rofi_config",
    "xresources_file",
]
