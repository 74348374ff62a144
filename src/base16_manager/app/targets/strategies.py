"""Generic strategies: whole-file replace and line-merge."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from base16_manager.domain.editing import (
    LineSyntax,
    append_block,
    atomic_write,
    backup,
    merge_assignments,
    read_lines,
    split_lines,
)
from base16_manager.domain.repository import RepositoryId

from . import PathResolver, TargetAction, TargetAdapter, TargetContext


def read_artifact(artifact: Path) -> str:
    return artifact.read_text(encoding="utf-8", errors="surrogateescape")


def set_by_copy(artifact: Path, config: Path) -> TargetAction:
    """Overwrite ``config`` with the artifact, keeping a ``.bac`` copy."""

    existed = backup(config) is not None
    atomic_write(config, read_artifact(artifact))
    return TargetAction(config, "replaced" if existed else "created")


def set_generic(artifact: Path, config: Path, syntax: LineSyntax) -> TargetAction:
    """Merge the artifact into ``config``, dropping the previous theme first."""

    content = read_artifact(artifact)
    if not config.exists():
        atomic_write(config, content)
        return TargetAction(config, "created")
    scratch = merge_assignments(read_lines(config), split_lines(content), syntax)
    backup(config)
    atomic_write(config, append_block(scratch, content))
    return TargetAction(config, "updated")


class CopyTarget(TargetAdapter):
    def __init__(self, target: PathResolver, suffix: Optional[str] = None) -> None:
        self._target = target
        self.suffix = suffix

    def apply_artifact(self, repo_id: RepositoryId, theme: str, artifact: Path, context: TargetContext) -> List[TargetAction]:
        return [set_by_copy(artifact, self._target(context))]


class GenericMergeTarget(TargetAdapter):
    def __init__(self, target: PathResolver, syntax: LineSyntax, suffix: Optional[str] = None) -> None:
        self._target = target
        self._syntax = syntax
        self.suffix = suffix

    def apply_artifact(self, repo_id: RepositoryId, theme: str, artifact: Path, context: TargetContext) -> List[TargetAction]:
        return [set_generic(artifact, self._target(context), self._syntax)]


__all__ = ["CopyTarget", "GenericMergeTarget", "read_artifact", "set_by_copy", "set_generic"]
