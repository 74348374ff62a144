"""base16-vim: colorscheme pointer files for vim and neovim."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from base16_manager.domain.editing import atomic_write
from base16_manager.domain.repository import RepositoryId

from . import TargetAction, TargetAdapter, TargetContext


def pointer_files(context: TargetContext) -> List[Tuple[Path, Path]]:
    """(editor config directory, pointer file) pairs."""

    return [
        (context.home / ".vim", context.home / ".vimrc_background"),
        (context.config_home / "nvim", context.config_home / "nvim" / "colorscheme.vim"),
    ]


class VimTarget(TargetAdapter):
    suffix = ".vim"

    def apply_artifact(self, repo_id: RepositoryId, theme: str, artifact: Path, context: TargetContext) -> List[TargetAction]:
        actions: List[TargetAction] = []
        line = f"colorscheme base16-{theme}\n"
        for directory, pointer in pointer_files(context):
            if not directory.is_dir():
                continue
            atomic_write(pointer, line)
            actions.append(TargetAction(pointer, "updated"))
        return actions


__all__ = ["VimTarget", "pointer_files"]
