"""base16-shell: session helper plus a persistent fish startup block."""

from __future__ import annotations

from pathlib import Path
from typing import List

from base16_manager.domain.editing import atomic_write, backup, replace_marker_block
from base16_manager.domain.repository import RepositoryId

from . import TargetAction, TargetAdapter, TargetContext

BLOCK_START = "# base16-manager start"
BLOCK_END = "# base16-manager end"
PROFILE_HELPER = "profile_helper.sh"
HELPER_SNIPPET = '. "$1" && _base16 "$2" "$3"'


def fish_config(context: TargetContext) -> Path:
    return context.config_home / "fish" / "config.fish"


def fish_block(artifact: Path) -> str:
    return "\n".join(
        [
            "if status --is-interactive",
            f'    sh "{artifact}"',
            "end",
        ]
    )


class ShellTarget(TargetAdapter):
    suffix = ".sh"

    def apply_artifact(self, repo_id: RepositoryId, theme: str, artifact: Path, context: TargetContext) -> List[TargetAction]:
        actions: List[TargetAction] = []
        helper = context.locator.repository_root(repo_id) / PROFILE_HELPER
        if helper.is_file():
            code = context.runner.run(
                ["bash", "-c", HELPER_SNIPPET, "base16-manager", str(helper), str(artifact), theme],
                env={"HOME": str(context.home)},
            )
            actions.append(TargetAction(helper, "applied" if code == 0 else "helper-failed"))
        else:
            actions.append(TargetAction(helper, "helper-missing"))

        if context.runner.which("fish"):
            config = fish_config(context)
            current = config.read_text(encoding="utf-8") if config.exists() else ""
            updated = replace_marker_block(config, current, BLOCK_START, BLOCK_END, fish_block(artifact))
            if updated != current:
                backup(config)
                atomic_write(config, updated)
                actions.append(TargetAction(config, "updated"))
            else:
                actions.append(TargetAction(config, "unchanged"))
        return actions


__all__ = ["BLOCK_END", "BLOCK_START", "ShellTarget", "fish_block", "fish_config"]
