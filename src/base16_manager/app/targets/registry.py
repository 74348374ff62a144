"""Registry mapping repository identifiers to target adapters."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, ItemsView, Iterable, Optional

from base16_manager.domain.editing import LineSyntax

from . import TargetAdapter, TargetContext
from .dunst import DunstTarget
from .fzf import FzfTarget
from .resources import RofiTarget, XresourcesTarget, rofi_config, xresources_file
from .shell import ShellTarget
from .strategies import CopyTarget, GenericMergeTarget
from .vim import VimTarget

HASH_ASSIGNMENT = LineSyntax(comment="#", separator="=")


def termite_config(context: TargetContext) -> Path:
    return context.config_home / "termite" / "config"


def kitty_colors(context: TargetContext) -> Path:
    return context.config_home / "kitty" / "colors.conf"


def i3_colors(context: TargetContext) -> Path:
    return context.config_home / "i3" / "colors"


def qutebrowser_config(context: TargetContext) -> Path:
    if context.detect_os() == "darwin":
        return context.home / ".qutebrowser" / "config.py"
    return context.config_home / "qutebrowser" / "config.py"


class TargetRegistry:
    def __init__(self) -> None:
        self._adapters: Dict[str, TargetAdapter] = {}

    def register(self, repository: str, adapter: TargetAdapter) -> None:
        if repository in self._adapters:
            raise ValueError(f"Adapter for {repository} already registered")
        self._adapters[repository] = adapter

    def get(self, repository: str) -> Optional[TargetAdapter]:
        return self._adapters.get(repository)

    def names(self) -> Iterable[str]:
        return list(self._adapters)

    def items(self) -> ItemsView[str, TargetAdapter]:
        return self._adapters.items()

    def __contains__(self, repository: object) -> bool:
        return repository in self._adapters


def build_registry() -> TargetRegistry:
    registry = TargetRegistry()
    registry.register("chriskempson/base16-shell", ShellTarget())
    registry.register("chriskempson/base16-vim", VimTarget())
    registry.register("chriskempson/base16-xresources", XresourcesTarget(xresources_file))
    registry.register("nicodebo/base16-fzf", FzfTarget())
    registry.register("khamer/base16-dunst", DunstTarget())
    registry.register("khamer/base16-termite", GenericMergeTarget(termite_config, HASH_ASSIGNMENT))
    registry.register("kdrag0n/base16-kitty", CopyTarget(kitty_colors, suffix=".conf"))
    registry.register("khamer/base16-i3", CopyTarget(i3_colors, suffix=".config"))
    registry.register("0xdec/base16-rofi", RofiTarget(rofi_config))
    registry.register(
        "theova/base16-qutebrowser",
        GenericMergeTarget(qutebrowser_config, HASH_ASSIGNMENT, suffix=".config.py"),
    )
    return registry


__all__ = ["TargetRegistry", "build_registry", "qutebrowser_config"]
