"""Static catalog of template repositories with a known adapter."""

from __future__ import annotations

from typing import Tuple

from .repository import RepositoryId

CATALOG: Tuple[RepositoryId, ...] = (
    RepositoryId("chriskempson", "base16-shell"),
    RepositoryId("chriskempson", "base16-vim"),
    RepositoryId("chriskempson", "base16-xresources"),
    RepositoryId("nicodebo", "base16-fzf"),
    RepositoryId("khamer", "base16-dunst"),
    RepositoryId("khamer", "base16-termite"),
    RepositoryId("kdrag0n", "base16-kitty"),
    RepositoryId("khamer", "base16-i3"),
    RepositoryId("0xdec", "base16-rofi"),
    RepositoryId("theova", "base16-qutebrowser"),
)

__all__ = ["CATALOG"]
