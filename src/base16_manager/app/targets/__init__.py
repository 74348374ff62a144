"""Target adapters: apply a theme artifact to one application's config."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from base16_manager.adapters.system import detect_os
from base16_manager.domain.repository import RepositoryId
from base16_manager.domain.themes import ThemeLocator
from base16_manager.ports.system import CommandRunner, ProcessSignaler
from base16_manager.settings import RuntimeSettings


@dataclass(frozen=True)
class TargetContext:
    """Collaborators shared by every target adapter."""

    settings: RuntimeSettings
    locator: ThemeLocator
    runner: CommandRunner
    signaler: ProcessSignaler
    os_detector: Callable[[], str] = field(default=detect_os)

    @property
    def home(self) -> Path:
        return self.settings.home_dir

    @property
    def config_home(self) -> Path:
        return self.settings.config_home

    def detect_os(self) -> str:
        return self.os_detector()


@dataclass
class TargetAction:
    path: Optional[Path]
    action: str


PathResolver = Callable[[TargetContext], Path]


class TargetAdapter:
    """Base interface for per-application theme adapters.

    ``suffix`` narrows artifact lookup when a template repository ships more
    than one file per theme.
    """

    suffix: Optional[str] = None

    def locate(self, repo_id: RepositoryId, theme: str, context: TargetContext) -> Path:
        return context.locator.locate(repo_id, theme, self.suffix)

    def apply(self, repo_id: RepositoryId, theme: str, context: TargetContext) -> List[TargetAction]:
        artifact = self.locate(repo_id, theme, context)
        return self.apply_artifact(repo_id, theme, artifact, context)

    def apply_artifact(
        self,
        repo_id: RepositoryId,
        theme: str,
        artifact: Path,
        context: TargetContext,
    ) -> List[TargetAction]:
        raise NotImplementedError


__all__ = ["PathResolver", "TargetAction", "TargetAdapter", "TargetContext"]
