"""Port definitions for the version-control client."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class VersionControl(ABC):
    @abstractmethod
    def remote_exists(self, url: str) -> bool:
        """Return whether a repository is reachable at ``url``."""

    @abstractmethod
    def clone(self, url: str, destination: Path) -> None:
        """Clone ``url`` into ``destination``."""

    @abstractmethod
    def default_branch(self, repo_path: Path) -> str:
        """Name of the remote default branch for a clone."""

    @abstractmethod
    def pull_reset(self, repo_path: Path, branch: str) -> None:
        """Fetch ``branch`` and hard-reset the clone to the remote tip."""
