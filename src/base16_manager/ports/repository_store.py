"""Port definitions for template repository storage."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List

from base16_manager.domain.repository import RepositoryId


@dataclass
class UpdateReport:
    updated: List[RepositoryId] = field(default_factory=list)
    failed: List[tuple[RepositoryId, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class RepositoryStore(ABC):
    @abstractmethod
    def install(self, repo_id: RepositoryId) -> Path:
        """Clone ``repo_id`` and return its location."""

    @abstractmethod
    def uninstall(self, repo_id: RepositoryId) -> Path:
        """Remove the clone of ``repo_id``."""

    @abstractmethod
    def list_installed(self) -> Iterator[RepositoryId]:
        """Lazily enumerate installed repositories."""

    @abstractmethod
    def update_all(self) -> UpdateReport:
        """Hard-reset every clone to its remote default branch."""

    @abstractmethod
    def clean_empty(self) -> List[Path]:
        """Delete empty maintainer directories."""
