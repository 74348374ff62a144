"""Filesystem-backed template repository store."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Iterator, List

from base16_manager.domain.repository import RepositoryId
from base16_manager.errors import (
    InvalidRepositoryIdError,
    RepositoryExistsError,
    RepositoryNotFoundError,
    VersionControlError,
)
from base16_manager.ports.repository_store import RepositoryStore, UpdateReport
from base16_manager.ports.vcs import VersionControl
from base16_manager.settings import RuntimeSettings


class FSRepositoryStore(RepositoryStore):
    """Stores clones as ``<data_dir>/<maintainer>/<name>``."""

    def __init__(self, settings: RuntimeSettings, vcs: VersionControl) -> None:
        self._settings = settings
        self._base_dir = settings.data_dir
        self._vcs = vcs

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, repo_id: RepositoryId) -> Path:
        return repo_id.path_under(self._base_dir)

    def is_installed(self, repo_id: RepositoryId) -> bool:
        return self.path_for(repo_id).is_dir()

    def install(self, repo_id: RepositoryId) -> Path:
        destination = self.path_for(repo_id)
        if destination.is_dir() and any(destination.iterdir()):
            raise RepositoryExistsError(f"{repo_id} is already installed at {destination}")
        url = self._settings.remote_url(repo_id.maintainer, repo_id.name)
        if not self._vcs.remote_exists(url):
            raise RepositoryNotFoundError(f"Repository {repo_id} not found at {url}")
        self._vcs.clone(url, destination)
        return destination

    def uninstall(self, repo_id: RepositoryId) -> Path:
        destination = self.path_for(repo_id)
        if not destination.is_dir():
            raise RepositoryNotFoundError(f"{repo_id} is not installed")
        shutil.rmtree(destination)
        return destination

    def list_installed(self) -> Iterator[RepositoryId]:
        if not self._base_dir.is_dir():
            return
        for maintainer_dir in sorted(self._base_dir.iterdir()):
            if not maintainer_dir.is_dir():
                continue
            for repo_dir in sorted(maintainer_dir.iterdir()):
                if not repo_dir.is_dir():
                    continue
                try:
                    yield RepositoryId(maintainer_dir.name, repo_dir.name)
                except InvalidRepositoryIdError:
                    continue

    def update_all(self) -> UpdateReport:
        report = UpdateReport()
        for repo_id in self.list_installed():
            path = self.path_for(repo_id)
            try:
                branch = self._vcs.default_branch(path)
                self._vcs.pull_reset(path, branch)
            except VersionControlError as exc:
                report.failed.append((repo_id, str(exc)))
                continue
            report.updated.append(repo_id)
        return report

    def clean_empty(self) -> List[Path]:
        removed: List[Path] = []
        if not self._base_dir.is_dir():
            return removed
        for maintainer_dir in sorted(self._base_dir.iterdir()):
            if maintainer_dir.is_dir() and not any(maintainer_dir.iterdir()):
                maintainer_dir.rmdir()
                removed.append(maintainer_dir)
        return removed


__all__ = ["FSRepositoryStore"]
