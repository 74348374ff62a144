"""Locate theme artifacts inside template repository clones.

Template repositories do not share a layout: ``base16-shell`` keeps its
scripts in ``scripts/``, ``base16-qutebrowser`` nests them one level deeper
(``themes/default/``). Artifacts are therefore searched one and two levels
below the clone root, matching ``base16-<theme>.<ext>``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from base16_manager.errors import ThemeNotFoundError

from .repository import RepositoryId

ARTIFACT_PREFIX = "base16-"
_SEARCH_PATTERNS = ("*/{name}", "*/*/{name}")
_IGNORED_DIRS = {".git"}


def theme_name_from_artifact(path: Path) -> Optional[str]:
    """Return the theme segment of ``base16-<theme>.<ext>`` or ``None``."""

    name = path.name
    if not name.startswith(ARTIFACT_PREFIX):
        return None
    stem = name[len(ARTIFACT_PREFIX):]
    theme, dot, _ = stem.partition(".")
    if not theme or not dot:
        return None
    return theme


def iter_artifacts(repo_root: Path, pattern: str = f"{ARTIFACT_PREFIX}*") -> Iterator[Path]:
    """Yield artifact files below ``repo_root`` in a stable, sorted order."""

    if not repo_root.is_dir():
        return
    found: List[Path] = []
    for template in _SEARCH_PATTERNS:
        for candidate in repo_root.glob(template.format(name=pattern)):
            relative = candidate.relative_to(repo_root)
            if relative.parts[0] in _IGNORED_DIRS:
                continue
            if candidate.is_file():
                found.append(candidate)
    yield from sorted(found)


class ThemeLocator:
    """Find the artifact for one theme inside an installed repository."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    def repository_root(self, repo_id: RepositoryId) -> Path:
        return repo_id.path_under(self._data_dir)

    def candidates(self, repo_id: RepositoryId, theme: str, suffix: str | None = None) -> List[Path]:
        matches = []
        for artifact in iter_artifacts(self.repository_root(repo_id), f"{ARTIFACT_PREFIX}{theme}.*"):
            if suffix and not artifact.name.endswith(suffix):
                continue
            matches.append(artifact)
        return matches

    def locate(self, repo_id: RepositoryId, theme: str, suffix: str | None = None) -> Path:
        # Several matches without a suffix filter: first in sorted path order wins.
        matches = self.candidates(repo_id, theme, suffix)
        if not matches:
            raise ThemeNotFoundError(str(repo_id), theme)
        return matches[0]

    def themes(self, repo_ids: Iterable[RepositoryId]) -> set[str]:
        names: set[str] = set()
        for repo_id in repo_ids:
            for artifact in iter_artifacts(self.repository_root(repo_id)):
                theme = theme_name_from_artifact(artifact)
                if theme:
                    names.add(theme)
        return names


__all__ = ["ARTIFACT_PREFIX", "ThemeLocator", "iter_artifacts", "theme_name_from_artifact"]
