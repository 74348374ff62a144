"""Catalog and listing queries."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from base16_manager.domain.catalog import CATALOG
from base16_manager.domain.repository import RepositoryId
from base16_manager.domain.themes import ThemeLocator
from base16_manager.errors import NoThemeArtifactError
from base16_manager.ports.repository_store import RepositoryStore

THEME_ORDERS = ("asc", "desc", "random")


class CatalogService:
    def __init__(
        self,
        store: RepositoryStore,
        locator: ThemeLocator,
        catalog: Sequence[RepositoryId] = CATALOG,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._store = store
        self._locator = locator
        self._catalog = tuple(catalog)
        self._rng = rng or random.Random()

    def list_support(self) -> List[RepositoryId]:
        return list(self._catalog)

    def list_installed(self) -> List[RepositoryId]:
        return list(self._store.list_installed())

    def list_installable(self) -> List[RepositoryId]:
        installed = set(self._store.list_installed())
        return [entry for entry in self._catalog if entry not in installed]

    def list_themes(self, order: str = "asc") -> List[str]:
        if order not in THEME_ORDERS:
            raise ValueError(f"Unknown theme order '{order}', expected one of {', '.join(THEME_ORDERS)}")
        names = sorted(self._locator.themes(self._store.list_installed()))
        if order == "desc":
            names.reverse()
        elif order == "random":
            self._rng.shuffle(names)
        return names

    def random_theme(self) -> str:
        names = self.list_themes("random")
        if not names:
            raise NoThemeArtifactError()
        return names[0]


__all__ = ["CatalogService", "THEME_ORDERS"]
