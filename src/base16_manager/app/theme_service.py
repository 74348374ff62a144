"""Apply a theme to every installed template repository."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from base16_manager.app.catalog_service import CatalogService
from base16_manager.app.targets import TargetAction, TargetContext
from base16_manager.app.targets.registry import TargetRegistry
from base16_manager.domain.repository import RepositoryId
from base16_manager.errors import Base16ManagerError, NoPackagesInstalledError, UnsupportedPackageError
from base16_manager.ports.repository_store import RepositoryStore
from base16_manager.utils.telemetry import record_event

STATUS_OK = "ok"
STATUS_ERROR = "error"
STATUS_UNSUPPORTED = "unsupported"


@dataclass
class RepositoryOutcome:
    repository: RepositoryId
    status: str
    actions: List[TargetAction] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def message(self) -> str:
        return str(self.error) if self.error else ""


@dataclass
class ThemeReport:
    theme: str
    outcomes: List[RepositoryOutcome] = field(default_factory=list)

    def _by_status(self, status: str) -> List[RepositoryOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == status]

    @property
    def applied(self) -> List[RepositoryOutcome]:
        return self._by_status(STATUS_OK)

    @property
    def failed(self) -> List[RepositoryOutcome]:
        return self._by_status(STATUS_ERROR)

    @property
    def unsupported(self) -> List[RepositoryOutcome]:
        return self._by_status(STATUS_UNSUPPORTED)

    @property
    def ok(self) -> bool:
        return not self.failed and not self.unsupported


class ThemeService:
    """Resolves installed repositories against the adapter registry."""

    def __init__(
        self,
        store: RepositoryStore,
        registry: TargetRegistry,
        context: TargetContext,
        catalog: CatalogService,
    ) -> None:
        self._store = store
        self._registry = registry
        self._context = context
        self._catalog = catalog

    def set_theme(self, theme: str) -> ThemeReport:
        installed = list(self._store.list_installed())
        if not installed:
            raise NoPackagesInstalledError()
        report = ThemeReport(theme=theme)
        for repo_id in installed:
            outcome = self._apply_one(repo_id, theme)
            report.outcomes.append(outcome)
            record_event(
                self._context.settings,
                "set-theme",
                {"repository": str(repo_id), "theme": theme, "error": outcome.message},
                level="info" if outcome.status == STATUS_OK else "warn",
                status=outcome.status,
            )
        return report

    def set_random_theme(self) -> ThemeReport:
        return self.set_theme(self._catalog.random_theme())

    def _apply_one(self, repo_id: RepositoryId, theme: str) -> RepositoryOutcome:
        adapter = self._registry.get(str(repo_id))
        if adapter is None:
            return RepositoryOutcome(repo_id, STATUS_UNSUPPORTED, error=UnsupportedPackageError(str(repo_id)))
        try:
            actions = adapter.apply(repo_id, theme, self._context)
        except (Base16ManagerError, OSError) as exc:
            return RepositoryOutcome(repo_id, STATUS_ERROR, error=exc)
        return RepositoryOutcome(repo_id, STATUS_OK, actions=actions)


__all__ = ["RepositoryOutcome", "ThemeReport", "ThemeService"]
