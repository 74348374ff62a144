"""Domain model for template repositories and themes."""

from .catalog import CATALOG
from .repository import RepositoryId
from .themes import ThemeLocator

__all__ = ["CATALOG", "RepositoryId", "ThemeLocator"]
