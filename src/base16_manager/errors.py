"""Error hierarchy shared by every base16-manager component."""

from __future__ import annotations


class Base16ManagerError(RuntimeError):
    """Base class for user-facing failures."""


class ConfigError(Base16ManagerError):
    pass


class InvalidRepositoryIdError(Base16ManagerError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid repository identifier '{raw}', expected maintainer/name")


class RepositoryNotFoundError(Base16ManagerError):
    """Raised when a remote repository or a local clone is absent."""


class RepositoryExistsError(Base16ManagerError):
    pass


class ThemeNotFoundError(Base16ManagerError):
    def __init__(self, repository: str, theme: str) -> None:
        self.repository = repository
        self.theme = theme
        super().__init__(f"Theme '{theme}' not found in {repository}")


class UnsupportedPackageError(Base16ManagerError):
    def __init__(self, repository: str) -> None:
        self.repository = repository
        super().__init__(f"Package {repository} is not supported")


class UnsupportedOSError(Base16ManagerError):
    def __init__(self, system: str) -> None:
        self.system = system
        super().__init__(f"Unsupported operating system '{system}'")


class NoPackagesInstalledError(Base16ManagerError):
    def __init__(self) -> None:
        super().__init__("No packages installed")


class NoThemeArtifactError(Base16ManagerError):
    def __init__(self) -> None:
        super().__init__("No themes found in installed packages")


class VersionControlError(Base16ManagerError):
    pass


__all__ = [
    "Base16ManagerError",
    "ConfigError",
    "InvalidRepositoryIdError",
    "NoPackagesInstalledError",
    "NoThemeArtifactError",
    "RepositoryExistsError",
    "RepositoryNotFoundError",
    "ThemeNotFoundError",
    "UnsupportedOSError",
    "UnsupportedPackageError",
    "VersionControlError",
]
