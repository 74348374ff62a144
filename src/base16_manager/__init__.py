"""base16-manager: install base16 template repositories and apply themes."""

__version__ = "1.0.0"

__all__ = ["__version__"]
