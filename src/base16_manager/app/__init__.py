"""Application services for base16-manager."""
