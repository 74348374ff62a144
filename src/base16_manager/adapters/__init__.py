"""Concrete implementations of the base16-manager ports."""
