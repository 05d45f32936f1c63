"""Application-wide settings."""

from bizpath.config.settings import Settings

__all__ = ["Settings"]
