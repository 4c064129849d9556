"""Configuration for wasend."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
