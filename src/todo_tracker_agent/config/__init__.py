"""Configuration module."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
