"""Configuration module for managing environment variables and settings."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
