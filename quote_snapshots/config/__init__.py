"""Configuration package for the quote snapshot collector."""

from .settings import CollectorSettings, get_settings

__all__ = ["CollectorSettings", "get_settings"]
