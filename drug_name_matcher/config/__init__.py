"""Configuration management for the drug name matcher."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
