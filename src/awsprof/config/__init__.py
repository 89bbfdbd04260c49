"""Configuration management."""

from .manager import ConfigManager
from ..models.config import Config

__all__ = ["Config", "ConfigManager"]
