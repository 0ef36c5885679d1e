"""Application configuration."""

from montyhall.config.settings import AppConfig, get_config, reset_config

__all__ = ["AppConfig", "get_config", "reset_config"]
