"""Configuration package for bemkit."""

from .bem_config import BemConfig, configure_logging, get_config, reset_config

__all__ = [
    "BemConfig",
    "configure_logging",
    "get_config",
    "reset_config",
]
