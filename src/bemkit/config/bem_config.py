"""bemkit configuration with environment variable loading."""

import logging
import os
from typing import Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class BemConfig(BaseModel):
    """Configuration for BEM validation and class name parsing."""

    log_level: str = Field(
        default_factory=lambda: os.getenv("BEM_LOG_LEVEL", "WARNING").upper(),
        description="Level applied to the bemkit logger by configure_logging()",
    )
    default_frozen: bool = Field(
        default_factory=lambda: _env_flag("BEM_DEFAULT_FROZEN"),
        description="Freeze BEM bases on construction unless told otherwise",
    )
    strict_class_names: bool = Field(
        default_factory=lambda: _env_flag("BEM_STRICT_CLASS_NAMES"),
        description="Raise on non-BEM class names instead of skipping them",
    )


_config: Optional[BemConfig] = None


def get_config() -> BemConfig:
    """Get the process-wide config, creating it on first use."""
    global _config
    if _config is None:
        _config = BemConfig()
    return _config


def reset_config() -> None:
    """Drop the process-wide config so the next get_config() reloads it."""
    global _config
    _config = None


def configure_logging(config: Optional[BemConfig] = None) -> None:
    """Apply the configured log level to the ``bemkit`` logger."""
    config = config or get_config()
    logging.getLogger("bemkit").setLevel(config.log_level)
