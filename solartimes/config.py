"""Loading of the almanac configuration."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .models import AlmanacConfig

LOGGER = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SOLARTIMES_CONFIG"


class ConfigError(RuntimeError):
    """Raised when the almanac configuration cannot be loaded."""


def load_almanac_config(path: Optional[Union[str, Path]] = None) -> AlmanacConfig:
    """Return the almanac configuration.

    The JSON file at *path* is read, falling back to the file named by
    ``SOLARTIMES_CONFIG``; with neither, the Nautical Almanac latitudes are used.
    """

    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return AlmanacConfig()

    config_path = Path(path).expanduser()
    if not config_path.is_file():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        payload = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Failed to read configuration '{config_path}': {exc}") from exc

    try:
        config = AlmanacConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration '{config_path}': {exc}") from exc

    LOGGER.info(
        json.dumps(
            {
                "event": "config_loaded",
                "path": str(config_path),
                "latitudes": len(config.latitudes),
            }
        )
    )
    return config
