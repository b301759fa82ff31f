"""Configuration loading."""

from prchain.config.settings import (
    get_config,
    get_config_loaded_sources,
    load_config,
    project_config_path,
)

__all__ = [
    "load_config",
    "get_config",
    "get_config_loaded_sources",
    "project_config_path",
]
