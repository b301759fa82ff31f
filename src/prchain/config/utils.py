"""YAML layer helpers for config loading."""

from pathlib import Path
from typing import Optional

import yaml


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base. Dicts merge, lists/scalars replace."""
    merged = base.copy()
    for key, val in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(val, dict):
            merged[key] = deep_merge(merged[key], val)
        else:
            merged[key] = val
    return merged


def load_yaml(path: Path) -> Optional[dict]:
    """Read one config layer. None when missing, empty or not a mapping.

    Malformed YAML raises ValueError naming the file, so the CLI reports it as
    invalid configuration instead of a traceback.
    """
    if not path.is_file():
        return None
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"{path}: {e}") from e
    return data if isinstance(data, dict) else None
