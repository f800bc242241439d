import copy
import os

import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "family_tree.yml"
CONFIG_ENV_VAR = "FAMILY_TREE_CONFIG"

# Used when no config file is present, e.g. after a regular (non-editable)
# install where config/family_tree.yml is not shipped.
DEFAULT_CONFIG = {
    "debug": False,
    "paths": {"logs_dir": "logs"},
    "logging": {
        "level": "INFO",
        "file": "family_tree.log",
        "rotate": False,
        "console_level": "WARNING",
    },
    "render": {"no_grandparent_label": "No Grandparent"},
}


class FTConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.logging = data.get("logging", {})
        self.render = data.get("render", {})
        self.debug = data.get("debug", False)

    @property
    def no_grandparent_label(self) -> str:
        return self.render.get("no_grandparent_label", "No Grandparent")


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config() -> 'FTConfig':
    """
    Read the YAML config.

    An explicit FAMILY_TREE_CONFIG path must exist; without one, a missing
    project config file falls back to DEFAULT_CONFIG.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    path = config_path()
    if not path.exists():
        if override:
            raise FileNotFoundError(f"Config file not found: {path}")
        return FTConfig(copy.deepcopy(DEFAULT_CONFIG))

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FTConfig(data)

_config_cache = None

def get_config() -> 'FTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the file."""
    global _config_cache
    _config_cache = None
