import copy
import yaml
from pathlib import Path
from typing import Optional, Any

DEFAULT_CONFIG = {
    "nmstate": {
        "name": "nmstate",
    },
}


def get_default_config_path() -> Path:
    return Path.home() / ".config" / "certrotation" / "config.yml"


def deep_merge(source, destination):
    for key, value in source.items():
        if isinstance(value, dict):
            node = destination.setdefault(key, {})
            deep_merge(value, node)
        else:
            destination[key] = value
    return destination


def load_config(config_path: Optional[Path]) -> dict[str, Any]:
    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_path and config_path.exists():
        with open(config_path, "r") as f:
            user_config = yaml.safe_load(f)
        if user_config:
            config = deep_merge(user_config, config)
    return config
