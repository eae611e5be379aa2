import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_ENV = "NPSEARCH_CONFIG"
CONFIG_PATH = Path.home() / ".config" / "npsearch" / "config.json"

DEFAULTS = {
    "api_url": "https://api.npms.io/v2/search",
    "registry_url": "https://www.npmjs.com/package/{name}",
    "sandbox_url": "https://runkit.com/npm/{name}",
    "delimiter": "+",
    "timeout": None,
    "npm": None,
}


def config_path(path=None):
    if path:
        return Path(path).expanduser()
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env).expanduser()
    return CONFIG_PATH


def read_config(path):
    try:
        data = json.loads(path.read_text())
    except Exception as e:
        logger.debug(f"Ignoring config {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.debug(f"Ignoring config {path}: top level is not an object")
        return {}
    return data


def load_config(path=None):
    """
    Return DEFAULTS overlaid with the known keys of the JSON config file.
    A missing or broken file yields the defaults.
    """
    path = config_path(path)
    data = read_config(path) if path.exists() else {}
    config = dict(DEFAULTS)
    for key, value in data.items():
        if key in DEFAULTS:
            config[key] = value
        else:
            logger.debug(f"Unknown config key {key!r} in {path}")
    return config
