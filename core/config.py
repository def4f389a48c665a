import os
import json
import logging

from xdg.BaseDirectory import xdg_config_home

from core.exceptions import ConfigError

CONFIG_DIR = os.path.join(xdg_config_home, "wswitch")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")

DEFAULTS = {
    "poll_interval_ms": 1000,
    "i3_msg_timeout": 5,
    "log_level": "WARNING",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config(path=CONFIG_FILE):
    if not os.path.exists(path):
        return {}
    try:
        with open(path, 'r') as f:
            return json.load(f)
    except json.JSONDecodeError:
        logging.getLogger("wswitch.config").warning(f"Ignoring malformed config file {path}")
        return {}


def save_config(config, path=CONFIG_FILE):
    config_dir = os.path.dirname(path)
    if not os.path.exists(config_dir):
        os.makedirs(config_dir)
    with open(path, 'w') as f:
        json.dump(config, f, indent=4)


def get_settings(path=CONFIG_FILE):
    """Return the configured settings merged over DEFAULTS, validated."""
    settings = dict(DEFAULTS)
    settings.update(load_config(path))

    for key in ("poll_interval_ms", "i3_msg_timeout"):
        value = settings[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigError(f"'{key}' must be a positive number, got {value!r}")

    level = str(settings["log_level"]).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(
            f"Invalid log level '{settings['log_level']}'. "
            f"Must be one of: {', '.join(LOG_LEVELS)}"
        )
    settings["log_level"] = level

    return settings
