"""Configuration management."""
import os
import yaml
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "default_config.yaml"


def load_config(path=None):
    """Load config from YAML, merging defaults with optional overrides."""
    with open(_DEFAULT_CONFIG) as f:
        config = yaml.safe_load(f)

    if path and Path(path).exists():
        with open(path) as f:
            overrides = yaml.safe_load(f) or {}
        config = _deep_merge(config, overrides)

    # Environment variable overrides
    env_map = {
        "HASHCALC_SLEEP_TIME": (("calculator", "sleep_time"), float),
        "HASHCALC_USER_AGENT": (("whattomine", "user_agent"), str),
        "HASHCALC_LOG_LEVEL": (("logging", "level"), str),
    }
    for env_key, (config_path, convert) in env_map.items():
        val = os.environ.get(env_key)
        if val:
            d = config
            for k in config_path[:-1]:
                d = d.setdefault(k, {})
            try:
                d[config_path[-1]] = convert(val)
            except ValueError:
                raise ValueError(f"{env_key} must be a number, got {val!r}") from None

    _validate_config(config)
    return config


def _deep_merge(base, override):
    """Recursively merge override into base dict."""
    result = base.copy()
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _validate_config(config):
    """Basic config validation."""
    required_sections = ["nicehash", "whattomine", "calculator", "logging"]
    for section in required_sections:
        if section not in config:
            raise ValueError(f"Missing required config section: {section}")

    sleep_time = config["calculator"].get("sleep_time", 0)
    if not isinstance(sleep_time, (int, float)) or sleep_time < 0:
        raise ValueError("sleep_time must be a number >= 0")
