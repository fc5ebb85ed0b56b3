"""Loading ~/.config/dotctl/config.yml and resolving dotctl paths."""

import copy
import os
from pathlib import Path

import yaml

DEFAULTS = {
    "dotfiles_dir": "~/dotfiles",
    "cache_dir": "~/.cache",
    "media": {
        "order_file": "media_play_order",
        "state_file": "media_current_state",
        "fallback": "last",
        "timeout": 5,
    },
    "monitors": {
        "profiles_dir": "~/.config/hypr/conf/monitors",
        "symlink": "~/.config/hypr/conf/monitor.conf",
        "state_file": "hypr_monitor_profile",
    },
    "theme": {
        "gtk_theme": "Adwaita-dark",
        "color_scheme": "prefer-dark",
    },
}


class ConfigError(Exception):
    """Raised when the config file cannot be parsed or holds invalid values."""


def default_config_path() -> Path:
    """Return $DOTCTL_CONFIG, else $XDG_CONFIG_HOME/dotctl/config.yml."""
    env = os.environ.get("DOTCTL_CONFIG", "")
    if env:
        return Path(env).expanduser()
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "dotctl" / "config.yml"


def _merge(base, override):
    """Deep-merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path=None):
    """Load config.yml merged over DEFAULTS.

    A missing file yields the defaults. DOTCTL_CACHE_DIR overrides cache_dir
    so tests and ad-hoc runs can redirect state without a config file.
    """
    p = Path(path).expanduser() if path else default_config_path()
    data = {}
    if p.is_file():
        try:
            with open(p) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"{p}: {e}") from None
        if not isinstance(data, dict):
            raise ConfigError(f"{p}: top level must be a mapping")

    config = _merge(DEFAULTS, data)
    for section, default in DEFAULTS.items():
        if isinstance(default, dict) and not isinstance(config[section], dict):
            raise ConfigError(f"{p}: {section} must be a mapping")

    # imported here: dotctl.media imports this module
    from dotctl.media.ledger import FALLBACKS

    media = config["media"]
    if media["fallback"] not in FALLBACKS:
        choices = " or ".join(repr(f) for f in FALLBACKS)
        raise ConfigError(f"{p}: media.fallback must be {choices}, got {media['fallback']!r}")
    try:
        media["timeout"] = float(media["timeout"])
    except (TypeError, ValueError):
        raise ConfigError(f"{p}: media.timeout must be a number, got {media['timeout']!r}") from None
    if media["timeout"] <= 0:
        raise ConfigError(f"{p}: media.timeout must be positive")

    cache_env = os.environ.get("DOTCTL_CACHE_DIR", "")
    if cache_env:
        config["cache_dir"] = cache_env
    return config


def expand(value) -> Path:
    """Expand ~ in a config path value."""
    return Path(str(value)).expanduser()


def cache_path(config, name) -> Path:
    """Resolve a cache file name against cache_dir (absolute names pass through)."""
    p = expand(name)
    if p.is_absolute():
        return p
    return expand(config["cache_dir"]) / p
