"""Dashboard configuration loader."""

import yaml
import jsonschema
from dataclasses import dataclass, field
from pathlib import Path

_CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "dashboard": {
            "type": "object",
            "properties": {
                "title": {"type": "boolean"},
                "default_title": {"type": "string"},
                "refresh_rate": {"type": "number", "exclusiveMinimum": 0},
            },
            "additionalProperties": False,
        },
        "keys": {
            "type": "object",
            "properties": {
                name: {"type": "string", "minLength": 1}
                for name in ("next_view", "prev_view", "toggle_overlay", "quit")
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}


class ConfigError(Exception):
    """Raised when a config file cannot be parsed or fails validation."""


@dataclass
class KeyBindings:
    next_view: str = "]"
    prev_view: str = "["
    toggle_overlay: str = "a"
    quit: str = "q"


@dataclass
class DashboardConfig:
    title: bool = True  # keep the terminal title in sync with the score
    default_title: str = "dugout"  # restored when the dashboard closes
    refresh_rate: float = 0.5
    keys: KeyBindings = field(default_factory=KeyBindings)


def default_config() -> DashboardConfig:
    return DashboardConfig()


def load_config(path: Path) -> DashboardConfig:
    """Load dashboard config from YAML file."""
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e

    try:
        jsonschema.validate(raw, _CONFIG_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ConfigError(f"{path}: {e.message}") from e

    d = raw.get("dashboard", {})
    k = raw.get("keys", {})
    defaults = KeyBindings()

    keys = KeyBindings(
        next_view=k.get("next_view", defaults.next_view),
        prev_view=k.get("prev_view", defaults.prev_view),
        toggle_overlay=k.get("toggle_overlay", defaults.toggle_overlay),
        quit=k.get("quit", defaults.quit),
    )
    bound = [keys.next_view, keys.prev_view, keys.toggle_overlay, keys.quit]
    if len(set(bound)) != len(bound):
        raise ConfigError(f"{path}: key bindings must be distinct, got {bound}")

    return DashboardConfig(
        title=d.get("title", True),
        default_title=d.get("default_title", "dugout"),
        refresh_rate=d.get("refresh_rate", 0.5),
        keys=keys,
    )
