"""Configuration management for lvlog.

Process-wide configuration is two values: the level threshold and the
colorize switch. Resolution order (highest priority wins):
  1. Explicit arguments, e.g. CLI flags (--level, --no-color)
  2. Environment (LVLOG_LEVEL, LVLOG_COLORIZE)
  3. Project config: .lvlog.json in the working directory or a parent
  4. Defaults (VERBOSE, colorize on)
"""

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path

from .levels import Level


PROJECT_CONFIG_NAME = ".lvlog.json"

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


@dataclass
class LoggerConfig:
    """Mutable process-wide logger configuration.

    Single writer at a time; changes apply to the very next call.
    """
    threshold: Level = Level.VERBOSE
    colorize: bool = True

    def copy(self):
        """Independent snapshot, suitable for a later restore."""
        return replace(self)


def parse_bool(value, name="value"):
    """Parse an on/off word. Raises ValueError for anything else."""
    if isinstance(value, bool):
        return value
    word = str(value).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"{name}: expected a boolean word, got {value!r}")


# ---------------------------------------------------------------------------
# Config file location and loading
# ---------------------------------------------------------------------------
def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .lvlog.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_json(path):
    """Load a JSON object from path, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_project_config(start_dir=None):
    """Load the nearest .lvlog.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(args=None, env=None, start_dir=None):
    """Build a LoggerConfig from args, environment and project file.

    Args:
        args: argparse namespace; reads ``level`` and ``no_color``
        env: mapping used instead of os.environ
        start_dir: where to start looking for .lvlog.json

    Raises:
        ValueError: for unknown level names or malformed boolean words
    """
    if env is None:
        env = os.environ
    project_cfg, _ = load_project_config(start_dir)

    config = LoggerConfig()

    # Layer 1: explicit arguments
    level = getattr(args, "level", None)
    # Layer 2: environment
    if level is None:
        level = env.get("LVLOG_LEVEL") or None
    # Layer 3: project file
    if level is None:
        level = project_cfg.get("level")
    if level is not None:
        config.threshold = Level.parse(level)

    if getattr(args, "no_color", False):
        config.colorize = False
    elif env.get("LVLOG_COLORIZE"):
        config.colorize = parse_bool(env["LVLOG_COLORIZE"], "LVLOG_COLORIZE")
    elif "colorize" in project_cfg:
        config.colorize = parse_bool(project_cfg["colorize"], "colorize")

    return config


def save_project_config(config, directory=None):
    """Write .lvlog.json for the given config into directory."""
    target = Path(directory or os.getcwd()) / PROJECT_CONFIG_NAME
    data = {"level": config.threshold.name, "colorize": config.colorize}
    with open(target, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return target
