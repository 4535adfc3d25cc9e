"""Configuration management for branchver.

Three-layer config resolution (highest priority wins):
  1. CLI flags given on the command line
  2. Project config: .branchver.json, found walking up from the project dir
  3. Global config: ~/.branchver/config.json (or the --config PATH file)

A CI job can commit its filters and trim patterns once in
.branchver.json and then call ``branchver semver2 1 2 0 --branch $BRANCH``.
"""

import json
import os
from pathlib import Path

from branchver.lib.log_lib import get_output


PROJECT_CONFIG_NAME = ".branchver.json"

# Keys that map 1:1 onto VersionSettings fields.
SETTINGS_KEYS = [
    "pre_release_filters",
    "trim_patterns",
    "branch_prefix",
    "always_apply_branch_prefix",
    "filter_git_references",
]


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.branchver/)."""
    return Path.home() / ".branchver"


def get_global_config_path(override=None):
    """Return path to the global config file (override wins if given)."""
    if override:
        return Path(override)
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .branchver.json.

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


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from path, returning {} on any read/parse problem."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, IsADirectoryError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config(path=None):
    """Load the global config file."""
    return load_json(get_global_config_path(path))


def load_project_config(start_dir=None):
    """Load the nearest .branchver.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


def _lookup(cfg, key):
    """Read key from a config dict accepting snake_case or kebab-case."""
    value = cfg.get(key)
    if value is None:
        value = cfg.get(key.replace("_", "-"))
    return value


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(args, keys=None):
    """Resolve config values using three-layer precedence.

    For each key in `keys`, checks (in order):
      1. CLI args (from argparse namespace)
      2. Project .branchver.json
      3. Global config

    A None at one layer falls through to the next. Returns a dict with
    every key present; unresolved keys map to None.
    """
    if keys is None:
        keys = SETTINGS_KEYS

    project_cfg, project_path = load_project_config(
        getattr(args, "project_dir", None)
    )
    global_cfg = load_global_config(getattr(args, "config", None))

    out = get_output()
    if project_path:
        out.emit(2, "  config: project {path}", channel='config', path=project_path)

    resolved = {}
    for key in keys:
        arg_key = key.replace("-", "_")

        cli_val = getattr(args, arg_key, None)
        if cli_val is not None:
            resolved[arg_key] = cli_val
            source = "cli"
        elif _lookup(project_cfg, arg_key) is not None:
            resolved[arg_key] = _lookup(project_cfg, arg_key)
            source = "project"
        elif _lookup(global_cfg, arg_key) is not None:
            resolved[arg_key] = _lookup(global_cfg, arg_key)
            source = "global"
        else:
            resolved[arg_key] = None
            source = "default"

        out.emit(3, "  config: {key} = {val!r} ({src})", channel='config',
                 key=arg_key, val=resolved[arg_key], src=source)

    return resolved


def build_settings(resolved, settings_cls, **extra):
    """Instantiate settings_cls from resolved config.

    Keys resolved to None keep the dataclass default. An empty
    pre_release_filters list is passed through as-is (never final).
    """
    kwargs = {k: v for k, v in resolved.items() if v is not None}
    kwargs.update(extra)
    return settings_cls(**kwargs)


# ---------------------------------------------------------------------------
# Config writing
# ---------------------------------------------------------------------------
def save_project_config(data, project_dir=None):
    """Write .branchver.json to the project directory."""
    target = Path(project_dir or os.getcwd()) / PROJECT_CONFIG_NAME
    with open(target, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return target


def save_global_config(data, path=None):
    """Write the global config file, creating its directory."""
    config_path = get_global_config_path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return config_path


def settings_from_args(args, settings_cls, **extra):
    """Resolve all settings layers for a command and build settings_cls.

    ``--no-filter`` on the command line beats any configured filters and
    turns final-branch detection off.
    """
    resolved = resolve_config(args)
    if getattr(args, "no_filter", False):
        extra["pre_release_filters"] = None
    return build_settings(resolved, settings_cls,
                          branch_name=getattr(args, "branch", None), **extra)


def explicit_settings(args):
    """Settings flags given on the command line, as config-file data."""
    data = {}
    for key in SETTINGS_KEYS:
        value = getattr(args, key, None)
        if value is not None:
            data[key] = value
    if getattr(args, "no_filter", False):
        # An empty filter list never matches: every branch is pre-release.
        data["pre_release_filters"] = []
    return data
