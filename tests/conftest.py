"""Shared test fixtures for the branchver test suite."""

import json
import os
from unittest.mock import patch

import pytest

from branchver.lib.log_lib import channels as _channels_mod
from branchver.lib.log_lib import manager as _manager_mod


# ---------------------------------------------------------------------------
# Global state reset
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_output():
    """Give every test a fresh, default OutputManager and channel set.

    cli.main() installs the branchver channel set and a new singleton;
    this keeps that from leaking between tests.
    """
    saved_manager = _manager_mod._manager
    saved_channels = (
        _channels_mod.KNOWN_CHANNELS,
        _channels_mod.CHANNEL_DESCRIPTIONS,
        _channels_mod.OPT_IN_CHANNELS,
    )
    _manager_mod._manager = None
    yield
    _manager_mod._manager = saved_manager
    (_channels_mod.KNOWN_CHANNELS,
     _channels_mod.CHANNEL_DESCRIPTIONS,
     _channels_mod.OPT_IN_CHANNELS) = saved_channels


# ---------------------------------------------------------------------------
# Temporary directory fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.branchver/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path, tmp_config_home, monkeypatch):
    """A project directory used as cwd, with an isolated home."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def sample_project_config(tmp_project):
    """Write a .branchver.json file in the tmp project."""
    config = {
        "trim_patterns": ["feature/"],
        "pre_release_filters": ["^main$", "^release/"],
        "branch_prefix": "br-",
    }
    path = tmp_project / ".branchver.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path, config


@pytest.fixture
def sample_global_config(tmp_config_home):
    """Write a global config file in the tmp home."""
    config_dir = tmp_config_home / ".branchver"
    config_dir.mkdir()
    config = {
        "trim_patterns": ["users/"],
        "branch_prefix": "g-",
        "always-apply-branch-prefix": True,
    }
    path = config_dir / "config.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path, config
