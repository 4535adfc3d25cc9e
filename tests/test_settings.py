"""Tests for branchver.settings — defaults, immutability, conversion."""

import dataclasses

import pytest

from branchver.settings import (
    DEFAULT_BRANCH_PREFIX,
    DEFAULT_PRE_RELEASE_FILTERS,
    VersionSettings,
    VersionSettingsSemVer2,
)


def test_defaults():
    settings = VersionSettings(branch_name="x")
    assert settings.pre_release_filters == ("^master$", "^release/")
    assert settings.filter_git_references is True
    assert settings.trim_patterns is None
    assert settings.branch_prefix == DEFAULT_BRANCH_PREFIX == "b-"
    assert settings.always_apply_branch_prefix is False


def test_semver2_defaults():
    settings = VersionSettingsSemVer2(branch_name="x")
    assert settings.pre_release_filters == DEFAULT_PRE_RELEASE_FILTERS
    assert settings.hash is None
    assert settings.branch_change_number is None


def test_frozen():
    settings = VersionSettings(branch_name="x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.branch_name = "y"


def test_lists_become_tuples():
    """Callers' lists can't change a settings object after the fact."""
    trims = ["feature/"]
    settings = VersionSettings(branch_name="x", trim_patterns=trims)
    trims.append("bugfix/")
    assert settings.trim_patterns == ("feature/",)


def test_single_string_filter():
    settings = VersionSettings(branch_name="x", pre_release_filters="^main$")
    assert settings.pre_release_filters == ("^main$",)


def test_none_filters_kept():
    assert VersionSettings(branch_name="x", pre_release_filters=None) \
        .pre_release_filters is None


def test_from_settings():
    base = VersionSettings(branch_name="dev", trim_patterns=["x"],
                           branch_prefix="p-", always_apply_branch_prefix=True)
    ext = VersionSettingsSemVer2.from_settings(base, hash="ab",
                                               branch_change_number=3)
    assert ext.branch_name == "dev"
    assert ext.trim_patterns == ("x",)
    assert ext.branch_prefix == "p-"
    assert ext.always_apply_branch_prefix is True
    assert ext.hash == "ab"
    assert ext.branch_change_number == 3


def test_base_drops_semver2_fields():
    ext = VersionSettingsSemVer2(branch_name="dev", hash="ab", branch_change_number=3)
    base = ext.base()
    assert isinstance(base, VersionSettings)
    assert base == VersionSettings(branch_name="dev")


def test_not_a_subclass():
    assert not issubclass(VersionSettingsSemVer2, VersionSettings)
