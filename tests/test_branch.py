"""Tests for branchver.branch — trimming, classification, prefix policy."""

import re

import pytest

from branchver.branch import (
    apply_branch_prefix,
    is_final,
    is_prerelease,
    matches_any,
    needs_prefix,
    normalize_branch,
    trim_git_references,
    trimmed_branch,
)
from branchver.errors import MissingBranchName
from branchver.settings import DEFAULT_PRE_RELEASE_FILTERS, VersionSettings


class TestTrimGitReferences:
    """refs/heads/, refs/tags/ and refs/remotes/ are removed anywhere."""

    @pytest.mark.parametrize("raw, expected", [
        ("refs/heads/master", "master"),
        ("refs/tags/v1.0", "v1.0"),
        ("refs/remotes/origin/dev", "origin/dev"),
        ("origin/refs/heads/x", "origin/x"),
        ("refs/heads/refs/tags/x", "x"),
        ("feature/refs", "feature/refs"),
    ])
    def test_strips_references(self, raw, expected):
        assert trim_git_references(raw) == expected


class TestNormalizeBranch:
    """Reference stripping then literal trim patterns, in order."""

    def test_none_raises(self):
        with pytest.raises(MissingBranchName):
            normalize_branch(None)

    def test_missing_branch_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_branch(None)

    def test_git_references_kept_when_disabled(self):
        assert normalize_branch("refs/heads/x", filter_git_references=False) \
            == "refs/heads/x"

    def test_trim_patterns_remove_every_occurrence(self):
        assert normalize_branch("a-x-a-y", trim_patterns=["a-"]) == "x-y"

    def test_trim_patterns_applied_in_order(self):
        """Each pattern sees the result of the previous one."""
        assert normalize_branch("acbx", trim_patterns=["ab", "c"]) == "abx"
        assert normalize_branch("acbx", trim_patterns=["c", "ab"]) == "x"

    def test_trim_patterns_are_literal(self):
        """Regex metacharacters in trim patterns match themselves."""
        assert normalize_branch("feature/x", trim_patterns=["feat.*/"]) == "feature/x"
        assert normalize_branch("a.*b", trim_patterns=[".*"]) == "ab"

    def test_trim_after_reference_stripping(self):
        branch = normalize_branch("refs/heads/feature/test_cake_version",
                                  trim_patterns=["feature/"])
        assert branch == "test_cake_version"

    def test_no_length_bound(self):
        long = "x" * 500
        assert normalize_branch(long) == long

    @pytest.mark.parametrize("raw", [
        "refs/heads/master",
        "refs/heads/feature/test_cake_version",
        "refs/tags/v2.0",
        "release/v10",
        "123",
    ])
    def test_idempotent(self, raw):
        once = normalize_branch(raw, trim_patterns=["feature/"])
        twice = normalize_branch(once, trim_patterns=["feature/"])
        assert once == twice

    def test_trimmed_branch_uses_settings(self):
        settings = VersionSettings(branch_name="refs/heads/feature/x",
                                   trim_patterns=["feature/"])
        assert trimmed_branch(settings) == "x"


class TestClassifier:
    """Final iff at least one filter matches (unanchored search)."""

    @pytest.mark.parametrize("branch", ["master", "release/v10", "release/"])
    def test_default_final_branches(self, branch):
        assert is_final(branch, DEFAULT_PRE_RELEASE_FILTERS)

    @pytest.mark.parametrize("branch", [
        "feature/master_cake", "master2", "releases/v1", "main", "",
    ])
    def test_default_prerelease_branches(self, branch):
        assert is_prerelease(branch, DEFAULT_PRE_RELEASE_FILTERS)

    def test_none_filters_never_final(self):
        assert is_final("master", None) is False

    def test_empty_filters_never_final(self):
        assert is_final("master", ()) is False

    def test_unanchored_match(self):
        assert matches_any("feature/master_cake", ["master"])
        assert not matches_any("feature/master_cake", ["^master"])

    def test_matches_any_none(self):
        assert matches_any("master", None) is False

    def test_bad_regex_propagates(self):
        with pytest.raises(re.error):
            is_final("master", ["("])


class TestBranchPrefix:
    """Prefix when there is no ASCII letter, or always if asked."""

    @pytest.mark.parametrize("branch, expected", [
        ("123", True),
        ("1.2-3", True),
        ("", True),
        ("ä1", True),
        ("1a", False),
        ("feature", False),
    ])
    def test_needs_prefix(self, branch, expected):
        assert needs_prefix(branch) is expected

    def test_prefix_applied_to_numeric(self):
        assert apply_branch_prefix("123", "b-") == "b-123"

    def test_prefix_skipped_for_letters(self):
        assert apply_branch_prefix("abc", "b-") == "abc"

    def test_prefix_always(self):
        assert apply_branch_prefix("abc", "b-", always=True) == "b-abc"
