"""Tests for branchver.hints — domain-specific hints."""

import io

import pytest

from branchver.lib.log_lib import OutputManager, get_hint


@pytest.fixture(autouse=True)
def _import_hints():
    """Ensure branchver hints are registered."""
    import branchver.hints  # noqa: F401


@pytest.mark.parametrize("hint_id, category", [
    ('suffix.truncated', 'suffix'),
    ('branch.final', 'branch'),
    ('semver2.change_number', 'semver2'),
    ('filters.anchored', 'config'),
    ('config.remember', 'config'),
])
def test_hint_registered(hint_id, category):
    h = get_hint(hint_id)
    assert h is not None, f"Hint '{hint_id}' not registered"
    assert h.category == category


def test_truncated_shows_by_default():
    buf = io.StringIO()
    OutputManager(verbosity=0, file=buf).hint('suffix.truncated', 'result', limit=20)
    assert "20 characters" in buf.getvalue()


def test_truncated_hidden_when_quiet():
    buf = io.StringIO()
    OutputManager(verbosity=-1, file=buf).hint('suffix.truncated', 'result', limit=20)
    assert buf.getvalue() == ""


def test_final_branch_needs_verbose():
    buf = io.StringIO()
    OutputManager(verbosity=0, file=buf).hint('branch.final', 'verbose', branch='master')
    assert buf.getvalue() == ""
    OutputManager(verbosity=1, file=buf).hint('branch.final', 'verbose', branch='master')
    assert "'master' is a final branch" in buf.getvalue()
