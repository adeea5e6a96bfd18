"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from prnote.git import CommitEntry
from prnote.global_config import GlobalConfig
from prnote.message import scissors_marker
from prnote.settings import Settings


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    # Create .git directory to simulate a git repo
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def settings(mock_repo_root):
    """Settings pointing at the mock repository."""
    git_dir = mock_repo_root / ".git"
    return Settings(
        prog_name="prnote",
        version="0.0.0-dev",
        repo_root=mock_repo_root,
        git_dir=git_dir,
        buffer_file=git_dir / "PULLREQ_EDITMSG",
        user_config=GlobalConfig(),
    )


@pytest.fixture
def marker():
    """Scissors marker for the default comment character."""
    return scissors_marker("#")


@pytest.fixture
def sample_commits():
    """Two commits as returned by get_commit_range."""
    return [
        CommitEntry(
            short_hash="1a2b3c4",
            author="Jane Doe",
            relative_date="2 days ago",
            subject="Add retry support to the uploader",
            body="Uploads are retried three times before giving up.",
        ),
        CommitEntry(
            short_hash="5d6e7f8",
            author="John Roe",
            relative_date="3 days ago",
            subject="Extract upload client",
        ),
    ]

