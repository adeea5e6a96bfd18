"""Tests for prnote.message.template module."""

from prnote.git import CommitEntry
from prnote.message import (
    find_pr_template,
    format_buffer,
    generate_template,
    load_pr_template,
    render_commit,
    render_history,
    scissors_marker,
)


class TestRenderCommit:
    """Tests for render_commit function."""

    def test_header_and_indented_subject(self, sample_commits):
        """Test the header line and the 3-column indent."""
        rendered = render_commit(sample_commits[1])

        assert rendered == "5d6e7f8 (John Roe, 3 days ago)\n   Extract upload client"

    def test_body_separated_by_blank_line(self, sample_commits):
        """Test that the body follows the subject after a blank line."""
        lines = render_commit(sample_commits[0]).split("\n")

        assert lines[0] == "1a2b3c4 (Jane Doe, 2 days ago)"
        assert lines[1] == "   Add retry support to the uploader"
        assert lines[2] == ""
        assert lines[3] == "   Uploads are retried three times before giving up."

    def test_wraps_to_78_columns(self):
        """Test that long lines are wrapped with the indent kept."""
        entry = CommitEntry(
            short_hash="abc1234",
            author="A",
            relative_date="now",
            subject="word " * 40,
        )
        lines = render_commit(entry).split("\n")[1:]

        assert len(lines) > 1
        assert all(len(line) <= 78 for line in lines)
        assert all(line.startswith("   word") for line in lines)

    def test_keeps_body_indentation(self):
        """Test that indented body lines keep their own indent."""
        entry = CommitEntry("abc1234", "A", "now", "Subject", "- item\n  continued")
        lines = render_commit(entry).split("\n")

        assert lines[-2] == "   - item"
        assert lines[-1] == "     continued"


class TestRenderHistory:
    """Tests for render_history function."""

    def test_entries_separated_by_blank_line(self, sample_commits):
        """Test that entries are joined with a blank line."""
        history = render_history(sample_commits)

        assert "giving up.\n\n5d6e7f8 (John Roe" in history

    def test_no_commits(self):
        """Test the placeholder for an empty range."""
        assert render_history([]) == "   (no commits)"


class TestGenerateTemplate:
    """Tests for generate_template function."""

    def test_section_order(self, sample_commits):
        """Test the layout of the generated section."""
        text = generate_template("main", "topic", commits=sample_commits)
        lines = text.split("\n")

        assert lines[0] == scissors_marker("#")
        assert lines[1] == "# Do not modify or remove the line above."
        assert lines[2] == "# Everything below it will be ignored."
        assert lines[3] == ""
        assert lines[4] == "Requesting a pull to main from topic"
        assert lines[5] == ""
        assert lines[6].startswith("Write a message for this pull request.")
        assert lines[7].startswith("of text is the title")
        assert lines[8] == ""
        assert lines[9] == "Changes:"
        assert lines[10] == ""
        assert lines[11] == "1a2b3c4 (Jane Doe, 2 days ago)"
        assert text.endswith("   Extract upload client\n")

    def test_prepend_is_verbatim_prefix(self):
        """Test that prepended text comes first, unchanged."""
        text = generate_template("main", "topic", prepend="My PR\n\nDescription", commits=[])

        assert text.startswith("My PR\n\nDescription\n" + scissors_marker("#") + "\n")

    def test_custom_comment_char(self):
        """Test that marker and help lines use the comment character."""
        text = generate_template("main", "topic", comment_char=";", commits=[])

        assert text.startswith(scissors_marker(";") + "\n; Do not modify")

    def test_everything_generated_is_ignored(self, sample_commits):
        """Test that the generated section formats to nothing."""
        text = "\n\n" + generate_template("main", "topic", commits=sample_commits)
        assert format_buffer(text) == ""

    def test_looks_up_commits_when_not_given(self, mocker, sample_commits):
        """Test that the commit range is fetched from git by default."""
        mock_range = mocker.patch(
            "prnote.message.template.get_commit_range", return_value=sample_commits
        )

        text = generate_template("main", "topic")

        mock_range.assert_called_once_with("main", "topic")
        assert "1a2b3c4 (Jane Doe, 2 days ago)" in text


class TestPullRequestTemplate:
    """Tests for find_pr_template and load_pr_template functions."""

    def test_no_template(self, mock_repo_root):
        """Test that a repo without a template gives an empty string."""
        assert find_pr_template(mock_repo_root) is None
        assert load_pr_template(mock_repo_root) == ""

    def test_github_directory_template(self, mock_repo_root):
        """Test loading .github/PULL_REQUEST_TEMPLATE.md."""
        github_dir = mock_repo_root / ".github"
        github_dir.mkdir()
        (github_dir / "PULL_REQUEST_TEMPLATE.md").write_text("## Summary\n\n## Testing\n\n\n")

        assert load_pr_template(mock_repo_root) == "## Summary\n\n## Testing"

    def test_lookup_order(self, mock_repo_root):
        """Test that .github/ wins over the repository root."""
        (mock_repo_root / "PULL_REQUEST_TEMPLATE.md").write_text("root")
        github_dir = mock_repo_root / ".github"
        github_dir.mkdir()
        (github_dir / "pull_request_template.md").write_text("github")

        assert find_pr_template(mock_repo_root).read_text() == "github"

    def test_docs_template(self, mock_repo_root):
        """Test the docs/ location."""
        docs_dir = mock_repo_root / "docs"
        docs_dir.mkdir()
        (docs_dir / "PULL_REQUEST_TEMPLATE.md").write_text("docs")

        assert load_pr_template(mock_repo_root) == "docs"
