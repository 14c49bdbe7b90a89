"""Unit tests for GitClient with mocked subprocess calls."""

import subprocess
from unittest.mock import patch

import pytest

from hubrowse.core.git import GitClient, GitError, parse_remote_url
from hubrowse.core.models import RemoteInfo


def completed(stdout="", returncode=0, stderr=""):
    return subprocess.CompletedProcess(
        args=["git"], returncode=returncode, stdout=stdout, stderr=stderr
    )


class TestParseRemoteUrl:
    """Test remote URL parsing."""

    @pytest.mark.parametrize(
        "url",
        [
            "git@github.com:acme/widgets.git",
            "github.com:acme/widgets",
            "ssh://git@github.com/acme/widgets.git",
            "ssh://git@github.com:2222/acme/widgets",
            "https://github.com/acme/widgets.git",
            "https://user@github.com/acme/widgets/",
            "git://github.com/acme/widgets.git",
        ],
    )
    def test_supported_formats(self, url):
        assert parse_remote_url(url) == ("github.com", "acme/widgets")

    def test_domain_is_lowercased(self):
        assert parse_remote_url("https://GitHub.Example.com/a/b") == ("github.example.com", "a/b")

    def test_nested_groups_are_skipped(self):
        assert parse_remote_url("https://gitlab.example.com/group/sub/repo.git") is None

    @pytest.mark.parametrize("url", ["/srv/git/repo.git", "../other", "https://github.com/acme"])
    def test_unsupported_urls(self, url):
        assert parse_remote_url(url) is None


class TestRunGitCommand:
    """Test _run_git_command helper method."""

    @patch("subprocess.run")
    def test_command_with_repo_path(self, mock_run):
        mock_run.return_value = completed()

        GitClient(repo_path="/path/to/repo")._run_git_command(["git", "status"])

        mock_run.assert_called_once_with(
            ["git", "status"],
            cwd="/path/to/repo",
            capture_output=True,
            text=True,
            check=False,
        )

    @patch("subprocess.run")
    def test_failed_command_with_check(self, mock_run):
        mock_run.return_value = completed(returncode=1, stderr="fatal: bad")

        with pytest.raises(GitError) as exc_info:
            GitClient()._run_git_command(["git", "invalid"])

        assert "Git command failed" in str(exc_info.value)
        assert "fatal: bad" in str(exc_info.value)

    @patch("subprocess.run")
    def test_failed_command_without_check(self, mock_run):
        mock_run.return_value = completed(returncode=1)
        assert GitClient()._run_git_command(["git", "x"], check=False).returncode == 1

    @patch("subprocess.run")
    def test_git_not_found(self, mock_run):
        mock_run.side_effect = FileNotFoundError("git not found")

        with pytest.raises(GitError) as exc_info:
            GitClient()._run_git_command(["git", "status"])

        assert "Git executable not found" in str(exc_info.value)


class TestIsInsideWorkTree:
    """Test worktree detection."""

    @patch("subprocess.run")
    def test_inside(self, mock_run):
        mock_run.return_value = completed("true\n")
        assert GitClient().is_inside_work_tree() is True

    @patch("subprocess.run")
    def test_outside(self, mock_run):
        mock_run.return_value = completed(returncode=128, stderr="fatal: not a git repository")
        assert GitClient().is_inside_work_tree() is False

    @patch("subprocess.run")
    def test_inside_git_dir(self, mock_run):
        mock_run.return_value = completed("false\n")
        assert GitClient().is_inside_work_tree() is False


class TestListRemotes:
    """Test remote enumeration."""

    @patch("subprocess.run")
    def test_parses_fetch_entries(self, mock_run):
        mock_run.return_value = completed(
            "origin\tgit@github.com:acme/widgets.git (fetch)\n"
            "origin\tgit@github.com:acme/widgets.git (push)\n"
            "upstream\thttps://github.com/upstream/widgets.git (fetch)\n"
            "upstream\thttps://github.com/upstream/widgets.git (push)\n"
        )

        remotes = GitClient().list_remotes()

        assert remotes == [
            RemoteInfo("origin", "github.com", "acme/widgets"),
            RemoteInfo("upstream", "github.com", "upstream/widgets"),
        ]

    @patch("subprocess.run")
    def test_skips_local_path_remotes(self, mock_run):
        mock_run.return_value = completed(
            "local\t/srv/git/widgets.git (fetch)\n"
            "origin\thttps://git.example.com/acme/widgets (fetch)\n"
        )

        remotes = GitClient().list_remotes()

        assert remotes == [RemoteInfo("origin", "git.example.com", "acme/widgets")]

    @patch("subprocess.run")
    def test_skips_nested_group_remotes(self, mock_run):
        mock_run.return_value = completed(
            "mirror\thttps://gitlab.example.com/group/sub/widgets.git (fetch)\n"
            "origin\tgit@github.com:acme/widgets.git (fetch)\n"
        )

        remotes = GitClient().list_remotes()

        assert remotes == [RemoteInfo("origin", "github.com", "acme/widgets")]

    @patch("subprocess.run")
    def test_no_remotes(self, mock_run):
        mock_run.return_value = completed("")
        assert GitClient().list_remotes() == []

    @patch("subprocess.run")
    def test_failure_raises(self, mock_run):
        mock_run.return_value = completed(returncode=128, stderr="fatal")
        with pytest.raises(GitError):
            GitClient().list_remotes()


class TestCurrentUpstreamBranch:
    """Test branch discovery."""

    @patch("subprocess.run")
    def test_upstream_without_remote_prefix(self, mock_run):
        mock_run.side_effect = [
            completed("feature\n"),
            completed("origin/feature/login\n"),
            completed("origin\n"),
        ]
        assert GitClient().current_upstream_branch() == "feature/login"

    @patch("subprocess.run")
    def test_falls_back_to_local_branch(self, mock_run):
        mock_run.side_effect = [
            completed("topic\n"),
            completed(returncode=128, stderr="fatal: no upstream configured"),
        ]
        assert GitClient().current_upstream_branch() == "topic"

    @patch("subprocess.run")
    def test_detached_head_raises(self, mock_run):
        mock_run.return_value = completed("HEAD\n")
        with pytest.raises(GitError) as exc_info:
            GitClient().current_upstream_branch()
        assert "detached" in str(exc_info.value)

    @patch("subprocess.run")
    def test_unreadable_head_raises(self, mock_run):
        mock_run.return_value = completed(returncode=128, stderr="fatal: bad HEAD")
        with pytest.raises(GitError):
            GitClient().current_upstream_branch()
