"""Unit tests for the target command."""

from unittest.mock import patch

from typer.testing import CliRunner

from hubrowse.app import app
from hubrowse.commands.target import mask_token
from hubrowse.core.config import ConfigError
from hubrowse.core.models import ProjectInfo

runner = CliRunner()


class TestMaskToken:
    """Test token masking."""

    def test_long_token(self):
        assert mask_token("ghp_abcdef1234") == "**********1234"

    def test_short_token(self):
        assert mask_token("abc") == "***"

    def test_empty_token(self):
        assert mask_token("") == ""


class TestTargetCommand:
    """Test target command output."""

    @patch("hubrowse.commands.target.resolve_target")
    def test_shows_target(self, mock_resolve):
        mock_resolve.return_value = ProjectInfo(
            domain="github.com",
            project="acme/widgets",
            token="ghp_abcdef1234",
            current_branch="main",
        )

        result = runner.invoke(app, ["target"])

        assert result.exit_code == 0, result.output
        assert "github.com" in result.output
        assert "acme/widgets" in result.output
        assert "https://github.com/api/v4" in result.output
        assert "ghp_abcdef1234" not in result.output
        mock_resolve.assert_called_once_with(None, None)

    @patch("hubrowse.commands.target.resolve_target")
    def test_empty_target(self, mock_resolve):
        mock_resolve.return_value = ProjectInfo()

        result = runner.invoke(app, ["target"])

        assert result.exit_code == 0
        assert "api/v4" not in result.output

    @patch("hubrowse.commands.target.resolve_target")
    def test_config_error(self, mock_resolve):
        mock_resolve.side_effect = ConfigError("Profile not found for domain [work]")

        result = runner.invoke(app, ["target", "--profile", "work"])

        assert result.exit_code == 1
        assert "Profile not found" in result.output
