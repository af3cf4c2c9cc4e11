"""Tests for the main CLI module.

These tests drive the gosearch command end to end with the search client and
the Go toolchain replaced by mocks.
"""

from unittest.mock import ANY, MagicMock, patch

import pytest
from typer.testing import CliRunner

from gosearch.cli.main import _get_console, app, main
from gosearch.errors import InstallFailed, SearchUnavailable, ToolNotFound
from gosearch.search.types import SearchResponse

runner = CliRunner()


class TestGetConsole:
    """Tests for the _get_console helper function."""

    def test_get_console_stdout(self):
        """Test creating a stdout console."""
        console = _get_console(use_stderr=False)
        assert not console.stderr

    def test_get_console_stderr(self):
        """Test creating a stderr console."""
        console = _get_console(use_stderr=True)
        assert console.stderr


class TestSearchCommand:
    """Tests for the search command."""

    @pytest.fixture
    def mock_api_client(self, sample_hits):
        """Create a mock API client returning the sample hits."""
        client = MagicMock()
        client.search.return_value = SearchResponse(query="yaml", results=sample_hits)
        return client

    @pytest.fixture
    def patched(self, mock_api_client):
        """Patch the search client, installed check, and installer."""
        with (
            patch("gosearch.cli.main.ApiClient", return_value=mock_api_client),
            patch("gosearch.cli.main.is_installed", return_value=False) as installed,
            patch("gosearch.cli.main.install_package") as install,
        ):
            yield {"client": mock_api_client, "installed": installed, "install": install}

    def test_missing_query_is_usage_error(self, patched):
        """Test that running without a search term exits with status 1."""
        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Must provide search term" in result.output
        assert "Usage" in result.output
        patched["client"].search.assert_not_called()

    def test_blank_query_is_usage_error(self, patched):
        """Test that a whitespace-only search term is rejected."""
        result = runner.invoke(app, ["   "])

        assert result.exit_code == 1
        patched["client"].search.assert_not_called()

    def test_declined_selection_exits_zero(self, patched):
        """Test that non-numeric input ends the run without installing."""
        result = runner.invoke(app, ["yaml"], input="abc\n")

        assert result.exit_code == 0
        assert "github.com/b/yaml" in result.output
        assert "Install Package #:" in result.output
        patched["client"].search.assert_called_once_with("yaml")
        patched["install"].assert_not_called()

    def test_selection_installs_ranked_entry(self, patched):
        """Test that the selected row number maps onto the ranked order."""
        result = runner.invoke(app, ["yaml"], input="2\n")

        assert result.exit_code == 0
        patched["install"].assert_called_once_with(
            "github.com/a/yaml", None, ANY, ANY
        )

    def test_out_of_range_reprompts(self, patched):
        """Test that an out-of-range selection is reported before retrying."""
        result = runner.invoke(app, ["yaml"], input="5\n1\n")

        assert result.exit_code == 0
        assert "No entry for 5" in result.output
        patched["install"].assert_called_once_with(
            "github.com/b/yaml", None, ANY, ANY
        )

    def test_get_flags_passed_through(self, patched):
        """Test that --get-flag values reach the installer."""
        result = runner.invoke(
            app, ["--get-flag=-d", "--get-flag=-t", "yaml"], input="1\n"
        )

        assert result.exit_code == 0
        patched["install"].assert_called_once_with(
            "github.com/b/yaml", ["-d", "-t"], ANY, ANY
        )

    def test_forks_flag(self, patched):
        """Test that --forks keeps forked libraries."""
        result = runner.invoke(app, ["--forks", "yaml"], input="\n")

        assert result.exit_code == 0
        assert "github.com/c/yaml" in result.output

    def test_apps_flag(self, patched):
        """Test that --apps lists main packages instead of libraries."""
        result = runner.invoke(app, ["--apps", "--forks", "yaml"], input="\n")

        assert result.exit_code == 0
        assert "github.com/d/yamlcli" in result.output
        assert "github.com/b/yaml" not in result.output

    def test_limit_option(self, patched):
        """Test that --limit caps the number of rows."""
        result = runner.invoke(app, ["--limit", "1", "yaml"], input="2\n\n")

        assert result.exit_code == 0
        assert "github.com/b/yaml" in result.output
        assert "github.com/a/yaml" not in result.output
        assert "No entry for 2" in result.output

    def test_thresholds_filter_everything(self, patched):
        """Test that unmet thresholds lead to no matches and exit 1."""
        result = runner.invoke(app, ["--minimports", "1000", "yaml"])

        assert result.exit_code == 1
        assert "No matches." in result.output
        assert "Install Package #:" not in result.output
        patched["install"].assert_not_called()

    def test_no_inpath(self, patched, mock_api_client, make_hit):
        """Test that --no-inpath keeps hits whose path lacks the query."""
        mock_api_client.search.return_value = SearchResponse(
            query="yaml", results=[make_hit("github.com/x/parser", name="parser")]
        )

        result = runner.invoke(app, ["--no-inpath", "yaml"], input="\n")

        assert result.exit_code == 0
        assert "github.com/x/parser" in result.output

    def test_installed_marks_entries(self, patched):
        """Test that --installed runs the check and prints the legend."""
        patched["installed"].side_effect = lambda path: path == "github.com/a/yaml"

        result = runner.invoke(app, ["--installed", "yaml"], input="\n")

        assert result.exit_code == 0
        assert "*github.com/a/yaml" in result.output
        assert "* = installed" in result.output
        assert patched["installed"].call_count == 3

    def test_installed_check_off_by_default(self, patched):
        """Test that the installed check does not run without --installed."""
        runner.invoke(app, ["yaml"], input="\n")

        patched["installed"].assert_not_called()

    def test_search_failure(self, patched):
        """Test that search errors are printed and exit with status 1."""
        patched["client"].search.side_effect = SearchUnavailable("godoc: unreachable")

        result = runner.invoke(app, ["yaml"])

        assert result.exit_code == 1
        assert "godoc: unreachable" in result.output

    def test_missing_go_binary(self, patched):
        """Test that a missing toolchain exits with status 1."""
        patched["install"].side_effect = ToolNotFound("go")

        result = runner.invoke(app, ["yaml"], input="1\n")

        assert result.exit_code == 1
        assert "Could not find go binary in PATH" in result.output

    def test_install_failure(self, patched):
        """Test that a failing go get exits with status 1."""
        patched["install"].side_effect = InstallFailed("exit status 1")

        result = runner.invoke(app, ["yaml"], input="1\n")

        assert result.exit_code == 1
        assert "exit status 1" in result.output


class TestMainEntryPoint:
    """Tests for the console script entry point."""

    def test_bad_option_value_exits_one(self, capsys):
        """Test that an invalid option value prints usage and exits with 1."""
        with patch("sys.argv", ["gosearch", "--limit", "many", "yaml"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1
        assert "Usage" in capsys.readouterr().err

    def test_unknown_option_exits_one(self):
        """Test that an unrecognised option exits with status 1."""
        with patch("sys.argv", ["gosearch", "--no-such-flag", "yaml"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1

    def test_missing_query_exits_one(self):
        """Test that a missing search term exits with status 1."""
        with patch("sys.argv", ["gosearch"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 1

    def test_help_exits_zero(self):
        """Test that --help exits successfully."""
        with patch("sys.argv", ["gosearch", "--help"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 0
