"""
Unit tests for the command-line interface.

Drives the click command through CliRunner against a temporary config file
and directory tree, checking output and exit status.
"""

import yaml
import pytest
from click.testing import CliRunner

from prefix_search import __version__
from prefix_search.cli import cli


@pytest.fixture
def search_tree(tmp_path):
    """Create a docs tree and a config file pointing at it."""
    docs = tmp_path / "a"
    docs.mkdir()
    (docs / "report.txt").write_text("report")
    (docs / "readme.md").write_text("readme")

    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.safe_dump({
        'docs': {'dirs': [str(docs)]},
        'code': {'dirs': [str(tmp_path / "src")]},
    }))
    return tmp_path, config_path


def invoke(config_path, args):
    runner = CliRunner()
    env = {'PREFIX_SEARCH_CONFIG': str(config_path), 'FORCE_COLOR': None, 'PREFIX_SEARCH_LOG': None}
    return runner.invoke(cli, args, env=env)


class TestCli:
    """Test cases for the prefix-search command."""

    def test_matches_printed(self, search_tree):
        """Test the report/readme example end to end."""
        root, config_path = search_tree

        result = invoke(config_path, ["docs", "rep", "read"])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert f"readme.md ({root / 'a' / 'readme.md'})" in lines
        assert f"report.txt ({root / 'a' / 'report.txt'})" in lines
        assert lines[-1] == "Found 2 files"

    def test_unmet_terms_printed(self, search_tree):
        """Test that unmatched terms are listed."""
        _, config_path = search_tree

        result = invoke(config_path, ["docs", "rep", "zzz"])

        assert result.exit_code == 0
        assert "Found 1 files" in result.stdout
        assert "Unmet search terms: zzz" in result.stdout

    def test_no_match_normal_mode_succeeds(self, search_tree):
        """Test that normal mode exits 0 even without matches."""
        _, config_path = search_tree

        result = invoke(config_path, ["docs", "zzz"])

        assert result.exit_code == 0
        assert "Found 0 files" in result.stdout

    def test_quiet_match(self, search_tree):
        """Test quiet mode with a match: exit 0 and no output."""
        _, config_path = search_tree

        result = invoke(config_path, ["docs", "-q", "rep"])

        assert result.exit_code == 0
        assert result.stdout == ""

    def test_quiet_no_match(self, search_tree):
        """Test quiet mode without a match: exit 1 and no output."""
        _, config_path = search_tree

        result = invoke(config_path, ["docs", "--question", "zzz"])

        assert result.exit_code == 1
        assert result.stdout == ""

    def test_unknown_category(self, search_tree):
        """Test that an unknown category prints an error and usage and exits 1."""
        _, config_path = search_tree

        result = invoke(config_path, ["music", "a"])

        assert result.exit_code == 1
        assert "Search category not found: music" in result.output
        assert "Usage: prefix-search [code, docs] [-q] <SEARCH_TERM> [<SEARCH_TERM>...]" in result.output

    def test_missing_terms(self, search_tree):
        """Test that a missing search term is a usage error with exit 1."""
        _, config_path = search_tree

        result = invoke(config_path, ["docs"])

        assert result.exit_code == 1
        assert "Usage: prefix-search [code, docs]" in result.output

    def test_no_arguments(self, search_tree):
        """Test that running without arguments is a usage error with exit 1."""
        _, config_path = search_tree

        result = invoke(config_path, [])

        assert result.exit_code == 1
        assert "Usage: prefix-search" in result.output

    def test_unknown_option(self, search_tree):
        """Test that an unknown option is a usage error with exit 1."""
        _, config_path = search_tree

        result = invoke(config_path, ["docs", "--bogus", "rep"])

        assert result.exit_code == 1
        assert "Usage: prefix-search" in result.output

    def test_empty_term_is_usage_error(self, search_tree):
        """Test that an empty search term is rejected."""
        _, config_path = search_tree

        result = invoke(config_path, ["docs", ""])

        assert result.exit_code == 1
        assert "Usage: prefix-search" in result.output

    def test_config_option(self, search_tree, tmp_path_factory):
        """Test that --config overrides the environment."""
        _, config_path = search_tree
        other = tmp_path_factory.mktemp("other") / "config.yaml"

        result = invoke(other, ["--config", str(config_path), "docs", "-q", "rep"])

        assert result.exit_code == 0

    def test_first_run_creates_config(self, tmp_path):
        """Test that the first run writes an empty config and reports the unknown category."""
        config_path = tmp_path / "fresh" / "config.yaml"

        result = invoke(config_path, ["docs", "rep"])

        assert config_path.exists()
        assert result.exit_code == 1
        assert "Usage: prefix-search [] [-q]" in result.output

    def test_invalid_config(self, tmp_path):
        """Test that a broken config file is fatal with exit 1."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("docs: [unclosed\n")

        result = invoke(config_path, ["docs", "rep"])

        assert result.exit_code == 1
        assert "Invalid YAML syntax" in result.output

    def test_version(self, search_tree):
        """Test the version option."""
        _, config_path = search_tree

        result = invoke(config_path, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
