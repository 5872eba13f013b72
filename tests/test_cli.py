"""Tests for CLI module."""

import json
import logging

import pytest
from click.testing import CliRunner
from rich.console import Console

from novel_catalog.cli import cli


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Render CLI output without colour codes."""
    monkeypatch.setattr("novel_catalog.cli.console", Console(soft_wrap=True, color_system=None))


class TestReportCommand:
    """Test the full report command."""

    def test_report_default(self, runner):
        """Test the report prints every section."""
        result = runner.invoke(cli, ['report'])

        assert result.exit_code == 0
        assert "All Titles in UPPERCASE:" in result.output
        assert "Are You There God? It's Me, Margaret." in result.output
        assert "13.0%" in result.output
        assert "A Passage to India by E.M. Forster, 1924" in result.output
        assert "Sorted titles:" in result.output

    def test_report_with_config(self, runner, tmp_path):
        """Test report parameters read from a config file."""
        config_path = tmp_path / "report.json"
        config_path.write_text(json.dumps({"count_word": "death", "decade": 1920}), encoding="utf-8")

        result = runner.invoke(cli, ['report', '--config', str(config_path)])

        assert result.exit_code == 0
        assert "How many books contain 'death'?" in result.output
        assert "Books from the 1920s:" in result.output

    def test_report_with_invalid_config(self, runner, tmp_path):
        """Test a schema-invalid config exits with an error."""
        config_path = tmp_path / "report.json"
        config_path.write_text(json.dumps({"lookup_year": 0}), encoding="utf-8")

        result = runner.invoke(cli, ['report', '--config', str(config_path)])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "lookup_year" in result.output

    def test_blank_name_rejected(self, runner):
        """Test a blank catalog name exits with an error."""
        result = runner.invoke(cli, ['--name', '  ', 'report'])

        assert result.exit_code == 1
        assert "bookstore name must be provided" in result.output


class TestQueryCommands:
    """Test the single-query commands."""

    def test_search(self, runner):
        """Test listing titles by substring."""
        result = runner.invoke(cli, ['search', 'HEART'])

        assert result.exit_code == 0
        assert "The Heart Is a Lonely Hunter" in result.output
        assert "The Death of the Heart" in result.output

    def test_search_count(self, runner):
        """Test counting titles by substring."""
        result = runner.invoke(cli, ['search', 'heart', '--count'])

        assert result.exit_code == 0
        assert result.output.strip().splitlines()[-1] == "3"

    def test_decade(self, runner):
        """Test listing a decade."""
        result = runner.invoke(cli, ['decade', '2000'])

        assert result.exit_code == 0
        assert "White Teeth" in result.output
        assert "1984" not in result.output

    def test_percent(self, runner):
        """Test the percentage command."""
        result = runner.invoke(cli, ['percent', '1940', '1950'])

        assert result.exit_code == 0
        assert "13.0%" in result.output

    def test_percent_reversed(self, runner):
        """Test a reversed range exits with an error."""
        result = runner.invoke(cli, ['percent', '1950', '1940'])

        assert result.exit_code == 1
        assert "first year must be less than or equal to last year" in result.output

    def test_published(self, runner):
        """Test the exact-year check."""
        assert runner.invoke(cli, ['published', '1946']).output.strip().endswith("True")
        assert runner.invoke(cli, ['published', '1900']).output.strip().endswith("False")

    def test_published_invalid_year(self, runner):
        """Test an out-of-range year exits with an error."""
        result = runner.invoke(cli, ['published', '0'])

        assert result.exit_code == 1
        assert "year must be between 1 and 2026" in result.output

    def test_length(self, runner):
        """Test listing titles by length."""
        result = runner.invoke(cli, ['length', '15'])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[-3:] == ["The Corrections", "Light in August", "Never Let Me Go"]

    def test_custom_name(self, runner):
        """Test a custom name is shown in statistics."""
        result = runner.invoke(cli, ['--name', 'Corner Shop', 'stats'])

        assert result.exit_code == 0
        assert "Corner Shop" in result.output


class TestShopAndStats:
    """Test the shop listing and statistics commands."""

    def test_shop(self, runner):
        """Test the shop listing."""
        result = runner.invoke(cli, ['shop'])

        assert result.exit_code == 0
        assert "All titles:" in result.output
        assert "Novel{title='1984', name='George Orwell', yearPublished=1948}" in result.output
        assert "duplicate titles collapsed" not in result.output

    def test_shop_exclude(self, runner):
        """Test a custom exclusion filter."""
        result = runner.invoke(cli, ['shop', '--exclude', 'a'])

        assert result.exit_code == 0
        sorted_part = result.output.split("Sorted titles:")[1]
        assert "Ubik" in sorted_part
        assert "Animal Farm" not in sorted_part

    def test_stats(self, runner):
        """Test the statistics table."""
        result = runner.invoke(cli, ['stats'])

        assert result.exit_code == 0
        assert "Novels: 100" in result.output
        assert "Published: 1924 - 2005" in result.output
        assert "1960s" in result.output

    def test_verbose_flag(self, runner):
        """Test verbose mode still runs commands."""
        result = runner.invoke(cli, ['--verbose', 'published', '1950'])

        assert result.exit_code == 0
        assert "True" in result.output

    def test_verbose_after_quiet_call(self, runner):
        """Test each invocation resets the root log level."""
        root = logging.getLogger()
        saved_level, saved_handlers = root.level, root.handlers[:]
        try:
            runner.invoke(cli, ['published', '1950'])
            assert root.level == logging.WARNING

            runner.invoke(cli, ['--verbose', 'published', '1950'])
            assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
