"""Tests for the command line interface."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from finditem.cli import _setup_logging, app

runner = CliRunner()


class TestSetupLogging:
    """Tests for _setup_logging helper."""

    def test_setup_logging_verbose(self) -> None:
        """Verbose mode sets DEBUG level."""
        with patch("finditem.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG

    def test_setup_logging_normal(self) -> None:
        """Normal mode sets INFO level."""
        with patch("finditem.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=False)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.INFO


class TestFindCommand:
    """Tests for the find command."""

    def test_simple_mode_prints_paths(self, sample_tree: Path) -> None:
        result = runner.invoke(app, [str(sample_tree), "--type", "file", "--simple"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert set(lines) == {str(sample_tree / "a.txt"), str(sample_tree / "sub" / "b.log")}

    def test_type_is_case_insensitive(self, sample_tree: Path) -> None:
        result = runner.invoke(app, [str(sample_tree), "--type", "Directory", "--simple"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [str(sample_tree / "sub")]

    def test_formatted_mode_with_summary(self, sample_tree: Path) -> None:
        result = runner.invoke(app, [str(sample_tree), "--type", "file"])
        assert result.exit_code == 0
        assert "a.txt" in result.stdout
        assert "2.00 KB" in result.stdout
        assert "Found 2 item(s)." in result.stdout
        assert "\x1b[" not in result.stdout

    def test_no_matches(self, sample_tree: Path) -> None:
        result = runner.invoke(app, [str(sample_tree), "--name", "*.pdf"])
        assert result.exit_code == 0
        assert "No items found." in result.stdout

    def test_filters_combine(self, sample_tree: Path) -> None:
        result = runner.invoke(
            app,
            [str(sample_tree), "--simple", "--min-size", "1KB", "--max-depth", "5", "--exclude", "*.txt"],
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [str(sample_tree / "sub"), str(sample_tree / "sub" / "b.log")]

    def test_exclude_dir_overrides_default(self, sample_tree: Path) -> None:
        result = runner.invoke(
            app, [str(sample_tree), "--simple", "--hidden", "--exclude-dir", "sub"]
        )
        assert result.exit_code == 0
        assert str(sample_tree / ".git" / "config") in result.stdout.splitlines()
        assert str(sample_tree / "sub" / "b.log") not in result.stdout.splitlines()

    def test_invalid_size_is_usage_error(self, sample_tree: Path) -> None:
        result = runner.invoke(app, [str(sample_tree), "--min-size", "lots"])
        assert result.exit_code == 2
        assert "Invalid size format" in result.output

    def test_invalid_pattern_is_usage_error(self, sample_tree: Path) -> None:
        result = runner.invoke(app, [str(sample_tree), "--pattern", "(["])
        assert result.exit_code == 2

    def test_depth_out_of_range(self, sample_tree: Path) -> None:
        result = runner.invoke(app, [str(sample_tree), "--max-depth", "101"])
        assert result.exit_code == 2

    def test_missing_root_warns_and_continues(self, sample_tree: Path) -> None:
        missing = sample_tree / "missing"
        result = runner.invoke(app, [str(missing), str(sample_tree), "--simple", "--type", "file"])
        assert result.exit_code == 0
        assert "Path not found" in result.output
        assert str(sample_tree / "a.txt") in result.output

    def test_all_roots_missing_fails(self, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path / "missing")])
        assert result.exit_code == 1
        assert "No search path could be resolved" in result.output

    def test_defaults_to_current_directory(self, sample_tree: Path, monkeypatch) -> None:
        monkeypatch.chdir(sample_tree)
        result = runner.invoke(app, ["--simple", "--name", "b.log"])
        assert result.exit_code == 0
        assert [Path(line).name for line in result.stdout.splitlines()] == ["b.log"]

    def test_verbose(self, sample_tree: Path) -> None:
        """Verbose flag is accepted."""
        result = runner.invoke(app, [str(sample_tree), "--simple", "-v"])
        assert result.exit_code == 0
