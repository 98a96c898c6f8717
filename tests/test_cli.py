"""
Tests for CLI module.

Tests command-line interface commands and output.
"""

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from html_metadata import __version__
from html_metadata.cli import app


class TestCLI:
    """Tests for CLI commands."""

    @pytest.fixture
    def runner(self) -> CliRunner:
        """Provide a CLI test runner."""
        return CliRunner()

    @pytest.fixture
    def page(self, temp_dir: Path, turtle_article_html: str) -> Path:
        """Sample page saved to disk."""
        path = temp_dir / "turtle.html"
        path.write_text(turtle_article_html, encoding="utf-8")
        return path

    def test_cli_help(self, runner: CliRunner):
        """CLI should show help."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "Usage" in result.output

    def test_version(self, runner: CliRunner):
        """--version prints the package version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_parse_file(self, runner: CliRunner, page: Path):
        """parse prints every format as JSON."""
        result = runner.invoke(app, ["parse", str(page)])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["openGraph"]["type"] == "article"
        assert data["dublinCore"]["subject"] == ["turtles", "reptiles"]

    def test_parse_selected_formats(self, runner: CliRunner, page: Path):
        """--format restricts the output to the given formats."""
        result = runner.invoke(app, ["parse", str(page), "-f", "twitter", "-f", "prism"])

        assert result.exit_code == 0
        assert list(json.loads(result.stdout)) == ["twitter", "prism"]

    def test_parse_merged(self, runner: CliRunner, page: Path):
        """--merged prints one mapping of lists."""
        result = runner.invoke(app, ["parse", str(page), "--merged", "-f", "prism"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "publicationName": ["Journal of Turtles"],
            "volume": ["5"],
        }

    def test_parse_no_metadata(self, runner: CliRunner, temp_dir: Path):
        """A page without metadata exits with status 1."""
        path = temp_dir / "empty.html"
        path.write_text("<html><body><p>nothing</p></body></html>")

        result = runner.invoke(app, ["parse", str(path)])

        assert result.exit_code == 1

    def test_parse_missing_file(self, runner: CliRunner, temp_dir: Path):
        """A missing file exits with status 1."""
        result = runner.invoke(app, ["parse", str(temp_dir / "missing.html")])

        assert result.exit_code == 1

    def test_parse_unknown_format(self, runner: CliRunner, page: Path):
        """Unknown format keys exit with status 1."""
        result = runner.invoke(app, ["parse", str(page), "-f", "rdfa"])

        assert result.exit_code == 1

    def test_formats_command(self, runner: CliRunner):
        """formats lists every registered key."""
        result = runner.invoke(app, ["formats"])

        assert result.exit_code == 0
        assert "openGraph" in result.output
        assert "highwirePress" in result.output

    def test_config_show(self, runner: CliRunner):
        """config --show displays settings."""
        result = runner.invoke(app, ["config", "--show"])

        assert result.exit_code == 0
        assert "parser" in result.output

    def test_config_init(self, runner: CliRunner, temp_dir: Path):
        """config --init writes a loadable YAML file."""
        output = temp_dir / "html-metadata.yaml"

        result = runner.invoke(app, ["config", "--init", "--output", str(output)])

        assert result.exit_code == 0
        data = yaml.safe_load(output.read_text())
        assert data["parser"]["max_workers"] == 4

    def test_config_file_option(self, runner: CliRunner, temp_dir: Path, page: Path):
        """--config settings apply to parse."""
        config_path = temp_dir / "config.yaml"
        config_path.write_text("parser:\n  formats:\n    - eprints\n")

        result = runner.invoke(app, ["--config", str(config_path), "parse", str(page)])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "eprints": {"type": "article", "creators_name": "Lvr, Turtle"},
        }
