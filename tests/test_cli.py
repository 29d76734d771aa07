"""Tests for the fairy-gen CLI."""

import tempfile
from datetime import datetime
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from fairy_data.cli.main import cli
from fairy_data.magic.dispatch import Int32


class Person:
    """Bewitch target used by the CLI tests."""

    name: str
    age: Int32
    born: datetime

    def __init__(self):
        self.name = "nobody"
        self.age = 0
        self.born = None


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


class TestTextCommand:
    """Tests for the text command."""

    def test_words(self, runner):
        result = runner.invoke(cli, ["text", "--count", "4", "--seed", "1"])

        assert result.exit_code == 0
        assert len(result.output.splitlines()) == 4

    def test_seed_is_reproducible(self, runner):
        first = runner.invoke(cli, ["text", "-n", "3", "-s", "9", "--kind", "sentence"])
        second = runner.invoke(cli, ["text", "-n", "3", "-s", "9", "--kind", "sentence"])

        assert first.output == second.output

    def test_unique_words(self, runner):
        result = runner.invoke(cli, ["text", "-n", "30", "--unique", "--kind", "latin-word"])

        lines = result.output.splitlines()
        assert result.exit_code == 0
        assert len(set(lines)) == 30

    def test_limit(self, runner):
        result = runner.invoke(cli, ["text", "-n", "3", "--kind", "paragraph", "--limit", "6"])

        assert result.exit_code == 0
        assert all(len(line) <= 6 for line in result.output.splitlines())

    def test_exhaustion_is_reported(self, runner):
        result = runner.invoke(cli, ["text", "-n", "100", "--unique", "--limit", "1"])

        assert result.exit_code == 1
        assert "no more unique values" in result.output
        assert len(set(result.output.splitlines()[:-1])) < 100


class TestBewitchCommand:
    """Tests for the bewitch command."""

    def test_bewitch_all_fields(self, runner):
        result = runner.invoke(cli, ["bewitch", "test_cli:Person", "--seed", "3"])

        assert result.exit_code == 0
        assert "Person" in result.output
        assert "int32" in result.output
        assert "nobody" not in result.output

    def test_bewitch_missing_field(self, runner):
        result = runner.invoke(cli, ["bewitch", "test_cli:Person", "--field", "missing"])

        assert result.exit_code == 1
        assert "missing" in result.output

    def test_bad_target(self, runner):
        result = runner.invoke(cli, ["bewitch", "no-colon"])

        assert result.exit_code == 2


class TestConfigCommand:
    """Tests for the config command."""

    def test_defaults(self, runner):
        result = runner.invoke(cli, ["config"])

        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["dates"] == {"year_low": 2000, "year_high": 2100}

    def test_config_file_and_seed_override(self, runner):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "fairy.yaml"
            path.write_text("seed: 1\ntext:\n  limit: 12\n")

            result = runner.invoke(cli, ["config", "--config", str(path), "--seed", "2"])

        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["seed"] == 2
        assert data["text"]["limit"] == 12

    def test_invalid_config(self, runner):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "fairy.yaml"
            path.write_text("text:\n  limit: -3\n")

            result = runner.invoke(cli, ["config", "--config", str(path)])

        assert result.exit_code == 1
        assert "Invalid config" in result.output
