"""Tests for CLI commands."""

from __future__ import annotations

from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from treetouch import __version__, cli

runner = CliRunner()


class TestCreateCommand:
    """Tests for the create command."""

    def test_create_into_directory(self, compact_yaml: Path, tmp_path: Path) -> None:
        """Test the tree is created inside --into."""
        target = tmp_path / "out"
        target.mkdir()

        result = runner.invoke(cli.app, ["create", str(compact_yaml), "--into", str(target)])

        assert result.exit_code == 0
        assert (target / "src" / "pkg" / "core.py").read_text() == "VALUE = 1\n"
        assert (target / "src" / "pkg" / "__init__.py").read_text() == ""
        assert str(target) in result.output

    def test_create_in_temporary_directory(
        self, explicit_json: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a temporary directory is used without --into."""
        scratch = tmp_path / "scratch"
        scratch.mkdir()
        monkeypatch.setattr("tempfile.tempdir", str(scratch))

        result = runner.invoke(cli.app, ["create", str(explicit_json)])

        assert result.exit_code == 0
        (root,) = scratch.iterdir()
        assert (root / "a" / "b" / "c" / "leaf.txt").read_text() == "leaf"
        assert (root / "top.txt").exists()

    def test_missing_target_fails(self, compact_yaml: Path, tmp_path: Path) -> None:
        """Test a missing --into directory exits with status 1."""
        result = runner.invoke(
            cli.app, ["create", str(compact_yaml), "--into", str(tmp_path / "nope")]
        )

        assert result.exit_code == 1
        assert "base path must exist" in result.output

    def test_empty_fixture_fails(self, tmp_path: Path) -> None:
        """Test an empty fixture exits with status 1."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        result = runner.invoke(cli.app, ["create", str(path), "--into", str(tmp_path)])

        assert result.exit_code == 1
        assert "at least one element" in result.output

    def test_direct_call_raises_exit(self, tmp_path: Path) -> None:
        """Test calling the command function directly raises typer.Exit."""
        with pytest.raises(typer.Exit):
            cli.create_command(fixture=tmp_path / "missing.yaml", into=tmp_path)


class TestShowCommand:
    """Tests for the show command."""

    def test_show(self, compact_yaml: Path) -> None:
        """Test the fixture is rendered as a tree."""
        result = runner.invoke(cli.app, ["show", str(compact_yaml)])

        assert result.exit_code == 0
        assert "fixture.yaml" in result.output
        assert "core.py" in result.output
        assert "pkg/" in result.output
        assert "10 bytes" in result.output

    def test_show_invalid_fixture(self, tmp_path: Path) -> None:
        """Test an invalid fixture exits with status 1."""
        path = tmp_path / "bad.json"
        path.write_text("42")

        result = runner.invoke(cli.app, ["show", str(path)])

        assert result.exit_code == 1
        assert "list or a mapping" in result.output
    def test_show_undecodable_fixture(self, tmp_path: Path) -> None:
        """Test a fixture that is not UTF-8 exits with status 1."""
        path = tmp_path / "latin.yaml"
        path.write_bytes(b"a.txt: \xff\xfe\n")

        result = runner.invoke(cli.app, ["show", str(path)])

        assert result.exit_code == 1
        assert "Cannot read fixture" in result.output



class TestMain:
    """Tests for global options."""

    def test_version(self) -> None:
        """Test --version prints the version."""
        result = runner.invoke(cli.app, ["--version"])

        assert result.exit_code == 0
        assert f"treetouch v{__version__}" in result.output

    def test_no_args_shows_help(self) -> None:
        """Test running without a command prints usage."""
        result = runner.invoke(cli.app, [])

        assert "Usage" in result.output
