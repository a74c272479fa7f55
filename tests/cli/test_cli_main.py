"""Tests for the lnc command group."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from linkcomment import __version__
from linkcomment.cli.main import cli

runner = CliRunner()

A_GO = "package main\n\n// [h](util.go@Foo)\nfunc main() {}\n"
UTIL_GO = "package main\n" + "\n" * 9 + "func Foo() {}\n"
MAIN_PY = "x = 1  # [helper fn](@helper)\ndef helper():\n    return x\n"


@pytest.fixture(autouse=True)
def no_global_config(tmp_path: Path):
    with patch("linkcomment.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "absent.yaml"):
        yield


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "ws"
    root.mkdir()
    (root / "a.go").write_text(A_GO)
    (root / "util.go").write_text(UTIL_GO)
    (root / "main.py").write_text(MAIN_PY)
    return root


def invoke(workspace: Path, *args: str):
    return runner.invoke(cli, ["--config-root", str(workspace), *args])


class TestGroup:
    def test_version(self) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("links", "locate", "jump", "follow", "render"):
            assert name in result.output

    def test_bad_config_is_reported(self, workspace: Path) -> None:
        config_dir = workspace / ".linkcomment"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("decorations: [unclosed\n")

        result = invoke(workspace, "links", str(workspace / "a.go"))

        assert result.exit_code == 1
        assert "Failed to parse config" in result.output


class TestLinksCommand:
    def test_lists_links(self, workspace: Path) -> None:
        path = workspace / "a.go"
        result = invoke(workspace, "links", str(path))
        assert result.exit_code == 0
        assert f"{path}:3:4  h  -> util.go@Foo" in result.output

    def test_json(self, workspace: Path) -> None:
        result = invoke(workspace, "links", str(workspace / "main.py"), "--json")
        assert result.exit_code == 0
        (link,) = json.loads(result.stdout)
        assert link["description"] == "helper fn"
        assert link["filePath"] is None
        assert link["symbolName"] == "helper"

    def test_no_links(self, workspace: Path) -> None:
        path = workspace / "util.go"
        result = invoke(workspace, "links", str(path))
        assert result.exit_code == 0
        assert f"No links in {path}" in result.output


class TestLocateCommand:
    def test_found(self, workspace: Path) -> None:
        path = workspace / "util.go"
        result = invoke(workspace, "locate", str(path), "Foo")
        assert result.exit_code == 0
        assert f"{path}:11:6" in result.output

    def test_json(self, workspace: Path) -> None:
        result = invoke(workspace, "locate", str(workspace / "main.py"), "helper", "--json")
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["language"] == "python"
        assert payload["match"] == {"line": 1, "column": 4}

    def test_language_override(self, workspace: Path) -> None:
        notes = workspace / "notes.txt"
        notes.write_text("def helper():\n")
        result = invoke(workspace, "locate", str(notes), "helper", "--language", "python")
        assert result.exit_code == 0
        assert f"{notes}:1:5" in result.output

    def test_not_found_exits_1(self, workspace: Path) -> None:
        result = invoke(workspace, "locate", str(workspace / "util.go"), "Missing")
        assert result.exit_code == 1
        assert 'Symbol "Missing" not found' in result.output


class TestJumpCommand:
    def test_cross_file(self, workspace: Path) -> None:
        result = invoke(workspace, "jump", str(workspace / "a.go"), "3", "7")
        assert result.exit_code == 0
        assert f"{workspace / 'util.go'}:11:6" in result.output

    def test_json(self, workspace: Path) -> None:
        result = invoke(workspace, "jump", str(workspace / "main.py"), "1", "12", "--json")
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "targetPath": str(workspace / "main.py"),
            "line": 1,
            "column": 4,
        }

    def test_no_link_at_position(self, workspace: Path) -> None:
        result = invoke(workspace, "jump", str(workspace / "a.go"), "1", "1")
        assert result.exit_code == 1
        assert "No link at" in result.output

    def test_disabled_language(self, workspace: Path) -> None:
        config_dir = workspace / ".linkcomment"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("navigation:\n  enabled_languages: [python]\n")

        result = invoke(workspace, "jump", str(workspace / "a.go"), "3", "7")

        assert result.exit_code == 1
        assert "No link at" in result.output


class TestFollowCommand:
    def test_follows_target(self, workspace: Path) -> None:
        result = invoke(workspace, "follow", str(workspace / "a.go"), "util.go@Foo")
        assert result.exit_code == 0
        assert f"{workspace / 'util.go'}:11:6" in result.output

    def test_symbol_miss_warns(self, workspace: Path) -> None:
        result = invoke(workspace, "follow", str(workspace / "main.py"), "@NonExistentSymbol")
        assert result.exit_code == 1
        assert 'Symbol "NonExistentSymbol" not found in current file' in result.output

    def test_missing_file_json(self, workspace: Path) -> None:
        result = invoke(workspace, "follow", str(workspace / "a.go"), "gone.go@Foo", "--json")
        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["error"] == "FILE_NOT_FOUND"
        assert payload["details"]["path"] == str(workspace / "gone.go")

    def test_rejects_non_target(self, workspace: Path) -> None:
        result = invoke(workspace, "follow", str(workspace / "a.go"), "util.go")
        assert result.exit_code == 1
        assert "Not a link target" in result.output


class TestRenderCommand:
    def test_collapses_links(self, workspace: Path) -> None:
        result = invoke(workspace, "render", str(workspace / "main.py"))
        assert result.exit_code == 0
        assert "helper fn" in result.output
        assert "[helper fn](@helper)" not in result.output
        assert "def helper():" in result.output

    def test_cursor_line_stays_literal(self, workspace: Path) -> None:
        result = invoke(workspace, "render", str(workspace / "main.py"), "--cursor-line", "1")
        assert result.exit_code == 0
        assert "[helper fn](@helper)" in result.output
