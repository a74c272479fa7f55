"""Tests for navigation/resolver.py."""

from __future__ import annotations

from pathlib import Path

import pytest

from linkcomment.navigation.resolver import TargetIdentity, resolve_target

SOURCE = "/a/b/c.py"


class TestResolveTarget:
    @pytest.mark.parametrize("file_path", [None, ""])
    def test_missing_path_is_source(self, file_path: str | None) -> None:
        assert resolve_target(SOURCE, file_path) == TargetIdentity(Path(SOURCE), is_source=True)

    def test_bare_filename_is_sibling(self) -> None:
        target = resolve_target(SOURCE, "d.py")
        assert target.path == Path("/a/b/d.py")
        assert target.is_source is False

    def test_absolute_path_unchanged(self) -> None:
        assert resolve_target(SOURCE, "/x/y.py").path == Path("/x/y.py")

    def test_relative_path_joined_to_source_dir(self) -> None:
        assert resolve_target(SOURCE, "sub/e.py").path == Path("/a/b/sub/e.py")

    def test_parent_segments_normalized(self) -> None:
        assert resolve_target(SOURCE, "../lib/f.py").path == Path("/a/lib/f.py")

    def test_dot_segment_normalized(self) -> None:
        assert resolve_target(SOURCE, "./g.py").path == Path("/a/b/g.py")

    def test_own_filename_is_source(self) -> None:
        assert resolve_target(SOURCE, "c.py").is_source is True
        assert resolve_target(SOURCE, "./c.py").is_source is True

    def test_own_absolute_path_is_source(self) -> None:
        assert resolve_target(SOURCE, "/a/b/c.py").is_source is True

    def test_accepts_path_objects(self) -> None:
        assert resolve_target(Path(SOURCE), "d.py").path == Path("/a/b/d.py")

    def test_is_pure(self, tmp_path: Path) -> None:
        """No existence check: missing targets still resolve."""
        target = resolve_target(tmp_path / "src.py", "missing.py")
        assert target.path == tmp_path / "missing.py"
        assert not target.path.exists()
