"""
Tests for ecosystem detection.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from bruh.core.errors import PreconditionError
from bruh.core.services.detection import (
    detect_ecosystems,
    has_files_with_extension,
    normalize_ecosystem,
    resolve_ecosystems,
)


def _touch(root: Path, rel: str) -> None:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")


class TestDetectEcosystems:
    def test_empty_dir(self, tmp_path: Path):
        assert detect_ecosystems(tmp_path) == []

    def test_go_mod_only(self, go_project: Path):
        assert detect_ecosystems(go_project) == ["go"]

    def test_marker_files(self, tmp_path: Path):
        for marker in ("go.mod", "package.json", "pyproject.toml", "pom.xml", "Cargo.toml"):
            _touch(tmp_path, marker)
        assert detect_ecosystems(tmp_path) == ["go", "javascript", "python", "java", "rust"]

    def test_typescript_wins_over_javascript(self, tmp_path: Path):
        _touch(tmp_path, "package.json")
        _touch(tmp_path, "src/index.tsx")
        assert detect_ecosystems(tmp_path) == ["typescript"]

    def test_nested_extension(self, tmp_path: Path):
        _touch(tmp_path, "scripts/tools/run.py")
        assert detect_ecosystems(tmp_path) == ["python"]

    def test_skips_dependency_dirs(self, tmp_path: Path):
        _touch(tmp_path, "node_modules/pkg/index.js")
        _touch(tmp_path, "vendor/lib/x.go")
        _touch(tmp_path, "target/debug/build.rs")
        _touch(tmp_path, ".venv/lib/site.py")
        assert detect_ecosystems(tmp_path) == []

    def test_idempotent(self, tmp_path: Path):
        _touch(tmp_path, "main.go")
        _touch(tmp_path, "App.java")
        assert detect_ecosystems(tmp_path) == detect_ecosystems(tmp_path) == ["go", "java"]


class TestHasFilesWithExtension:
    def test_multiple_extensions(self, tmp_path: Path):
        _touch(tmp_path, "a/b/c.jsx")
        assert has_files_with_extension(tmp_path, ".ts", ".jsx")
        assert not has_files_with_extension(tmp_path, ".ts")

    def test_stops_at_first_match(self, tmp_path: Path):
        visited = []

        def walk(root):
            for n in range(100):
                visited.append(n)
                yield (str(root / f"d{n}"), [], ["main.go"])

        with patch("bruh.core.services.detection.os.walk", side_effect=walk):
            assert has_files_with_extension(tmp_path, ".go")
        assert visited == [0]

    def test_skips_hidden_and_vendored_dirs(self, tmp_path: Path):
        _touch(tmp_path, ".cache/x.go")
        _touch(tmp_path, "node_modules/pkg/y.ts")
        assert not has_files_with_extension(tmp_path, ".go", ".ts")


class TestNormalize:
    @pytest.mark.parametrize("alias,expected", [
        ("js", "javascript"),
        ("TS", "typescript"),
        ("py", "python"),
        ("golang", "go"),
        ("rs", "rust"),
        ("java", "java"),
    ])
    def test_aliases(self, alias, expected):
        assert normalize_ecosystem(alias) == expected

    def test_unknown(self):
        with pytest.raises(PreconditionError, match="unsupported language"):
            normalize_ecosystem("cobol")


class TestResolve:
    def test_forced_ignores_tree(self, go_project: Path):
        assert resolve_ecosystems(go_project, "python") == ["python"]

    def test_detects_without_force(self, go_project: Path):
        assert resolve_ecosystems(go_project, None) == ["go"]
