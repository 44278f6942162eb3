"""
Ecosystem detection — which language toolchains live in a directory.

Detection is a two-step check per ecosystem: a marker file at the
root (``go.mod``, ``package.json``…) and, failing that, a walk of the
tree looking for a matching file extension.  The walk skips hidden and
dependency directories and stops at the first hit.

Detection only reads the filesystem, so running it twice on an
unchanged tree gives the same answer.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from bruh.core.errors import PreconditionError
from bruh.core.models.tool import ECOSYSTEM_ALIASES, ECOSYSTEMS

logger = logging.getLogger(__name__)

# Directories never descended into (hidden dirs are skipped too)
_SKIP_DIRS = frozenset({"node_modules", "vendor", "target"})

_GO_MARKERS = ("go.mod",)
_JS_MARKERS = ("package.json",)
_PYTHON_MARKERS = ("requirements.txt", "pyproject.toml", "setup.py")
_JAVA_MARKERS = ("pom.xml", "build.gradle")
_RUST_MARKERS = ("Cargo.toml",)

_JS_EXTENSIONS = (".js", ".ts", ".jsx", ".tsx")
_TS_EXTENSIONS = (".ts", ".tsx")


def detect_ecosystems(root: Path) -> list[str]:
    """Detect ecosystems under ``root``.

    Returns:
        Ecosystem names in fixed check order (go, javascript|typescript,
        python, java, rust).  An empty list is a valid answer.
    """
    found: list[str] = []

    if _has_marker(root, _GO_MARKERS) or has_files_with_extension(root, ".go"):
        found.append("go")

    if _has_marker(root, _JS_MARKERS) or has_files_with_extension(root, *_JS_EXTENSIONS):
        if has_files_with_extension(root, *_TS_EXTENSIONS):
            found.append("typescript")
        else:
            found.append("javascript")

    if _has_marker(root, _PYTHON_MARKERS) or has_files_with_extension(root, ".py"):
        found.append("python")

    if _has_marker(root, _JAVA_MARKERS) or has_files_with_extension(root, ".java"):
        found.append("java")

    if _has_marker(root, _RUST_MARKERS) or has_files_with_extension(root, ".rs"):
        found.append("rust")

    logger.debug("Detected ecosystems in %s: %s", root, found or "none")
    return found


def normalize_ecosystem(name: str) -> str:
    """Map a user-supplied language name to a known ecosystem.

    Raises:
        PreconditionError: the name is not a supported ecosystem.
    """
    key = name.strip().lower()
    key = ECOSYSTEM_ALIASES.get(key, key)
    if key not in ECOSYSTEMS:
        supported = ", ".join(ECOSYSTEMS)
        raise PreconditionError(f"unsupported language '{name}' (supported: {supported})")
    return key


def resolve_ecosystems(root: Path, forced: str | None = None) -> list[str]:
    """Forced language wins outright; otherwise detect."""
    if forced:
        return [normalize_ecosystem(forced)]
    return detect_ecosystems(root)


def has_files_with_extension(root: Path, *extensions: str) -> bool:
    """Whether any file under ``root`` ends with one of ``extensions``."""
    for _dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [
            d for d in dirnames
            if not d.startswith(".") and d not in _SKIP_DIRS
        ]
        for filename in filenames:
            if filename.endswith(extensions):
                return True
    return False


def _has_marker(root: Path, markers: tuple[str, ...]) -> bool:
    return any((root / marker).exists() for marker in markers)
