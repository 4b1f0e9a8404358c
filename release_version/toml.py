"""pyproject.toml reading and writing.

Uses tomlkit so that rewriting [project].version keeps the file's
formatting and comments intact.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import tomlkit
from packaging.utils import canonicalize_name


def load_pyproject(path: Path) -> tomlkit.TOMLDocument:
    """Read ``path`` into a tomlkit document."""
    return tomlkit.parse(path.read_text())


def save_pyproject(path: Path, doc: tomlkit.TOMLDocument) -> None:
    """Write ``doc`` to ``path``; untouched keys and comments survive."""
    path.write_text(tomlkit.dumps(doc))


def get_project_name(doc: tomlkit.TOMLDocument, fallback: str) -> str:
    """Return [project].name, or ``fallback``, in canonical form.

    ``Test_Package`` is reported as ``test-package``.
    """
    return canonicalize_name(doc.get("project", {}).get("name", fallback))


def get_project_version(doc: tomlkit.TOMLDocument) -> str:
    """Return [project].version as text; a project without one starts at 0.0.0."""
    return str(doc.get("project", {}).get("version", "0.0.0"))


def set_project_version(doc: tomlkit.TOMLDocument, version: str) -> None:
    """Set [project].version, creating the [project] table if needed."""
    if "project" not in doc:
        doc["project"] = tomlkit.table()
    project = cast(dict[str, Any], doc["project"])
    project["version"] = version
