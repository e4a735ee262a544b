"""
Fixture discovery on disk.

A fixture is a directory under the fixtures root holding definition files.
The catalog is a pure function of the filesystem: nothing is cached, every
call rescans the directory tree.
"""
import os
from pathlib import Path
from typing import Iterator, Union

from fixture_api.core.exceptions import CatalogScanError, FixtureNotFoundError

FIXTURE_FILE_PATTERNS = ("*.json", "*.py")

PathLike = Union[str, os.PathLike]


def is_definition_file(path: Path) -> bool:
    """Whether a path is a fixture definition file (private ``_*`` files excluded)."""
    return (
        path.is_file()
        and not path.name.startswith("_")
        and any(path.match(pattern) for pattern in FIXTURE_FILE_PATTERNS)
    )


def list_fixtures(fixtures_root: PathLike) -> Iterator[str]:
    """
    Yield the name of every fixture found under ``fixtures_root``.

    The fixture name is the immediate parent directory of each definition
    file. Only directories directly under the root are fixtures, so every
    listed name can be loaded; files lying in the root itself or deeper
    than one level belong to no fixture. Each name is yielded once; order
    carries no meaning.

    Raises:
        CatalogScanError: If the root is missing, not a directory or unreadable.
    """
    root = Path(fixtures_root)
    if not root.is_dir():
        raise CatalogScanError(f"Fixtures directory {root} does not exist or is not a directory")
    if not os.access(root, os.R_OK | os.X_OK):
        raise CatalogScanError(f"Fixtures directory {root} is not readable")

    seen: set[str] = set()
    try:
        for pattern in FIXTURE_FILE_PATTERNS:
            for path in root.rglob(pattern):
                if path.parent.parent != root or not is_definition_file(path):
                    continue
                name = path.parent.name
                if name not in seen:
                    seen.add(name)
                    yield name
    except OSError as e:
        raise CatalogScanError(f"Failed to scan fixtures directory {root}: {e}") from e


def fixture_directory(fixtures_root: PathLike, fixture_name: str) -> Path:
    """
    Resolve the directory holding a fixture's definition files.

    Raises:
        FixtureNotFoundError: If the name is empty or points outside the root.
    """
    if not fixture_name or fixture_name in (".", "..") or "/" in fixture_name or "\\" in fixture_name:
        raise FixtureNotFoundError(fixture_name, "invalid fixture name")

    root = Path(fixtures_root).resolve()
    directory = (root / fixture_name).resolve()
    if directory.parent != root:
        raise FixtureNotFoundError(fixture_name, "invalid fixture name")
    return directory
