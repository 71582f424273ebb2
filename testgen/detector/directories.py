"""Conventional directory resolution.

All lookups are presence checks against the project root. Nothing here
creates a directory; a returned default is a recommendation only.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Literal, Optional

from testgen.detector.defaults import (
    DEFAULT_DOTNET_TEST_DIR,
    DEFAULT_SOURCE_DIR,
    DOTNET_TEST_DIRS,
    JS_TEST_DIRS,
    SOURCE_DIRS,
)
from testgen.detector.types import ProjectType

logger = logging.getLogger(__name__)


def find_first_existing(
    root: Path,
    names: Iterable[str],
    *,
    kind: Literal["dir", "any"] = "dir",
) -> Optional[str]:
    """Return the first name that exists under root, or None.

    kind="dir" only accepts directories; kind="any" accepts any path.
    """
    root = Path(root)
    for name in names:
        candidate = root / name
        try:
            found = candidate.is_dir() if kind == "dir" else candidate.exists()
        except OSError as exc:
            logger.debug("Skipping %s: %s", candidate, exc)
            continue
        if found:
            return name
    return None


def resolve_test_directory(root: Path, project_type: ProjectType) -> Optional[str]:
    """Pick the project's test directory.

    .NET projects always get a name back (defaulting to "Tests").
    Everything else returns None when no conventional directory exists,
    meaning tests are co-located with the source.
    """
    if project_type == ProjectType.DOTNET:
        return find_first_existing(root, DOTNET_TEST_DIRS) or DEFAULT_DOTNET_TEST_DIR
    return find_first_existing(root, JS_TEST_DIRS)


def resolve_source_directory(root: Path, project_type: ProjectType) -> Optional[str]:
    """Pick the project's source directory.

    .NET layouts are defined by the project files themselves, so there
    is no default for them.
    """
    found = find_first_existing(root, SOURCE_DIRS)
    if found:
        return found
    if project_type == ProjectType.DOTNET:
        return None
    return DEFAULT_SOURCE_DIR
