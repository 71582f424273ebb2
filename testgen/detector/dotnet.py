""".NET ecosystem detector.

Probes the project root for a .csproj file and, for .NET projects,
infers the test framework from a plain text scan of .csproj files. No
MSBuild/XML parsing: a case-insensitive substring match is enough to
tell xUnit, NUnit and MSTest apart.

Search order:
  1. every .csproj under the project root (sorted, depth-first)
  2. every .csproj under each conventional test directory
     (Tests, tests, Test, test), only if step 1 found nothing
  3. xunit, so a .NET project never comes back as unknown
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

from testgen.detector.defaults import (
    DEFAULT_DOTNET_FRAMEWORK,
    DOTNET_FRAMEWORK_MARKERS,
    DOTNET_PROJECT_SUFFIX,
    DOTNET_TEST_DIRS,
    SKIPPED_WALK_DIRS,
)
from testgen.detector.types import TestingFramework

logger = logging.getLogger(__name__)


def has_dotnet_marker(root: Path) -> bool:
    """True if the root directory itself holds a .csproj file.

    Only the immediate entries are listed. Any filesystem error reads
    as "no marker".
    """
    try:
        with os.scandir(root) as entries:
            return any(entry.name.endswith(DOTNET_PROJECT_SUFFIX) for entry in entries)
    except OSError as exc:
        logger.debug("Cannot list %s: %s", root, exc)
        return False


def detect_dotnet_framework(root: Path) -> TestingFramework:
    """Infer the .NET test framework from .csproj contents."""
    root = Path(root)

    found = _scan_tree(root)
    if found:
        return found

    for name in DOTNET_TEST_DIRS:
        test_dir = root / name
        if not test_dir.is_dir():
            continue
        found = _scan_tree(test_dir)
        if found:
            return found

    logger.debug("No test framework reference in .csproj files under %s", root)
    return DEFAULT_DOTNET_FRAMEWORK


def match_framework(content: str) -> Optional[TestingFramework]:
    """Return the first framework whose marker occurs in content."""
    lowered = content.lower()
    for marker, framework in DOTNET_FRAMEWORK_MARKERS:
        if marker in lowered:
            return framework
    return None


def _scan_tree(base: Path) -> Optional[TestingFramework]:
    for path in iter_project_files(base):
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.debug("Skipping unreadable %s: %s", path, exc)
            continue
        framework = match_framework(content)
        if framework:
            logger.debug("%s references %s", path, framework)
            return framework
    return None


def iter_project_files(base: Path) -> Iterator[Path]:
    """Yield .csproj files under base in a stable order.

    Files of a directory come before its subdirectories; both are sorted
    by name. Unlistable directories are skipped silently.
    """
    for dirpath, dirnames, filenames in os.walk(base):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIPPED_WALK_DIRS)
        for filename in sorted(filenames):
            if filename.endswith(DOTNET_PROJECT_SUFFIX):
                yield Path(dirpath) / filename
