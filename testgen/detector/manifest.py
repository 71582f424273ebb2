"""package.json reader.

Produces a read-only Manifest of declared dependencies and npm scripts.
Missing or malformed manifests yield an empty Manifest, never an error.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Optional

from testgen.detector.defaults import MANIFEST_FILENAME

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class Manifest:
    """Declared dependencies (runtime + dev) and scripts of a project."""

    dependencies: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    scripts: Mapping[str, str] = field(default_factory=lambda: _EMPTY)

    def has_any(self, aliases: Iterable[str]) -> bool:
        """True if any alias is a declared dependency name (case-sensitive)."""
        return any(alias in self.dependencies for alias in aliases)

    def first_version(self, aliases: Iterable[str]) -> Optional[str]:
        """Version spec of the first alias present, verbatim."""
        for alias in aliases:
            if alias in self.dependencies:
                return self.dependencies[alias]
        return None

    @property
    def is_empty(self) -> bool:
        return not self.dependencies and not self.scripts


def read_manifest(root: Path) -> Manifest:
    """Read package.json at the project root.

    devDependencies override dependencies when a name appears in both.
    """
    path = Path(root) / MANIFEST_FILENAME
    if not path.is_file():
        return Manifest()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return Manifest()

    if not isinstance(data, dict):
        logger.warning("Ignoring %s: top level is not an object", path)
        return Manifest()

    deps: dict[str, str] = {}
    deps.update(_string_block(data, "dependencies", path))
    deps.update(_string_block(data, "devDependencies", path))

    return Manifest(
        dependencies=MappingProxyType(deps),
        scripts=MappingProxyType(_string_block(data, "scripts", path)),
    )


def _string_block(data: dict, key: str, path: Path) -> dict[str, str]:
    block = data.get(key)
    if block is None:
        return {}
    if not isinstance(block, dict):
        logger.warning("Ignoring %s.%s: expected an object", path.name, key)
        return {}
    return {str(name): str(value) for name, value in block.items()}
