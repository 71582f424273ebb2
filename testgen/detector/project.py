"""Project type detection.

Priority (first match wins):
  .csproj at the root           → dotnet (overrides any dependency)
  react / react-dom             → react
  vue / @vue/core               → vue
  @angular/core                 → angular
  express / fastify / koa       → nodejs
  otherwise                     → unknown
"""

import logging
from pathlib import Path

from testgen.detector.defaults import PROJECT_TYPE_ALIASES, TYPESCRIPT_CONFIG_FILES
from testgen.detector.directories import (
    find_first_existing,
    resolve_source_directory,
    resolve_test_directory,
)
from testgen.detector.dotnet import has_dotnet_marker
from testgen.detector.manifest import Manifest, read_manifest
from testgen.detector.types import DetectedProject, ProjectType

logger = logging.getLogger(__name__)


def classify_project_type(manifest: Manifest, has_dotnet: bool) -> ProjectType:
    """Classify a project from its manifest and the .NET marker probe."""
    if has_dotnet:
        return ProjectType.DOTNET

    for project_type, aliases in PROJECT_TYPE_ALIASES:
        if manifest.has_any(aliases):
            return project_type

    return ProjectType.UNKNOWN


def _aliases_for(project_type: ProjectType) -> tuple[str, ...]:
    return dict(PROJECT_TYPE_ALIASES)[project_type]


class ProjectDetector:
    """Detects the project type and its source/test layout."""

    def __init__(self, project_root: Path) -> None:
        self.project_root = Path(project_root)

    def detect(self) -> DetectedProject:
        manifest = read_manifest(self.project_root)
        has_dotnet = has_dotnet_marker(self.project_root)
        project_type = classify_project_type(manifest, has_dotnet)

        result = DetectedProject(
            project_type=project_type,
            source_directory=resolve_source_directory(self.project_root, project_type),
            test_directory=resolve_test_directory(self.project_root, project_type),
            has_typescript=self._has_typescript(),
            has_react=manifest.has_any(_aliases_for(ProjectType.REACT)),
            has_vue=manifest.has_any(_aliases_for(ProjectType.VUE)),
            has_angular=manifest.has_any(_aliases_for(ProjectType.ANGULAR)),
        )
        logger.debug(
            "Project detection: type=%s src=%s tests=%s typescript=%s",
            result.project_type,
            result.source_directory,
            result.test_directory,
            result.has_typescript,
        )
        return result

    def _has_typescript(self) -> bool:
        found = find_first_existing(self.project_root, TYPESCRIPT_CONFIG_FILES, kind="any")
        return found is not None
