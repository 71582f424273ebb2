"""Testing framework detection.

.NET projects are routed to the .csproj text scan in
testgen.detector.dotnet. JavaScript / TypeScript projects are classified
in strict priority order, first match wins:

  1. dependency aliases      jest → vitest → mocha → jasmine
  2. config files on disk    jest → vitest
  3. unknown

Dependency evidence always outranks config-file evidence. Once a
framework wins, the result is enriched with its config file, test
directory, declared version and capability flags where they apply.
"""

import logging
from pathlib import Path
from typing import Optional

from testgen.detector.defaults import (
    FRAMEWORK_ALIASES,
    FRAMEWORK_CONFIG_FILES,
    FRAMEWORK_CONFIG_MARKERS,
    JS_TEST_DIRS,
    REACT_TESTING_LIBRARY_ALIASES,
    TESTING_LIBRARY_ALIASES,
)
from testgen.detector.directories import find_first_existing, resolve_test_directory
from testgen.detector.dotnet import detect_dotnet_framework, has_dotnet_marker
from testgen.detector.manifest import Manifest, read_manifest
from testgen.detector.project import classify_project_type
from testgen.detector.types import DetectionResult, ProjectType, TestingFramework

logger = logging.getLogger(__name__)


def classify_testing_framework(
    root: Path,
    manifest: Manifest,
    has_dotnet: bool,
    project_type: ProjectType,
) -> DetectionResult:
    """Classify the testing framework and build the enriched result."""
    root = Path(root)

    if has_dotnet:
        framework = detect_dotnet_framework(root)
    else:
        framework = _classify_js_framework(root, manifest)

    return _enrich(root, manifest, framework, project_type)


def _classify_js_framework(root: Path, manifest: Manifest) -> TestingFramework:
    for framework, aliases in FRAMEWORK_ALIASES:
        if manifest.has_any(aliases):
            logger.debug("Framework %s from package.json dependency", framework)
            return framework

    for framework, filenames in FRAMEWORK_CONFIG_MARKERS:
        config_file = find_first_existing(root, filenames, kind="any")
        if config_file:
            logger.debug("Framework %s from config file %s", framework, config_file)
            return framework

    return TestingFramework.UNKNOWN


def _enrich(
    root: Path,
    manifest: Manifest,
    framework: TestingFramework,
    project_type: ProjectType,
) -> DetectionResult:
    if framework == TestingFramework.UNKNOWN:
        return DetectionResult(framework=framework, project_type=project_type)

    if framework.is_dotnet:
        return DetectionResult(
            framework=framework,
            project_type=project_type,
            test_directory=resolve_test_directory(root, ProjectType.DOTNET),
        )

    flags: dict[str, bool] = {}
    if framework == TestingFramework.JEST:
        flags["has_react_testing_library"] = manifest.has_any(REACT_TESTING_LIBRARY_ALIASES)
        flags["has_testing_library"] = manifest.has_any(TESTING_LIBRARY_ALIASES)

    return DetectionResult(
        framework=framework,
        project_type=project_type,
        config_file=_find_config_file(root, framework),
        test_directory=find_first_existing(root, JS_TEST_DIRS),
        version=manifest.first_version(dict(FRAMEWORK_ALIASES)[framework]),
        **flags,
    )


def _find_config_file(root: Path, framework: TestingFramework) -> Optional[str]:
    filenames = FRAMEWORK_CONFIG_FILES.get(framework)
    if not filenames:
        return None
    return find_first_existing(root, filenames, kind="any")


class FrameworkDetector:
    """Detects the testing framework of a project root."""

    def __init__(self, project_root: Path) -> None:
        self.project_root = Path(project_root)

    def detect(self) -> DetectionResult:
        manifest = read_manifest(self.project_root)
        has_dotnet = has_dotnet_marker(self.project_root)
        project_type = classify_project_type(manifest, has_dotnet)

        result = classify_testing_framework(self.project_root, manifest, has_dotnet, project_type)
        logger.info(
            "Detection complete: project_type=%s framework=%s config=%s tests=%s",
            result.project_type,
            result.framework,
            result.config_file,
            result.test_directory,
        )
        return result
