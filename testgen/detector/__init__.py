"""Detector module for inferring a project's type and testing framework.

Public API:
    FrameworkDetector(root).detect() -> DetectionResult
    ProjectDetector(root).detect() -> DetectedProject
"""

from testgen.detector.framework import FrameworkDetector, classify_testing_framework
from testgen.detector.manifest import Manifest, read_manifest
from testgen.detector.project import ProjectDetector, classify_project_type
from testgen.detector.types import (
    DetectedProject,
    DetectionResult,
    ProjectType,
    TestingFramework,
)

__all__ = [
    "DetectedProject",
    "DetectionResult",
    "FrameworkDetector",
    "Manifest",
    "ProjectDetector",
    "ProjectType",
    "TestingFramework",
    "classify_project_type",
    "classify_testing_framework",
    "read_manifest",
]
