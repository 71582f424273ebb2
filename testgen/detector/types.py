"""Shared types for the detector module.

Every detector output is one of the frozen dataclasses below. They are
built once per detection run and never mutated afterwards.
"""

from dataclasses import asdict, dataclass
from enum import StrEnum
from typing import Optional


class ProjectType(StrEnum):
    """Application type inferred from the manifest and build files."""

    REACT = "react"
    VUE = "vue"
    ANGULAR = "angular"
    NODEJS = "nodejs"
    DOTNET = "dotnet"
    UNKNOWN = "unknown"


class TestingFramework(StrEnum):
    """Testing framework in use (or implied) by the project."""

    __test__ = False  # keep pytest from collecting this enum

    JEST = "jest"
    VITEST = "vitest"
    MOCHA = "mocha"
    JASMINE = "jasmine"
    XUNIT = "xunit"
    NUNIT = "nunit"
    MSTEST = "mstest"
    UNKNOWN = "unknown"

    @property
    def is_dotnet(self) -> bool:
        return self in _DOTNET_FRAMEWORKS


_DOTNET_FRAMEWORKS = frozenset(
    {TestingFramework.XUNIT, TestingFramework.NUNIT, TestingFramework.MSTEST}
)


@dataclass(frozen=True)
class DetectionResult:
    """Testing framework detection output for a project root.

    Optional fields are only filled in for the winning framework: a jest
    project gets its config file and capability flags, a .NET project gets
    its test directory, an unknown project gets nothing.
    """

    framework: TestingFramework
    project_type: ProjectType
    config_file: Optional[str] = None
    test_directory: Optional[str] = None
    version: Optional[str] = None
    has_react_testing_library: Optional[bool] = None
    has_testing_library: Optional[bool] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["framework"] = self.framework.value
        data["project_type"] = self.project_type.value
        return data


@dataclass(frozen=True)
class DetectedProject:
    """Project layout detection output."""

    project_type: ProjectType
    source_directory: Optional[str] = None
    test_directory: Optional[str] = None
    has_typescript: bool = False
    has_react: bool = False
    has_vue: bool = False
    has_angular: bool = False

    def to_dict(self) -> dict:
        data = asdict(self)
        data["project_type"] = self.project_type.value
        return data
