"""Resolved project configuration models.

The same models validate a user-supplied testgen.config.py and hold the
auto-detected defaults. Keys are accepted in snake_case or camelCase;
unknown keys are rejected so a typo never passes silently.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from testgen.detector.types import ProjectType, TestingFramework


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


class JestConfig(_ConfigModel):
    config_file: Optional[str] = None
    test_match: Optional[list[str]] = None


class VitestConfig(_ConfigModel):
    config_file: Optional[str] = None


class DotnetConfig(_ConfigModel):
    namespace: Optional[str] = None
    test_directory: Optional[str] = None


class FrameworkConfig(_ConfigModel):
    """Per-framework settings. Only the active framework's slot is set."""

    jest: Optional[JestConfig] = None
    vitest: Optional[VitestConfig] = None
    xunit: Optional[DotnetConfig] = None
    nunit: Optional[DotnetConfig] = None


class ResolvedConfig(_ConfigModel):
    """Final configuration handed to the prompt layer."""

    project_type: ProjectType
    testing_framework: TestingFramework
    test_directory: Optional[str] = None
    source_directory: Optional[str] = None
    framework_config: FrameworkConfig = FrameworkConfig()

    def to_dict(self) -> dict:
        """camelCase, JSON-ready rendering without unset values."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
