"""Configuration manager.

Resolution order, all-or-nothing:
  1. testgen.config.py at the project root, executed as a module and
     validated against ResolvedConfig
  2. auto-detection (ProjectDetector + FrameworkDetector) with static
     defaults for the winning framework

A config file that fails to execute or validate is logged and ignored;
its values are never merged with detected ones. The resolved config is
computed once per ConfigManager and cached.
"""

import logging
import pprint
import runpy
from pathlib import Path
from types import ModuleType
from typing import Any, Optional

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from testgen.config.schema import (
    DotnetConfig,
    FrameworkConfig,
    JestConfig,
    ResolvedConfig,
    VitestConfig,
)
from testgen.detector import FrameworkDetector, ProjectDetector
from testgen.detector.defaults import DEFAULT_DOTNET_TEST_DIR
from testgen.detector.types import DetectionResult, TestingFramework

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "testgen.config.py"

DEFAULT_JEST_TEST_MATCH = ("**/__tests__/**/*", "**/*.test.*", "**/*.spec.*")
DEFAULT_DOTNET_NAMESPACE = "Tests"

_CONFIG_FILE_HEADER = """\
# TestGen configuration
# This file is optional: testgen works with zero config.
# Only customize it to override auto-detected settings.

"""


class ConfigLoadError(Exception):
    """The project config file could not be executed or validated."""


class ConfigManager:
    """Resolves the project configuration for a single project root."""

    def __init__(self, project_root: Path) -> None:
        self.project_root = Path(project_root)
        self._config: Optional[ResolvedConfig] = None

    @property
    def config_path(self) -> Path:
        return self.project_root / CONFIG_FILENAME

    def has_config_file(self) -> bool:
        return self.config_path.is_file()

    def get_config(self) -> ResolvedConfig:
        """Return the resolved config, computing it on first call only."""
        if self._config is not None:
            return self._config

        config: Optional[ResolvedConfig] = None
        if self.has_config_file():
            try:
                config = self._load_config_file()
                logger.debug("Loaded config from %s", self.config_path)
            except ConfigLoadError as exc:
                logger.warning(
                    "Could not load %s, using auto-detected defaults: %s",
                    self.config_path,
                    exc,
                )

        if config is None:
            config = self._build_default_config()

        self._config = config
        return config

    def generate_config_file(self, overrides: Optional[dict[str, Any]] = None) -> Path:
        """Write the resolved config (plus overrides) to testgen.config.py.

        Overrides replace top-level keys and may use snake_case or camelCase.
        Raises pydantic.ValidationError if the merged config is invalid.
        """
        data = self.get_config().to_dict()
        for key, value in (overrides or {}).items():
            data[to_camel(key) if "_" in key else key] = value

        final = ResolvedConfig.model_validate(data)
        content = (
            _CONFIG_FILE_HEADER
            + "config = "
            + pprint.pformat(final.to_dict(), sort_dicts=False)
            + "\n"
        )
        self.config_path.write_text(content, encoding="utf-8")
        logger.info("Config file generated at %s", self.config_path)
        return self.config_path

    def _load_config_file(self) -> ResolvedConfig:
        try:
            namespace = runpy.run_path(str(self.config_path), run_name="testgen_config")
        except (Exception, SystemExit) as exc:
            raise ConfigLoadError(f"executing the file failed: {exc!r}") from exc

        try:
            return ResolvedConfig.model_validate(_exported_value(namespace))
        except ValidationError as exc:
            raise ConfigLoadError(f"invalid configuration: {exc}") from exc

    def _build_default_config(self) -> ResolvedConfig:
        project = ProjectDetector(self.project_root).detect()
        detected = FrameworkDetector(self.project_root).detect()

        return ResolvedConfig(
            project_type=project.project_type,
            testing_framework=detected.framework,
            test_directory=project.test_directory or detected.test_directory,
            source_directory=project.source_directory,
            framework_config=_framework_config(detected),
        )


def _exported_value(namespace: dict[str, Any]) -> Any:
    """Pick the exported config: `default`, then `config`, then the module itself."""
    for name in ("default", "config"):
        if namespace.get(name) is not None:
            return namespace[name]
    return {
        key: value
        for key, value in namespace.items()
        if not key.startswith("_") and not isinstance(value, ModuleType)
    }


def _framework_config(detected: DetectionResult) -> FrameworkConfig:
    framework = detected.framework

    if framework == TestingFramework.JEST:
        return FrameworkConfig(
            jest=JestConfig(
                config_file=detected.config_file,
                test_match=list(DEFAULT_JEST_TEST_MATCH),
            )
        )
    if framework == TestingFramework.VITEST:
        return FrameworkConfig(vitest=VitestConfig(config_file=detected.config_file))
    if framework in (TestingFramework.XUNIT, TestingFramework.NUNIT):
        dotnet = DotnetConfig(
            namespace=DEFAULT_DOTNET_NAMESPACE,
            test_directory=detected.test_directory or DEFAULT_DOTNET_TEST_DIR,
        )
        return FrameworkConfig(**{framework.value: dotnet})

    return FrameworkConfig()
