"""Project configuration: optional config file with auto-detected defaults.

Public API:
    ConfigManager(root).get_config() -> ResolvedConfig
"""

from testgen.config.manager import CONFIG_FILENAME, ConfigLoadError, ConfigManager
from testgen.config.schema import (
    DotnetConfig,
    FrameworkConfig,
    JestConfig,
    ResolvedConfig,
    VitestConfig,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigLoadError",
    "ConfigManager",
    "DotnetConfig",
    "FrameworkConfig",
    "JestConfig",
    "ResolvedConfig",
    "VitestConfig",
]
