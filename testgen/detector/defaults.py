"""Marker tables used by the detectors.

Order matters in every table below: the first matching entry wins.
"""

from testgen.detector.types import ProjectType, TestingFramework

MANIFEST_FILENAME = "package.json"

DOTNET_PROJECT_SUFFIX = ".csproj"

# Dependency aliases that count as evidence for each project type.
PROJECT_TYPE_ALIASES: list[tuple[ProjectType, tuple[str, ...]]] = [
    (ProjectType.REACT, ("react", "react-dom")),
    (ProjectType.VUE, ("vue", "@vue/core")),
    (ProjectType.ANGULAR, ("@angular/core",)),
    (ProjectType.NODEJS, ("express", "fastify", "koa")),
]

# Dependency aliases that count as evidence for each JS testing framework.
# The companion globals package counts as jest itself.
FRAMEWORK_ALIASES: list[tuple[TestingFramework, tuple[str, ...]]] = [
    (TestingFramework.JEST, ("jest", "@jest/globals")),
    (TestingFramework.VITEST, ("vitest",)),
    (TestingFramework.MOCHA, ("mocha",)),
    (TestingFramework.JASMINE, ("jasmine", "jasmine-core")),
]

# Config files whose mere presence identifies a framework when no
# dependency evidence exists. Only jest and vitest define any.
FRAMEWORK_CONFIG_MARKERS: list[tuple[TestingFramework, tuple[str, ...]]] = [
    (TestingFramework.JEST, ("jest.config.js", "jest.config.ts", "jest.config.json")),
    (TestingFramework.VITEST, ("vitest.config.ts", "vitest.config.js")),
]

# Config files reported for the winning framework (first existing wins).
FRAMEWORK_CONFIG_FILES: dict[TestingFramework, tuple[str, ...]] = {
    TestingFramework.JEST: (
        "jest.config.js",
        "jest.config.ts",
        "jest.config.json",
        "jest.config.mjs",
    ),
    TestingFramework.VITEST: ("vitest.config.ts", "vitest.config.js", "vite.config.ts"),
}

# Text fragments searched (case-insensitive) inside .csproj files.
DOTNET_FRAMEWORK_MARKERS: list[tuple[str, TestingFramework]] = [
    ("xunit", TestingFramework.XUNIT),
    ("nunit", TestingFramework.NUNIT),
    ("mstest", TestingFramework.MSTEST),
]

DEFAULT_DOTNET_FRAMEWORK = TestingFramework.XUNIT

REACT_TESTING_LIBRARY_ALIASES = ("@testing-library/react", "@testing-library/react-hooks")

TESTING_LIBRARY_ALIASES = (
    "@testing-library/react",
    "@testing-library/vue",
    "@testing-library/angular",
    "@testing-library/dom",
)

TYPESCRIPT_CONFIG_FILES = ("tsconfig.json", "tsconfig.app.json")

JS_TEST_DIRS = ("__tests__", "tests", "test", "spec", "specs")

DOTNET_TEST_DIRS = ("Tests", "tests", "Test", "test")
DEFAULT_DOTNET_TEST_DIR = "Tests"

SOURCE_DIRS = ("src", "lib", "app", "source")
DEFAULT_SOURCE_DIR = "src"

# Directories never worth descending into when looking for .csproj files
SKIPPED_WALK_DIRS = frozenset({".git", "node_modules"})
