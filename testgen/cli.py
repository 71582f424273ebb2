"""testgen command line.

Thin glue over the detector and config manager: every decision is made
by the core, the commands only report it (and `init` creates the test
directory it was told to use).
"""

import json
from pathlib import Path

import click

from testgen.config import ConfigManager
from testgen.core.logging import configure_logging
from testgen.core.settings import get_settings
from testgen.detector import FrameworkDetector, ProjectDetector, ProjectType, TestingFramework
from testgen.detector.defaults import DEFAULT_DOTNET_TEST_DIR
from testgen.detector.manifest import read_manifest
from testgen.ide import IDE, detect_ide

DEFAULT_JS_TEST_DIR = "__tests__"

# npm scripts checked, in order, by `testgen run`
TEST_SCRIPTS = ("test", "test:unit", "test:watch", "test:coverage")

FALLBACK_TEST_COMMANDS: dict[TestingFramework, str] = {
    TestingFramework.JEST: "npx jest",
    TestingFramework.VITEST: "npx vitest run",
    TestingFramework.MOCHA: "npx mocha",
    TestingFramework.JASMINE: "npx jasmine",
    TestingFramework.XUNIT: "dotnet test",
    TestingFramework.NUNIT: "dotnet test",
    TestingFramework.MSTEST: "dotnet test",
}

_NO_FRAMEWORK_HELP = """\
No testing framework detected.
Install one first, for example:
  npm install --save-dev jest      (or vitest, mocha, jasmine)
  dotnet add package xunit         (for .NET projects)
or pin it in testgen.config.py:
  config = {"projectType": "react", "testingFramework": "jest"}"""

project_root_option = click.option(
    "--project-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Root directory of the project to inspect",
)


@click.group()
@click.option("--debug", is_flag=True, help="Log detector decisions to stderr")
def main(debug):
    """Detect a project's testing setup for AI test generation."""
    settings = get_settings()
    configure_logging(debug=debug or settings.debug, json_logs=settings.log_json)


@main.command()
@project_root_option
@click.pass_context
def init(ctx, project_root):
    """Detect the project setup and create its test directory."""
    click.echo("Initializing testgen...\n")
    click.echo("Detecting project configuration...")

    project = ProjectDetector(project_root).detect()
    detected = FrameworkDetector(project_root).detect()
    config = ConfigManager(project_root).get_config()

    click.echo(f"  Project type:      {config.project_type}")
    click.echo(f"  Testing framework: {config.testing_framework}")
    if detected.config_file:
        click.echo(f"  Config file:       {detected.config_file}")
    if detected.test_directory:
        click.echo(f"  Test directory:    {detected.test_directory}")

    if config.testing_framework == TestingFramework.UNKNOWN:
        click.echo("\n" + _NO_FRAMEWORK_HELP, err=True)
        ctx.exit(1)

    default_dir = (
        DEFAULT_DOTNET_TEST_DIR if project.project_type == ProjectType.DOTNET else DEFAULT_JS_TEST_DIR
    )
    test_dir = config.test_directory or detected.test_directory or default_dir
    target = project_root / test_dir

    click.echo("\nCreating test directory...")
    if target.exists():
        click.echo(f"  Test directory already exists: {test_dir}")
    else:
        target.mkdir(parents=True)
        click.echo(f"  Created {test_dir}")

    ide = detect_ide(project_root)
    if ide != IDE.UNKNOWN:
        click.echo(f"\nIDE detected: {ide}")

    click.echo("\nSetup complete.")


@main.command()
@project_root_option
def detect(project_root):
    """Print the resolved configuration as JSON."""
    config = ConfigManager(project_root).get_config()
    click.echo(json.dumps(config.to_dict(), indent=2))


@main.command()
@project_root_option
@click.pass_context
def run(ctx, project_root):
    """Report the command that runs the project's tests."""
    manifest = read_manifest(project_root)
    script = next((name for name in TEST_SCRIPTS if name in manifest.scripts), None)
    if script:
        click.echo(f"Found test script: npm run {script}")
        return

    config = ConfigManager(project_root).get_config()
    command = FALLBACK_TEST_COMMANDS.get(config.testing_framework)
    if command is None:
        click.echo(_NO_FRAMEWORK_HELP, err=True)
        ctx.exit(1)

    click.echo(f"No test script in package.json. Run tests with: {command}")


if __name__ == "__main__":
    main()
