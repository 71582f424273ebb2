"""Project and testing framework detection for AI test generation."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("testgen-ai")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"
