"""Detect which AI-capable IDE a project is opened in, from its marker folder."""

from enum import StrEnum
from pathlib import Path


class IDE(StrEnum):
    CURSOR = "cursor"
    VSCODE = "vscode"
    JETBRAINS = "jetbrains"
    CODEIUM = "codeium"
    UNKNOWN = "unknown"


# First match wins.
IDE_MARKERS: list[tuple[str, IDE]] = [
    (".cursor", IDE.CURSOR),
    (".vscode", IDE.VSCODE),
    (".idea", IDE.JETBRAINS),
    (".codeium", IDE.CODEIUM),
]


def detect_ide(project_root: Path) -> IDE:
    root = Path(project_root)
    for marker, ide in IDE_MARKERS:
        if (root / marker).exists():
            return ide
    return IDE.UNKNOWN
