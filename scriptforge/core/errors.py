"""Errors raised by the template workflow."""
from pathlib import Path


class ScriptForgeError(Exception):
    """Base class for workflow errors."""


class DestinationExistsError(ScriptForgeError, FileExistsError):
    """Target file is already on disk; nothing was written."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"File already exists: {self.path}")


class MissingClassNameError(ScriptForgeError, ValueError):
    """Submit attempted with an empty ClassName."""

    def __init__(self):
        super().__init__("ClassName must not be empty")


class TemplateNotFoundError(ScriptForgeError, KeyError):
    """No template with the requested menu label."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(label)

    def __str__(self) -> str:
        return f"Unknown template: {self.label}"
