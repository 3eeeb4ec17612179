"""Template loader protocol for dependency injection."""
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TemplateLoaderProtocol(Protocol):
    """Protocol for reading template files from disk."""

    def supports(self, file_path: Path) -> bool:
        ...

    def load(self, file_path: Path) -> str:
        ...
