"""Host environment protocol for dependency injection."""
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class HostProtocol(Protocol):
    """Protocol for the environment the tool is embedded in."""

    def resolve_default_directory(self) -> Path:
        """Directory new files are created in unless the user picks another.

        Returns:
            Folder of the current selection, or the project assets root.
        """
        ...

    def notify_file_created(self, path: Path) -> None:
        """Refresh the host's view of the file system and focus the new file.

        Args:
            path: Path of the file that was just written.
        """
        ...
