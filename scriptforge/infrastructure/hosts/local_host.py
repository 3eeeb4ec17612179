import logging
import shlex
import subprocess
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class LocalHost:
    """Plain file system host: selection comes from config, files open in an editor."""

    def __init__(
        self,
        assets_root: str = "./Assets",
        selected_path: Optional[str] = None,
        editor_command: Optional[str] = None,
    ):
        self._assets_root = Path(assets_root)
        self._selected_path = Path(selected_path) if selected_path else None
        self._editor_command = editor_command

    def resolve_default_directory(self) -> Path:
        selected = self._selected_path
        if selected is None:
            return self._assets_root

        if selected.suffix:
            return selected.parent
        return selected

    def notify_file_created(self, path: Path) -> None:
        if not self._editor_command:
            logger.info(f"New file: {path}")
            return

        command = shlex.split(self._editor_command) + [str(path)]
        logger.info(f"Opening {path} with {command[0]}")
        try:
            subprocess.Popen(command)
        except OSError as e:
            logger.error(f"Failed to open {path}: {e}")
