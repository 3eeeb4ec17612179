"""Script writer - renders a template and creates the new file."""

import logging
from pathlib import Path, PurePath
from typing import Mapping, Optional

from ..errors import DestinationExistsError
from ..models.template import CLASS_NAME_KEY, RenderedFile, TemplateDescriptor
from ..protocols.host import HostProtocol

logger = logging.getLogger(__name__)


def normalize_class_name(value: str) -> str:
    """Drop any directory and trailing extension typed into ClassName."""
    return PurePath(value).stem if value else ""


def is_valid_class_name(value: str) -> bool:
    return normalize_class_name(value) not in ("", ".", "..")


class ScriptWriter:
    """Turns a descriptor and user values into a file on disk."""

    def __init__(self, host: HostProtocol):
        self._host = host

    def render(
        self,
        descriptor: TemplateDescriptor,
        values: Optional[Mapping[str, str]] = None,
    ) -> RenderedFile:
        values = values or {}
        resolved = {
            key: values.get(key, default)
            for key, default in descriptor.placeholders.items()
        }

        content = descriptor.body
        for key, value in resolved.items():
            content = content.replace(f"##{key}##", value)

        return RenderedFile(
            class_name=normalize_class_name(resolved[CLASS_NAME_KEY]),
            extension=descriptor.extension.lower(),
            content=content,
            values=resolved,
        )

    @staticmethod
    def destination_path(directory: Path, rendered: RenderedFile) -> Path:
        return Path(directory) / rendered.file_name

    def write(self, path: Path, content: str) -> Path:
        """Create a new file, never replacing an existing one.

        Args:
            path: Destination file.
            content: Text to write.

        Returns:
            The written path.

        Raises:
            DestinationExistsError: If path already exists.
        """
        path = Path(path)
        try:
            with open(path, "x", encoding="utf-8", newline="") as f:
                f.write(content)
        except FileExistsError:
            raise DestinationExistsError(path) from None

        logger.info(f"Created {path}")
        self._host.notify_file_created(path)
        return path

    def create(
        self,
        descriptor: TemplateDescriptor,
        values: Optional[Mapping[str, str]],
        directory: Path,
    ) -> Path:
        rendered = self.render(descriptor, values)
        return self.write(self.destination_path(directory, rendered), rendered.content)
