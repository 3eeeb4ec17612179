"""Template service - discovery of script templates in a project."""

import logging
from pathlib import Path
from typing import Optional

from ..models.template import TemplateDescriptor
from ..protocols.template_loader import TemplateLoaderProtocol
from .template_parser import DEFAULT_EXTENSION, parse_template

logger = logging.getLogger(__name__)


class TemplateService:
    """Finds template files and parses them into menu entries."""

    def __init__(
        self,
        loader: TemplateLoaderProtocol,
        search_root: str = "./Assets",
        templates_dir_name: str = "ScriptTemplates",
        default_extension: str = DEFAULT_EXTENSION,
    ):
        """Initialize template service.

        Args:
            loader: Reads template files.
            search_root: Directory searched recursively for template folders.
            templates_dir_name: Name of folders holding templates.
            default_extension: Output extension for templates without one.
        """
        self._loader = loader
        self._search_root = Path(search_root)
        self._templates_dir_name = templates_dir_name
        self._default_extension = default_extension

    def find_template_dirs(self) -> list[Path]:
        if not self._search_root.is_dir():
            logger.warning(f"Template search root not found: {self._search_root}")
            return []

        return sorted(
            path
            for path in self._search_root.rglob(self._templates_dir_name)
            if path.is_dir()
        )

    def find_template_files(self) -> list[Path]:
        paths: list[Path] = []
        for directory in self.find_template_dirs():
            paths.extend(
                sorted(p for p in directory.iterdir() if self._loader.supports(p))
            )
        return paths

    def load_template(self, file_path: Path) -> Optional[TemplateDescriptor]:
        descriptor = parse_template(
            self._loader.load(file_path),
            file_path.name,
            default_extension=self._default_extension,
        )
        if descriptor is None:
            logger.debug(f"Skip empty template: {file_path}")
            return None

        descriptor.source_path = file_path
        return descriptor

    def gather(self) -> list[TemplateDescriptor]:
        """Parse every template in the project.

        Returns:
            Descriptors ordered by descending priority. Templates whose
            menu label is already taken are skipped.
        """
        templates: dict[str, TemplateDescriptor] = {}

        for file_path in self.find_template_files():
            descriptor = self.load_template(file_path)
            if descriptor is None:
                continue

            if descriptor.menu_label in templates:
                logger.warning(
                    f"Duplicate template '{descriptor.menu_label}' in {file_path}, "
                    f"keeping {templates[descriptor.menu_label].source_path}"
                )
                continue

            templates[descriptor.menu_label] = descriptor

        logger.info(f"Found {len(templates)} templates under {self._search_root}")
        return sort_by_priority(templates.values())

    def list_templates(self) -> list[str]:
        return [descriptor.menu_label for descriptor in self.gather()]


def sort_by_priority(descriptors) -> list[TemplateDescriptor]:
    """Highest priority first; ties keep discovery order."""
    return sorted(descriptors, key=lambda d: d.priority, reverse=True)
