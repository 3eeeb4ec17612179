"""Template domain models."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

CLASS_NAME_KEY = "ClassName"
YEAR_KEY = "Year"


class WorkflowState(Enum):
    """Stage of the create-from-template workflow."""
    IDLE = "idle"
    TEMPLATES_GATHERED = "templates_gathered"
    AWAITING_INPUT = "awaiting_input"
    SUBMITTED = "submitted"
    CANCELLED = "cancelled"


@dataclass
class TemplateDescriptor:
    """Parsed template file."""
    menu_label: str
    # &&KEY=VALUE&& pairs, keys upper-cased
    directives: dict[str, str]
    # ##KEY## markers in body order, ClassName first
    placeholders: dict[str, str]
    body: str
    priority: int = 0
    source_path: Optional[Path] = None

    @property
    def extension(self) -> str:
        return self.directives["EXTENSION"]

    @property
    def editable_keys(self) -> list[str]:
        """Placeholder keys exposed to the user (Year is filled automatically)."""
        return [key for key in self.placeholders if key != YEAR_KEY]


@dataclass
class RenderedFile:
    """Template body with all placeholders substituted."""
    class_name: str
    extension: str
    content: str
    values: dict[str, str] = field(default_factory=dict)

    @property
    def file_name(self) -> str:
        return f"{self.class_name}{self.extension}"
