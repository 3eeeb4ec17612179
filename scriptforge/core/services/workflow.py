"""Create-from-template workflow - one session of the template form."""

import logging
from pathlib import Path
from typing import Optional

from ..errors import DestinationExistsError, MissingClassNameError, TemplateNotFoundError
from ..models.template import CLASS_NAME_KEY, YEAR_KEY, TemplateDescriptor, WorkflowState
from ..protocols.host import HostProtocol
from .script_writer import ScriptWriter, is_valid_class_name
from .template_service import TemplateService

logger = logging.getLogger(__name__)


class ScriptWorkflow:
    """State machine behind the template form.

    IDLE -> TEMPLATES_GATHERED -> AWAITING_INPUT -> SUBMITTED | CANCELLED.
    The descriptor table belongs to this object and is rebuilt by every
    start() call.
    """

    def __init__(
        self,
        template_service: TemplateService,
        writer: ScriptWriter,
        host: HostProtocol,
    ):
        self._template_service = template_service
        self._writer = writer
        self._host = host

        self.state = WorkflowState.IDLE
        self.directory: Optional[Path] = None
        self._templates: dict[str, TemplateDescriptor] = {}
        self._selected: Optional[str] = None

    @property
    def menu_items(self) -> list[str]:
        return list(self._templates)

    @property
    def current(self) -> Optional[TemplateDescriptor]:
        if self._selected is None:
            return None
        return self._templates[self._selected]

    def start(self) -> list[str]:
        """Gather templates and open the form on the highest priority one.

        Returns:
            Menu labels in display order.
        """
        self._reset()
        self.directory = Path(self._host.resolve_default_directory())

        for descriptor in self._template_service.gather():
            self._templates[descriptor.menu_label] = descriptor
        self.state = WorkflowState.TEMPLATES_GATHERED

        if not self._templates:
            logger.warning("No script templates found")
            return []

        self.select(self.menu_items[0])
        return self.menu_items

    def select(self, label: str) -> TemplateDescriptor:
        self._require(WorkflowState.TEMPLATES_GATHERED, WorkflowState.AWAITING_INPUT)
        if label not in self._templates:
            raise TemplateNotFoundError(label)

        self._selected = label
        self.state = WorkflowState.AWAITING_INPUT
        return self._templates[label]

    def editable_fields(self) -> dict[str, str]:
        descriptor = self._current_or_raise()
        return {key: descriptor.placeholders[key] for key in descriptor.editable_keys}

    def set_value(self, key: str, value: str) -> None:
        self._require(WorkflowState.AWAITING_INPUT)
        descriptor = self._current_or_raise()
        if key == YEAR_KEY or key not in descriptor.placeholders:
            raise KeyError(key)
        descriptor.placeholders[key] = value

    def update(self, values: dict[str, str]) -> None:
        for key, value in values.items():
            self.set_value(key, value)

    @property
    def can_submit(self) -> bool:
        descriptor = self.current
        return (
            self.state == WorkflowState.AWAITING_INPUT
            and descriptor is not None
            and is_valid_class_name(descriptor.placeholders[CLASS_NAME_KEY])
        )

    @property
    def preview_path(self) -> Optional[Path]:
        descriptor = self.current
        if descriptor is None or self.directory is None:
            return None
        rendered = self._writer.render(descriptor)
        return self._writer.destination_path(self.directory, rendered)

    def submit(self) -> Path:
        """Write the selected template with the entered values.

        Returns:
            Path of the created file.

        Raises:
            MissingClassNameError: ClassName is empty or not a file name.
            DestinationExistsError: Target file exists; the form is closed.
            OSError: The file could not be written; the form stays open.
        """
        self._require(WorkflowState.AWAITING_INPUT)
        if not self.can_submit:
            raise MissingClassNameError()

        descriptor = self._current_or_raise()
        self.state = WorkflowState.SUBMITTED
        try:
            path = self._writer.create(descriptor, descriptor.placeholders, self.directory)
        except DestinationExistsError as e:
            logger.error(str(e))
            self._reset()
            raise
        except Exception:
            self.state = WorkflowState.AWAITING_INPUT
            raise

        self._reset()
        return path

    def cancel(self) -> None:
        if self.state != WorkflowState.IDLE:
            self.state = WorkflowState.CANCELLED
            logger.debug("Template form cancelled")
        self._reset()

    def _reset(self) -> None:
        self._templates = {}
        self._selected = None
        self.state = WorkflowState.IDLE

    def _current_or_raise(self) -> TemplateDescriptor:
        descriptor = self.current
        if descriptor is None:
            raise RuntimeError("No template selected")
        return descriptor

    def _require(self, *states: WorkflowState) -> None:
        if self.state not in states:
            raise RuntimeError(
                f"Invalid workflow state: {self.state.value} "
                f"(expected {', '.join(s.value for s in states)})"
            )
