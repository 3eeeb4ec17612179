"""Domain models."""
from .template import (
    CLASS_NAME_KEY,
    YEAR_KEY,
    RenderedFile,
    TemplateDescriptor,
    WorkflowState,
)

__all__ = [
    "CLASS_NAME_KEY",
    "YEAR_KEY",
    "RenderedFile",
    "TemplateDescriptor",
    "WorkflowState",
]
