"""Core business services."""
from .template_parser import parse_template
from .template_service import TemplateService
from .script_writer import ScriptWriter
from .workflow import ScriptWorkflow

__all__ = [
    "parse_template",
    "TemplateService",
    "ScriptWriter",
    "ScriptWorkflow",
]
