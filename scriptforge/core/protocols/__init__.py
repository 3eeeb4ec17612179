"""Protocol interfaces for dependency injection."""
from .host import HostProtocol
from .template_loader import TemplateLoaderProtocol

__all__ = [
    "HostProtocol",
    "TemplateLoaderProtocol",
]
