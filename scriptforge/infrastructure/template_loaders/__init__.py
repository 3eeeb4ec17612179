"""Template file loader implementations."""
from .text_loader import TemplateFileLoader

__all__ = ["TemplateFileLoader"]
