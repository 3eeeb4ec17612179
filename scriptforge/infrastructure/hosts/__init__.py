"""Host environment implementations."""
from .local_host import LocalHost

__all__ = ["LocalHost"]
