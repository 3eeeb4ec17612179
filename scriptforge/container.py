import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Container:
    """Service registry for one front end.

    Services are shared by default. The workflow is registered with
    shared=False so every resolve opens a fresh form session. Front ends
    can provide() a ready instance, e.g. a host bound to their selection.
    """

    _providers: dict[type, Callable[[], Any]] = field(default_factory=dict)
    _shared: set[type] = field(default_factory=set)
    _built: dict[type, Any] = field(default_factory=dict)
    _provided: dict[type, Any] = field(default_factory=dict)

    def register(
        self, interface: type[T], factory: Callable[[], T], shared: bool = True
    ) -> None:
        """Register factory for interface.

        Args:
            interface: Interface type.
            factory: Factory function.
            shared: Build once and reuse, False for per-session objects.
        """
        self._providers[interface] = factory
        self._built.pop(interface, None)
        if shared:
            self._shared.add(interface)
        else:
            self._shared.discard(interface)

    def provide(self, interface: type[T], instance: T) -> None:
        """Bind an existing instance; it wins over any registered factory."""
        self._provided[interface] = instance

    def resolve(self, interface: type[T]) -> T:
        if interface in self._provided:
            return self._provided[interface]
        if interface in self._built:
            return self._built[interface]

        try:
            factory = self._providers[interface]
        except KeyError:
            raise KeyError(f"No factory registered for {interface.__name__}") from None

        instance = factory()
        if interface in self._shared:
            self._built[interface] = instance
        return instance

    def __contains__(self, interface: type) -> bool:
        return interface in self._provided or interface in self._providers

    def reset(self) -> None:
        """Drop built shared instances; provided ones are kept."""
        self._built.clear()


container = Container()


def configure_container(settings: Settings, target: Container = container) -> Container:
    """Configure container with all dependencies.

    Args:
        settings: Application settings.
        target: Container to fill, the module-level one by default.

    Returns:
        Configured container.
    """
    from .core.protocols.host import HostProtocol
    from .core.protocols.template_loader import TemplateLoaderProtocol
    from .core.services.script_writer import ScriptWriter
    from .core.services.template_service import TemplateService
    from .core.services.workflow import ScriptWorkflow
    from .infrastructure.hosts.local_host import LocalHost
    from .infrastructure.template_loaders.text_loader import TemplateFileLoader

    assets_root = Path(settings.project_root) / settings.assets_dir

    target.register(
        HostProtocol,
        lambda: LocalHost(
            assets_root=str(assets_root),
            selected_path=settings.selected_path,
            editor_command=settings.editor_command,
        ),
    )

    target.register(
        TemplateLoaderProtocol,
        lambda: TemplateFileLoader(settings.template_extension),
    )

    target.register(
        TemplateService,
        lambda: TemplateService(
            loader=target.resolve(TemplateLoaderProtocol),
            search_root=str(assets_root),
            templates_dir_name=settings.templates_dir_name,
            default_extension=settings.default_extension,
        ),
    )

    target.register(
        ScriptWriter,
        lambda: ScriptWriter(host=target.resolve(HostProtocol)),
    )

    # A fresh workflow per invocation, descriptors are never shared
    target.register(
        ScriptWorkflow,
        lambda: ScriptWorkflow(
            template_service=target.resolve(TemplateService),
            writer=target.resolve(ScriptWriter),
            host=target.resolve(HostProtocol),
        ),
        shared=False,
    )

    logger.debug("Container configured")
    return target
