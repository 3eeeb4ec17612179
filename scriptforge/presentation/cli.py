"""
Command-line interface for scriptforge.

Usage:
    scriptforge list
    scriptforge create <template> --class-name NAME [--set KEY=VALUE ...] [--dir DIR]
    scriptforge ui

Examples:
    scriptforge create MonoBehaviour --class-name PlayerController
    scriptforge create "Editor Window" --class-name LevelTools --set Namespace=Game.Editor
"""
import argparse
import logging
import subprocess
import sys
from pathlib import Path
from typing import Optional

from scriptforge.config.settings import Settings, settings
from scriptforge.container import Container, configure_container
from scriptforge.core.errors import ScriptForgeError
from scriptforge.core.models.template import CLASS_NAME_KEY, WorkflowState
from scriptforge.core.protocols.host import HostProtocol
from scriptforge.core.services.template_service import TemplateService
from scriptforge.core.services.workflow import ScriptWorkflow
from scriptforge.infrastructure.hosts import LocalHost

logger = logging.getLogger(__name__)


def _key_value(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{text}'")
    return key.strip(), value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scriptforge",
        description="Create source files from project script templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  scriptforge list\n"
            "  scriptforge create MonoBehaviour --class-name PlayerController\n"
            "  scriptforge ui\n"
        ),
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List templates in menu order")

    create = sub.add_parser("create", help="Create a file from a template")
    create.add_argument("template", help="Template menu name")
    create.add_argument("--class-name", "-c", required=True,
                        help="Class name, also used as the file name")
    create.add_argument("--set", "-s", dest="values", action="append",
                        type=_key_value, default=[], metavar="KEY=VALUE",
                        help="Placeholder value, may be repeated")
    create.add_argument("--dir", "-d",
                        help="Output directory (default: current selection or assets root)")
    create.add_argument("--selected",
                        help="Selected project entry; new files go to its folder")

    ui = sub.add_parser("ui", help="Open the template form in the browser")
    ui.add_argument("--host", help="Bind address")
    ui.add_argument("--port", type=int, help="Port")

    return parser


def cmd_list(app: Container) -> int:
    templates = app.resolve(TemplateService).gather()
    if not templates:
        print("No script templates found")
        return 0

    print(f"  {'Template':<30} {'Priority':<10} {'Ext':<8} {'Source'}")
    for descriptor in templates:
        print(
            f"  {descriptor.menu_label:<30} {descriptor.priority:<10} "
            f"{descriptor.extension.lower():<8} {descriptor.source_path}"
        )
    return 0


def cmd_create(app: Container, opts: argparse.Namespace) -> int:
    workflow = app.resolve(ScriptWorkflow)
    try:
        workflow.start()
        workflow.select(opts.template)
        if opts.dir:
            workflow.directory = Path(opts.dir)

        workflow.update(dict(opts.values))
        workflow.set_value(CLASS_NAME_KEY, opts.class_name)
        path = workflow.submit()
    except ScriptForgeError as e:
        print(f"ERROR: {e}")
        return 1
    except KeyError as e:
        print(f"ERROR: Unknown placeholder {e} for template '{opts.template}'")
        return 1
    except OSError as e:
        print(f"ERROR: Could not write file: {e}")
        return 1
    finally:
        if workflow.state != WorkflowState.IDLE:
            workflow.cancel()

    print(f"Created {path}")
    return 0


def cmd_ui(app_settings: Settings, opts: argparse.Namespace) -> int:
    app_path = Path(__file__).with_name("chainlit_app.py")
    logger.info("Starting Chainlit...")
    result = subprocess.run(
        [
            sys.executable,
            "-m",
            "chainlit",
            "run",
            str(app_path),
            "--host",
            opts.host or app_settings.chainlit_host,
            "--port",
            str(opts.port or app_settings.chainlit_port),
        ]
    )
    return result.returncode


def run_cli(args: list, app_settings: Optional[Settings] = None) -> int:
    """Run the CLI with given arguments. Returns exit code."""
    app_settings = app_settings or settings
    opts = build_parser().parse_args(args)

    app = configure_container(app_settings, Container())
    if getattr(opts, "selected", None):
        app.provide(
            HostProtocol,
            LocalHost(
                assets_root=str(Path(app_settings.project_root) / app_settings.assets_dir),
                selected_path=opts.selected,
                editor_command=app_settings.editor_command,
            ),
        )

    if opts.command == "list":
        return cmd_list(app)
    if opts.command == "create":
        return cmd_create(app, opts)
    return cmd_ui(app_settings, opts)


def main():
    """CLI entry point."""
    logging.basicConfig(level=settings.log_level.upper(), format="%(message)s")
    sys.exit(run_cli(sys.argv[1:]))


if __name__ == "__main__":
    main()
