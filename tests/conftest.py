"""Shared fixtures for scriptforge tests."""

from pathlib import Path
from unittest import mock

import pytest

from scriptforge.core.services.script_writer import ScriptWriter
from scriptforge.core.services.template_service import TemplateService
from scriptforge.core.services.workflow import ScriptWorkflow
from scriptforge.infrastructure.template_loaders import TemplateFileLoader

MONO_TEMPLATE = (
    "&&MENUNAME=MonoBehaviour&&\n"
    "&&PRIORITY=5&&\n"
    "// Copyright ##Year##\n"
    "namespace ##Namespace##\n"
    "{\n"
    "    public class ##ClassName## : MonoBehaviour { }\n"
    "}\n"
)

EDITOR_TEMPLATE = (
    "&&MenuName = Editor Window&&\n"
    "&&Priority = 10&&\n"
    "public class ##ClassName## : EditorWindow { }\n"
)

SHADER_TEMPLATE = (
    "&&EXTENSION=.SHADER&&\n"
    'Shader "Custom/##ClassName##" { }\n'
)


def write_template(directory: Path, name: str, text: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def assets(tmp_path) -> Path:
    """Project assets folder with three templates spread over two template dirs."""
    root = tmp_path / "Assets"
    write_template(root / "ScriptTemplates", "mono.fpst", MONO_TEMPLATE)
    write_template(root / "ScriptTemplates", "Shader.fpst", SHADER_TEMPLATE)
    write_template(root / "Editor" / "ScriptTemplates", "editor.fpst", EDITOR_TEMPLATE)
    return root


@pytest.fixture
def host(tmp_path):
    output = tmp_path / "Assets" / "Scripts"
    output.mkdir(parents=True, exist_ok=True)
    host = mock.Mock()
    host.resolve_default_directory.return_value = output
    return host


@pytest.fixture
def template_service(assets) -> TemplateService:
    return TemplateService(loader=TemplateFileLoader(), search_root=str(assets))


@pytest.fixture
def writer(host) -> ScriptWriter:
    return ScriptWriter(host=host)


@pytest.fixture
def workflow(template_service, writer, host) -> ScriptWorkflow:
    return ScriptWorkflow(template_service=template_service, writer=writer, host=host)
