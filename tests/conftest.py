import json
import logging
from pathlib import Path
from typing import Any, Dict

import pytest

from resource_docgen.config_manager import DocumentationConfig
from resource_docgen.models import ResourceRecord, parse_resource_record


# ============================================================================
# Environment isolation
# ============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep DOCGEN_* and LOG_* settings from the outer shell out of tests."""
    for key in (
        "DOCGEN_OUTPUT_DIR",
        "DOCGEN_FILE_EXTENSION",
        "DOCGEN_EDIT_URL_TEMPLATE",
        "DOCGEN_PRODUCT_NAME",
        "DOCGEN_TYPE_LABEL",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "LOG_FILE",
        "LOG_JSON",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


# ============================================================================
# Resource record fixtures
# ============================================================================


@pytest.fixture
def widget_data() -> Dict[str, Any]:
    """Raw inspector entry for a small resource."""
    return {
        "description": "widget manages a widget",
        "default_action": ["create"],
        "actions": ["create", "delete", "nothing"],
        "properties": [
            {"name": "size", "is": ["Integer"], "default": "10"},
            {"name": "name", "is": ["String"]},
        ],
    }


@pytest.fixture
def widget_record(widget_data) -> ResourceRecord:
    return parse_resource_record("widget", widget_data)


@pytest.fixture
def service_data() -> Dict[str, Any]:
    """Raw inspector entry exercising every optional field."""
    return {
        "description": "Use the service resource to manage a service.",
        "default_action": ["nothing"],
        "actions": ["start", "stop", "enable", "nothing", "restart"],
        "examples": "service 'apache' do\n  action :start\nend\n",
        "introduced": "12.0",
        "preview": False,
        "properties": [
            {
                "name": "service_name",
                "is": ["String"],
                "name_property": True,
                "description": "An optional property to set the service name.",
            },
            {
                "name": "supports",
                "is": ["Hash"],
                "default": {"restart": None, "reload": None, "status": None},
            },
            {
                "name": "run_levels",
                "is": ["Array"],
                "default": "lazy default",
                "introduced": "14.0",
            },
            {
                "name": "pattern",
                "is": ["String", None],
                "deprecated": True,
            },
            {
                "name": "parameters",
                "is": ["Hash", "TrueClass", "FalseClass"],
                "default": False,
            },
        ],
    }


@pytest.fixture
def doc_config(tmp_path: Path) -> DocumentationConfig:
    return DocumentationConfig(output_directory=str(tmp_path / "out"))


@pytest.fixture
def inspector_file(tmp_path: Path, widget_data, service_data) -> Path:
    """Inspector JSON containing eligible and denylisted resources."""
    data = {
        "l_w_r_p_base": {"actions": ["nothing"], "properties": []},
        "widget": widget_data,
        "linux_user": {"actions": ["create"], "properties": []},
        "service": service_data,
        "": {"actions": ["nothing"]},
    }
    path = tmp_path / "resources.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
