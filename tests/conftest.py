"""
This file contains shared fixtures for all tests.
"""
from pathlib import Path
from typing import Any, Callable, Dict

import pytest
import yaml
from unittest.mock import MagicMock


@pytest.fixture
def valid_configuration() -> Dict[str, str]:
    """A selfSignConfiguration in wire form that passes every check."""
    return {
        "caRotateInterval": "168h",
        "caOverlapInterval": "24h",
        "certRotateInterval": "24h",
        "certOverlapInterval": "8h",
    }


@pytest.fixture
def nmstate_manifest(valid_configuration: Dict[str, str]) -> Dict[str, Any]:
    return {
        "apiVersion": "nmstate.io/v1beta1",
        "kind": "NMState",
        "metadata": {"name": "nmstate", "uid": "1234", "resourceVersion": "42"},
        "spec": {"selfSignConfiguration": valid_configuration},
    }


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[Any], Path]:
    """Writes a document to a YAML file and returns its path."""

    def _write(doc: Any, name: str = "nmstate.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(doc))
        return path

    return _write


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()
