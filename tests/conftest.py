"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from pathlib import Path
from typing import Any, Dict


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def write_json(temp_dir):
    """Write a value as JSON into the temporary directory."""
    def _write(data: Any, name: str = "input.json") -> Path:
        path = temp_dir / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_scene_json() -> Dict[str, Any]:
    """Scene-like document mixing values, nested objects and arrays."""
    return {
        "scene": {
            "path": "res/box.gpb",
            "activeCamera": "camera",
            "node": {
                "url": "box",
                "material": "res/box.material",
                "collisionObject": {
                    "type": "RIGID_BODY",
                    "shape": "BOX",
                    "mass": 1.5
                }
            },
            "physics": {
                "gravity": [0, -9.8, 0]
            }
        },
        "lights": [
            {"type": "DIRECTIONAL", "color": [1.0, 1.0, 1.0]},
            {"type": "POINT", "range": 10}
        ],
        "enabled": True,
        "tag": None
    }
