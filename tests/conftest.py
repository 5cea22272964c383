"""Configuration for pytest."""

import json
import os
import sys

import pytest

# Add the src directory to the Python path to enable proper module resolution
# when the package has not been installed
test_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(test_dir)
src_dir = os.path.join(project_root, "src")

if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

VECTORS_PATH = os.path.join(test_dir, "data", "punycode_vectors.json")


def load_vectors() -> list[dict[str, str]]:
    """Load the (plain, encoded) pairs of the fixture oracle."""
    with open(VECTORS_PATH, encoding="utf-8") as f:
        return json.load(f)["tests"]


@pytest.fixture
def temp_config_factory(tmp_path):
    """Write a YAML config file and return its path."""

    def _write(content: str) -> str:
        path = tmp_path / "config.yaml"
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
