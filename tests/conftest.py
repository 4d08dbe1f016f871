"""Shared pytest fixtures for mermaidkit tests."""

import pytest
import yaml
from mermaidkit.block import BlockDiagram
from mermaidkit.flowchart import Flowchart
from mermaidkit.state import StateDiagram


class MockIDGenerator:
    """Predictable id generator, hands out ids from a fixed start with a fixed step."""

    def __init__(self, start=100, step=10):
        self.current_id = start
        self.step = step

    def next_id(self) -> int:
        current = self.current_id
        self.current_id += self.step
        return current


@pytest.fixture
def mock_id_generator():
    return MockIDGenerator()


@pytest.fixture
def flowchart():
    return Flowchart()


@pytest.fixture
def block_diagram():
    return BlockDiagram()


@pytest.fixture
def state_diagram():
    return StateDiagram()


@pytest.fixture
def description_file(tmp_path):
    """Factory writing a diagram description to a YAML file.

    Usage:
        description_file({"kind": "flowchart", "nodes": [...]})
    """

    def _create(data, name="diagram.yaml"):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="UTF-8")
        return path

    return _create
