"""
Identifier allocation for graph-style diagram elements.

Flowchart nodes and subgraphs (and block diagram blocks) are referenced by
numeric identifiers in the generated text. Each diagram owns one generator,
so identifiers are unique within a diagram only.
"""

from typing import Protocol


class IDGenerator(Protocol):
    """Protocol for identifier generators."""

    def next_id(self) -> int:
        """
        Return the next identifier.

        :return: Identifier, strictly greater than any previously returned one
        """
        ...


class SequentialIDGenerator:
    """Counter starting at 0. Not thread-safe."""

    def __init__(self, start: int = 0):
        self.current_id = start

    def next_id(self) -> int:
        current = self.current_id
        self.current_id += 1
        return current
