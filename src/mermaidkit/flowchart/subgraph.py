"""Flowchart subgraphs."""

from typing import List, Optional
import logging

from mermaidkit.direction import Direction
from mermaidkit.flowchart.link import Link
from mermaidkit.flowchart.node import Node
from mermaidkit.idgen import IDGenerator, SequentialIDGenerator
from mermaidkit.text import enum_token, format_title

log = logging.getLogger(__name__)

SUBGRAPH_INDENT = "    "


class Subgraph:
    """
    Named group of flowchart nodes.

    Nodes are declared at flowchart level and only referenced here by id.
    Nested subgraphs draw their ids from the same generator as the owning
    flowchart. A subgraph built on its own gets a private generator that
    starts after its id when the id is numeric, so nested ids never repeat it.
    """

    def __init__(self, id: str, title: str, id_generator: Optional[IDGenerator] = None):
        self.id = id
        self.title = title
        self.direction: Optional[Direction] = None
        self.nodes: List[Node] = []
        self.subgraphs: List["Subgraph"] = []
        self.links: List[Link] = []
        if id_generator is None:
            start = int(id) + 1 if str(id).isdigit() else 0
            id_generator = SequentialIDGenerator(start)
        self._id_generator = id_generator

    def __eq__(self, other) -> bool:
        if not isinstance(other, Subgraph):
            return NotImplemented
        return (self.id, self.title, self.direction, self.nodes, self.subgraphs, self.links) == (
            other.id,
            other.title,
            other.direction,
            other.nodes,
            other.subgraphs,
            other.links,
        )

    def __repr__(self) -> str:
        return f"Subgraph(id={self.id!r}, title={self.title!r})"

    def set_title(self, title: str) -> "Subgraph":
        self.title = title
        return self

    def set_direction(self, direction: Optional[Direction]) -> "Subgraph":
        self.direction = direction
        return self

    def add_node(self, node: Node) -> "Subgraph":
        """
        Reference an existing node as member of this subgraph.

        :param node: Node created by the owning flowchart
        :return: This subgraph
        """
        self.nodes.append(node)
        return self

    def add_subgraph(self, title: str) -> "Subgraph":
        subgraph = Subgraph(str(self._id_generator.next_id()), title, self._id_generator)
        self.subgraphs.append(subgraph)
        log.debug(f"Added subgraph {subgraph.id} to subgraph {self.id}")
        return subgraph

    def add_link(self, from_, to) -> Link:
        link = Link(from_, to)
        self.links.append(link)
        return link

    def render(self, indent: str = "") -> str:
        """
        Render subgraph block.

        :param indent: Prefix of the opening and closing lines, content is
            indented one level deeper
        :return: ``subgraph <id> [<title>]`` ... ``end``
        """
        inner = indent + SUBGRAPH_INDENT
        title = format_title(self.title)
        lines = [f"{indent}subgraph {self.id} {title}\n" if title else f"{indent}subgraph {self.id}\n"]
        if self.direction is not None:
            direction = enum_token(self.direction, Direction, Direction.TOP_TO_BOTTOM)
            lines.append(f"{inner}direction {direction}\n")
        for node in self.nodes:
            lines.append(f"{inner}{node.id}\n")
        for subgraph in self.subgraphs:
            lines.append(subgraph.render(inner))
        for link in self.links:
            lines.append(link.render(inner))
        lines.append(f"{indent}end\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()
