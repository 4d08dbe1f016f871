"""
Flowchart diagram aggregate.

A :class:`Flowchart` owns classes, nodes, subgraphs and links in the order
they were added and renders them in that order::

    flowchart = Flowchart()
    start = flowchart.add_node("Start").set_shape(NodeShape.TERMINAL)
    end = flowchart.add_node("End")
    flowchart.add_link(start, end).set_text("done")
    print(flowchart.render())

Nodes and subgraphs share a single id sequence.
"""

from pathlib import Path
from typing import List, Optional
import logging

from mermaidkit.basediagram import BaseDiagram
from mermaidkit.direction import Direction
from mermaidkit.flowchart.config import CurveStyle, FlowchartConfigurationProperties
from mermaidkit.flowchart.link import Link
from mermaidkit.flowchart.node import Node
from mermaidkit.flowchart.style import Class
from mermaidkit.flowchart.subgraph import Subgraph
from mermaidkit.idgen import IDGenerator, SequentialIDGenerator
from mermaidkit.text import enum_token
from mermaidkit.utils import render_to_file

log = logging.getLogger(__name__)

FlowchartDirection = Direction

FLOWCHART_HEADER = "flowchart {direction}\n"
INDENT = "    "


class Flowchart:
    """Flowchart with nodes, links, subgraphs and style classes."""

    def __init__(self, id_generator: Optional[IDGenerator] = None):
        self.base: BaseDiagram[FlowchartConfigurationProperties] = BaseDiagram(FlowchartConfigurationProperties())
        self.direction: Direction = Direction.TOP_TO_BOTTOM
        self.classes: List[Class] = []
        self.nodes: List[Node] = []
        self.subgraphs: List[Subgraph] = []
        self.links: List[Link] = []
        self.id_generator: IDGenerator = id_generator if id_generator is not None else SequentialIDGenerator()

    @property
    def curve_style(self) -> CurveStyle:
        return self.base.config.curve or CurveStyle.NONE

    def set_direction(self, direction: Direction) -> "Flowchart":
        self.direction = direction
        return self

    def set_curve_style(self, curve_style: CurveStyle) -> "Flowchart":
        """
        Set link curve interpolation.

        The curve is a renderer setting, it ends up in the front-matter
        (``config.flowchart.curve``) rather than in the diagram body.

        :param curve_style: Curve style, NONE removes the setting
        :return: This flowchart
        """
        self.base.config.curve = curve_style if curve_style != CurveStyle.NONE else None
        return self

    def add_class(self, name: str) -> Class:
        style_class = Class(name)
        self.classes.append(style_class)
        return style_class

    def add_node(self, text: str) -> Node:
        """
        Create a node with the next id.

        :param text: Node label
        :return: The node, for further chaining
        """
        node = Node(id=str(self.id_generator.next_id()), text=text)
        self.nodes.append(node)
        log.debug(f"Added node {node.id}")
        return node

    def add_subgraph(self, title: str) -> Subgraph:
        """
        Create a subgraph with the next id, from the same sequence as nodes.

        :param title: Subgraph title
        :return: The subgraph, for further chaining
        """
        subgraph = Subgraph(str(self.id_generator.next_id()), title, self.id_generator)
        self.subgraphs.append(subgraph)
        log.debug(f"Added subgraph {subgraph.id}")
        return subgraph

    def add_link(self, from_, to) -> Link:
        """
        Create a link between two elements.

        Elements are not checked to belong to this flowchart.

        :param from_: Source node or subgraph
        :param to: Target node or subgraph
        :return: The link, for further chaining
        """
        link = Link(from_, to)
        self.links.append(link)
        return link

    def render(self) -> str:
        direction = enum_token(self.direction, Direction, Direction.TOP_TO_BOTTOM)
        lines = [FLOWCHART_HEADER.format(direction=direction)]
        for style_class in self.classes:
            lines.append(style_class.render(INDENT))
        for node in self.nodes:
            lines.append(node.render(INDENT))
        for subgraph in self.subgraphs:
            lines.append(subgraph.render(INDENT))
        for link in self.links:
            lines.append(link.render(INDENT))
        return self.base.render("".join(lines))

    def render_to_file(self, path: str | Path) -> None:
        render_to_file(path, self.render())

    def __str__(self) -> str:
        return self.render()
