"""Flowchart diagrams."""

from mermaidkit.flowchart.config import CurveStyle, FlowchartConfigurationProperties
from mermaidkit.flowchart.diagram import Flowchart, FlowchartDirection
from mermaidkit.flowchart.link import Link, LinkArrowType, LinkShape
from mermaidkit.flowchart.node import Node, NodeShape
from mermaidkit.flowchart.style import Class, NodeStyle
from mermaidkit.flowchart.subgraph import Subgraph

__all__ = [
    "Class",
    "CurveStyle",
    "Flowchart",
    "FlowchartConfigurationProperties",
    "FlowchartDirection",
    "Link",
    "LinkArrowType",
    "LinkShape",
    "Node",
    "NodeShape",
    "NodeStyle",
    "Subgraph",
]
