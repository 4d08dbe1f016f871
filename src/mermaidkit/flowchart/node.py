"""Flowchart nodes."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from mermaidkit.flowchart.style import Class, NodeStyle
from mermaidkit.text import enum_token, escape_label


class NodeShape(str, Enum):
    """Node shapes, value is the Mermaid 11 short name."""

    PROCESS = "rect"
    EVENT = "rounded"
    TERMINAL = "stadium"
    SUBPROCESS = "fr-rect"
    DATABASE = "cyl"
    START = "circle"
    ODD = "odd"
    DECISION = "diamond"
    PREPARE = "hex"
    INPUT_OUTPUT = "lean-r"
    OUTPUT_INPUT = "lean-l"
    PRIORITY = "trap-b"
    MANUAL_OPERATION = "trap-t"
    STOP = "dbl-circ"
    TEXT = "text"
    CARD = "notch-rect"
    LINED_PROCESS = "lin-rect"
    SMALL_START = "sm-circ"
    FRAMED_STOP = "framed-circle"
    FORK = "fork"
    COLLATE = "hourglass"
    COMMENT = "brace"
    COMMENT_RIGHT = "brace-r"
    COMMENT_BOTH = "braces"
    COM_LINK = "bolt"
    DOCUMENT = "doc"
    DELAY = "delay"
    DIRECT_ACCESS_STORAGE = "das"
    DISK_STORAGE = "lin-cyl"
    DISPLAY = "curv-trap"
    DIVIDED_PROCESS = "div-rect"
    EXTRACT = "tri"
    INTERNAL_STORAGE = "win-pane"
    JUNCTION = "f-circ"
    LINED_DOCUMENT = "lin-doc"
    LOOP_LIMIT = "notch-pent"
    MANUAL_FILE = "flip-tri"
    MANUAL_INPUT = "sl-rect"
    MULTI_DOCUMENT = "docs"
    MULTI_PROCESS = "st-rect"
    PAPER_TAPE = "flag"
    STORED_DATA = "bow-rect"
    SUMMARY = "cross-circ"
    TAGGED_DOCUMENT = "tag-doc"
    TAGGED_PROCESS = "tag-rect"


@dataclass
class Node:
    """Vertex of a flowchart, declared with the ``id@{ shape, label }`` syntax."""

    id: str
    text: str
    shape: NodeShape = NodeShape.PROCESS
    style_class: Optional[Class] = None
    style: Optional[NodeStyle] = None

    def set_text(self, text: str) -> "Node":
        self.text = text
        return self

    def set_shape(self, shape: NodeShape) -> "Node":
        self.shape = shape
        return self

    def set_class(self, style_class: Optional[Class]) -> "Node":
        self.style_class = style_class
        return self

    def set_style(self, style: Optional[NodeStyle]) -> "Node":
        self.style = style
        return self

    def render(self, indent: str = "") -> str:
        """
        Render node declaration.

        :param indent: Prefix of every emitted line
        :return: Declaration, followed by class and style lines when set
        """
        shape = enum_token(self.shape, NodeShape, NodeShape.PROCESS)
        lines = [f'{indent}{self.id}@{{ shape: {shape}, label: "{escape_label(self.text)}"}}\n']
        if self.style_class is not None:
            lines.append(f"{indent}class {self.id} {self.style_class.name}\n")
        if self.style is not None:
            style = self.style.render()
            if style:
                lines.append(f"{indent}style {self.id} {style}\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()
