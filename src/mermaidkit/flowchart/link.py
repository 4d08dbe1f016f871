"""
Flowchart links.

The arrow between two ids is composed from three parts: the tail marker, the
line (its characters depend on the shape, its length on ``length``) and the
head marker. For example an open line with an arrow head is ``-->``, a thick
line of length 2 with bullets on both ends is ``o====o``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from mermaidkit.text import enum_token, escape_edge_text


class LinkShape(str, Enum):
    """Line style of a link."""

    OPEN = "open"
    DOTTED = "dotted"
    THICK = "thick"
    INVISIBLE = "invisible"


class LinkArrowType(str, Enum):
    """Marker at one end of a link."""

    NONE = "none"
    ARROW = "arrow"
    LEFT_ARROW = "left-arrow"
    BULLET = "bullet"
    CROSS = "cross"


# Mermaid only knows "<" on the source end and ">" on the target end, so a
# LEFT_ARROW is drawn on the opposite end when that end has no marker.
HEAD_MARKERS = {
    LinkArrowType.NONE: "",
    LinkArrowType.ARROW: ">",
    LinkArrowType.LEFT_ARROW: "",
    LinkArrowType.BULLET: "o",
    LinkArrowType.CROSS: "x",
}
TAIL_MARKERS = {
    LinkArrowType.NONE: "",
    LinkArrowType.ARROW: "<",
    LinkArrowType.LEFT_ARROW: "",
    LinkArrowType.BULLET: "o",
    LinkArrowType.CROSS: "x",
}


def _line(shape: LinkShape, length: int, has_head: bool) -> str:
    extra = max(length, 0)
    if shape == LinkShape.INVISIBLE:
        return "~~~" + "~" * extra
    if shape == LinkShape.DOTTED:
        return "-" + "." * (extra + 1) + "-"
    char = "=" if shape == LinkShape.THICK else "-"
    # Without a head marker the line itself needs a third character ("---", "<---")
    return char * (2 + extra + (0 if has_head else 1))


@dataclass
class Link:
    """Directed edge between two flowchart elements (nodes or subgraphs)."""

    from_: Any
    to: Any
    shape: LinkShape = LinkShape.OPEN
    head: LinkArrowType = LinkArrowType.ARROW
    tail: LinkArrowType = LinkArrowType.NONE
    length: int = 0
    text: str = ""

    def set_shape(self, shape: LinkShape) -> "Link":
        self.shape = shape
        return self

    def set_head(self, head: LinkArrowType) -> "Link":
        self.head = head
        return self

    def set_tail(self, tail: LinkArrowType) -> "Link":
        self.tail = tail
        return self

    def set_length(self, length: int) -> "Link":
        self.length = length
        return self

    def set_text(self, text: str) -> "Link":
        self.text = text
        return self

    def arrow(self) -> str:
        """
        Compose the arrow token for this link.

        :return: e.g. ``-->``, ``<-.->``, ``===``, ``~~~``
        """
        shape = LinkShape(enum_token(self.shape, LinkShape, LinkShape.OPEN))
        head_type = LinkArrowType(enum_token(self.head, LinkArrowType, LinkArrowType.NONE))
        tail_type = LinkArrowType(enum_token(self.tail, LinkArrowType, LinkArrowType.NONE))
        if shape == LinkShape.INVISIBLE:
            # Invisible links cannot carry markers
            return _line(shape, self.length, False)
        head = HEAD_MARKERS[head_type]
        tail = TAIL_MARKERS[tail_type]
        if not tail and head_type == LinkArrowType.LEFT_ARROW:
            tail = "<"
        if not head and tail_type == LinkArrowType.LEFT_ARROW:
            head = ">"
        return tail + _line(shape, self.length, bool(head)) + head

    def render(self, indent: str = "") -> str:
        """
        Render link line.

        :param indent: Prefix of the emitted line
        :return: ``<from> <arrow> <to>``, with ``|text|`` after the arrow if set
        """
        arrow = self.arrow()
        if self.text:
            arrow = f"{arrow}|{escape_edge_text(self.text)}|"
        return f"{indent}{_ref(self.from_)} {arrow} {_ref(self.to)}\n"

    def __str__(self) -> str:
        return self.render()


def _ref(element: Any) -> str:
    # Elements are referenced by id; a missing element renders as empty text
    return "" if element is None else str(element.id)
