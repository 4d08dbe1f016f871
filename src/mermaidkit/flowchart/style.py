"""Node styling: inline styles and reusable style classes."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class NodeStyle:
    """CSS-like style of a node, unset properties are omitted."""

    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: Optional[int] = None
    color: Optional[str] = None
    stroke_dasharray: Optional[str] = None

    def set_fill(self, fill: str) -> "NodeStyle":
        self.fill = fill
        return self

    def set_stroke(self, stroke: str) -> "NodeStyle":
        self.stroke = stroke
        return self

    def set_stroke_width(self, width: int) -> "NodeStyle":
        self.stroke_width = width
        return self

    def set_color(self, color: str) -> "NodeStyle":
        self.color = color
        return self

    def set_stroke_dasharray(self, dasharray: str) -> "NodeStyle":
        self.stroke_dasharray = dasharray
        return self

    def render(self) -> str:
        """
        Render style as Mermaid property list.

        :return: e.g. ``fill:#f9f,stroke:#333,stroke-width:4px``
        """
        parts = []
        if self.fill:
            parts.append(f"fill:{self.fill}")
        if self.stroke:
            parts.append(f"stroke:{self.stroke}")
        if self.stroke_width is not None:
            parts.append(f"stroke-width:{self.stroke_width}px")
        if self.color:
            parts.append(f"color:{self.color}")
        if self.stroke_dasharray:
            parts.append(f"stroke-dasharray:{self.stroke_dasharray}")
        return ",".join(parts)

    def __str__(self) -> str:
        return self.render()


@dataclass
class Class:
    """Reusable style class, identified by name."""

    name: str
    style: NodeStyle = field(default_factory=NodeStyle)

    def set_name(self, name: str) -> "Class":
        self.name = name
        return self

    def set_style(self, style: NodeStyle) -> "Class":
        self.style = style
        return self

    def render(self, indent: str = "") -> str:
        style = self.style.render()
        if style:
            return f"{indent}classDef {self.name} {style}\n"
        return f"{indent}classDef {self.name}\n"

    def __str__(self) -> str:
        return self.render()
