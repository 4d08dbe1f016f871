"""Blocks, links and layout directives of block diagrams."""

from dataclasses import dataclass
from typing import Any, Optional

from mermaidkit.text import escape_label


@dataclass
class Block:
    """Cell of the block grid."""

    id: str
    text: str
    #: Number of columns the block spans, 1 (or unset) means a single cell.
    width: Optional[int] = None

    def set_text(self, text: str) -> "Block":
        self.text = text
        return self

    def set_width(self, width: Optional[int]) -> "Block":
        self.width = width
        return self

    def render(self, indent: str = "") -> str:
        span = f":{self.width}" if self.width is not None and self.width > 1 else ""
        return f'{indent}{self.id}["{escape_label(self.text)}"]{span}\n'

    def __str__(self) -> str:
        return self.render()


@dataclass
class Space:
    """Blank cell, optionally spanning several columns."""

    width: Optional[int] = None

    def render(self, indent: str = "") -> str:
        if self.width is None:
            return f"{indent}space\n"
        return f"{indent}space:{self.width}\n"

    def __str__(self) -> str:
        return self.render()


@dataclass
class Link:
    """Edge between two blocks."""

    from_: Any
    to: Any
    text: str = ""

    def set_text(self, text: str) -> "Link":
        self.text = text
        return self

    def render(self, indent: str = "") -> str:
        from_id = "" if self.from_ is None else self.from_.id
        to_id = "" if self.to is None else self.to.id
        if self.text:
            return f'{indent}{from_id} -- "{escape_label(self.text)}" --> {to_id}\n'
        return f"{indent}{from_id} --> {to_id}\n"

    def __str__(self) -> str:
        return self.render()
