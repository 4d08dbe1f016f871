"""
Block diagram aggregate (``block-beta``).

Blocks and blank spaces form one layout stream, rendered in the order they
were added so that their grid positions follow the call order. Links are
rendered after the whole stream.
"""

from pathlib import Path
from typing import List, Optional, Union
import logging

from mermaidkit.basediagram import BaseDiagram
from mermaidkit.block.block import Block, Link, Space
from mermaidkit.block.config import BlockConfigurationProperties
from mermaidkit.idgen import IDGenerator, SequentialIDGenerator
from mermaidkit.utils import render_to_file

log = logging.getLogger(__name__)

BLOCK_HEADER = "block-beta\n"
INDENT = "    "


class BlockDiagram:
    """Grid of blocks with optional column count and blank cells."""

    def __init__(self, id_generator: Optional[IDGenerator] = None):
        self.base: BaseDiagram[BlockConfigurationProperties] = BaseDiagram(BlockConfigurationProperties())
        #: Column count, 0 means unset. Not validated, may go negative.
        self.columns: int = 0
        self.layout: List[Union[Block, Space]] = []
        self.links: List[Link] = []
        self.id_generator: IDGenerator = id_generator if id_generator is not None else SequentialIDGenerator()

    @property
    def blocks(self) -> List[Block]:
        return [item for item in self.layout if isinstance(item, Block)]

    def set_columns(self, columns: int) -> "BlockDiagram":
        self.columns = columns
        return self

    def add_column(self) -> "BlockDiagram":
        self.columns += 1
        return self

    def remove_column(self) -> "BlockDiagram":
        self.columns -= 1
        return self

    def add_space(self) -> "BlockDiagram":
        self.layout.append(Space())
        return self

    def add_space_with_width(self, width: int) -> "BlockDiagram":
        self.layout.append(Space(width))
        return self

    def add_block(self, text: str) -> Block:
        """
        Create a block at the current end of the layout stream.

        :param text: Block label
        :return: The block, for further chaining
        """
        block = Block(id=str(self.id_generator.next_id()), text=text)
        self.layout.append(block)
        log.debug(f"Added block {block.id}")
        return block

    def add_link(self, from_: Block, to: Block) -> Link:
        link = Link(from_, to)
        self.links.append(link)
        return link

    def render(self) -> str:
        lines = [BLOCK_HEADER]
        if self.columns != 0:
            lines.append(f"{INDENT}columns {self.columns}\n")
        for item in self.layout:
            lines.append(item.render(INDENT))
        for link in self.links:
            lines.append(link.render(INDENT))
        return self.base.render("".join(lines))

    def render_to_file(self, path: str | Path) -> None:
        render_to_file(path, self.render())

    def __str__(self) -> str:
        return self.render()
