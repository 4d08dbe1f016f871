"""Block diagrams (``block-beta``)."""

from mermaidkit.block.block import Block, Link, Space
from mermaidkit.block.config import BlockConfigurationProperties
from mermaidkit.block.diagram import BlockDiagram

__all__ = ["Block", "BlockConfigurationProperties", "BlockDiagram", "Link", "Space"]
