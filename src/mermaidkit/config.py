"""Stuff related to application configuration."""

from pydantic import BaseModel, ConfigDict
from typing import Literal, Optional, TypeAlias

from mermaidkit.basediagram import Look, Theme

#: General JSON type
JSON: TypeAlias = dict[str, "JSON"] | list["JSON"] | str | int | float | bool | None


class Configuration(BaseModel):
    """Settings of the command line tool.

    Diagram content comes from the description file, this only controls how
    it is written out.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)
    #: Output format: bare Mermaid text or Markdown document with a mermaid fence.
    output_format: Literal["mermaid", "markdown"] = "mermaid"
    #: Heading of Markdown output, falls back to the diagram title.
    markdown_title: Optional[str] = None
    #: Theme applied to diagrams that don't set one.
    default_theme: Optional[Theme] = None
    #: Look applied to diagrams that don't set one.
    default_look: Optional[Look] = None
