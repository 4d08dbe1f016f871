"""
Base diagram shell - shared configuration output for all diagram kinds.

Every diagram aggregate holds a :class:`BaseDiagram` parameterised with its
own configuration properties type. The shell knows nothing about the diagram
body, it only prepends the YAML front-matter block derived from the title,
theming and per-kind properties.
"""

from enum import Enum
from typing import Any, ClassVar, Dict, Generic, Optional, TypeVar
import logging

import yaml
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

log = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = "---\n"


class Theme(str, Enum):
    """Built-in Mermaid themes."""

    DEFAULT = "default"
    NEUTRAL = "neutral"
    DARK = "dark"
    FOREST = "forest"
    BASE = "base"


class Look(str, Enum):
    """Mermaid look (drawing style)."""

    CLASSIC = "classic"
    HAND_DRAWN = "handDrawn"


class ConfigurationProperties(BaseModel):
    """Per diagram kind configuration properties.

    Subclasses declare optional fields; only fields that were set end up in
    the front-matter, under the ``section`` key.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
    #: Key of this section in Mermaid configuration (e.g. "flowchart").
    section: ClassVar[str] = ""

    def to_dict(self) -> Dict[str, Any]:
        """Properties that were set, keyed by their Mermaid (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


T = TypeVar("T", bound=ConfigurationProperties)


class BaseDiagram(Generic[T]):
    """Title, theming and configuration shared by all diagram kinds."""

    def __init__(self, config: T):
        self.title: Optional[str] = None
        self.theme: Optional[Theme] = None
        self.look: Optional[Look] = None
        self.config: T = config

    def __eq__(self, other) -> bool:
        if not isinstance(other, BaseDiagram):
            return NotImplemented
        return (self.title, self.theme, self.look, self.config) == (
            other.title,
            other.theme,
            other.look,
            other.config,
        )

    def __repr__(self) -> str:
        return f"BaseDiagram(title={self.title!r}, theme={self.theme!r}, look={self.look!r}, config={self.config!r})"

    def set_title(self, title: Optional[str]) -> "BaseDiagram[T]":
        self.title = title
        return self

    def set_theme(self, theme: Optional[Theme]) -> "BaseDiagram[T]":
        self.theme = Theme(theme) if theme is not None else None
        return self

    def set_look(self, look: Optional[Look]) -> "BaseDiagram[T]":
        self.look = Look(look) if look is not None else None
        return self

    def front_matter_data(self) -> Dict[str, Any]:
        """
        Collect front-matter content.

        :return: Mapping ready for YAML serialization, empty if nothing is set
        """
        data: Dict[str, Any] = {}
        if self.title:
            data["title"] = self.title

        config: Dict[str, Any] = {}
        if self.theme is not None:
            config["theme"] = self.theme.value
        if self.look is not None:
            config["look"] = self.look.value
        properties = self.config.to_dict()
        if properties:
            config[self.config.section] = properties
        if config:
            data["config"] = config
        return data

    def front_matter(self) -> str:
        """
        Render the front-matter block.

        :return: YAML between ``---`` lines, or empty string if nothing is set
        """
        data = self.front_matter_data()
        if not data:
            return ""
        content = yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)
        return FRONT_MATTER_DELIMITER + content + FRONT_MATTER_DELIMITER

    def render(self, body: str) -> str:
        """
        Wrap a rendered diagram body.

        :param body: Diagram text, used verbatim
        :return: Front-matter followed by body
        """
        return self.front_matter() + body
