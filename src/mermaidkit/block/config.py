"""Block diagram configuration properties (``config.block`` front-matter section)."""

from typing import ClassVar, Optional

from mermaidkit.basediagram import ConfigurationProperties


class BlockConfigurationProperties(ConfigurationProperties):
    section: ClassVar[str] = "block"

    padding: Optional[int] = None
    use_max_width: Optional[bool] = None
