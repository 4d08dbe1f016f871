"""State diagram configuration properties (``config.state`` front-matter section)."""

from typing import ClassVar, Optional

from mermaidkit.basediagram import ConfigurationProperties


class StateConfigurationProperties(ConfigurationProperties):
    section: ClassVar[str] = "state"

    title_top_margin: Optional[int] = None
    arrow_marker_absolute: Optional[bool] = None
    divider_margin: Optional[int] = None
    size_unit: Optional[int] = None
    padding: Optional[int] = None
    text_height: Optional[int] = None
    title_shift: Optional[int] = None
    note_margin: Optional[int] = None
    fork_width: Optional[int] = None
    fork_height: Optional[int] = None
    mini_padding: Optional[int] = None
    font_size_factor: Optional[float] = None
    font_size: Optional[int] = None
    label_height: Optional[int] = None
    edge_length_factor: Optional[str] = None
    composit_title_size: Optional[int] = None
    radius: Optional[int] = None
    default_renderer: Optional[str] = None
    use_max_width: Optional[bool] = None
