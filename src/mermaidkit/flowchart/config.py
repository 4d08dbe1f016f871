"""Flowchart configuration properties (``config.flowchart`` front-matter section)."""

from enum import Enum
from typing import ClassVar, Optional

from mermaidkit.basediagram import ConfigurationProperties


class CurveStyle(str, Enum):
    """Interpolation of link curves, NONE leaves the renderer default."""

    NONE = ""
    BASIS = "basis"
    BUMP_X = "bumpX"
    BUMP_Y = "bumpY"
    CARDINAL = "cardinal"
    CATMULL_ROM = "catmullRom"
    LINEAR = "linear"
    MONOTONE_X = "monotoneX"
    MONOTONE_Y = "monotoneY"
    NATURAL = "natural"
    STEP = "step"
    STEP_AFTER = "stepAfter"
    STEP_BEFORE = "stepBefore"


class FlowchartConfigurationProperties(ConfigurationProperties):
    section: ClassVar[str] = "flowchart"

    title_top_margin: Optional[int] = None
    arrow_marker_absolute: Optional[bool] = None
    diagram_padding: Optional[int] = None
    html_labels: Optional[bool] = None
    node_spacing: Optional[int] = None
    rank_spacing: Optional[int] = None
    curve: Optional[CurveStyle] = None
    padding: Optional[int] = None
    default_renderer: Optional[str] = None
    wrapping_width: Optional[int] = None
    use_max_width: Optional[bool] = None
