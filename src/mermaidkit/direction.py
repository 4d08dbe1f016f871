"""Layout direction shared by flowcharts, subgraphs and state diagrams."""

from enum import Enum


class Direction(str, Enum):
    """Direction of the diagram flow, value is the Mermaid token."""

    TOP_TO_BOTTOM = "TB"
    LEFT_RIGHT = "LR"
    RIGHT_LEFT = "RL"
    BOTTOM_UP = "BT"
