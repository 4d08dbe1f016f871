"""
Diagram description files.

A description is a YAML or JSON document holding the content of one diagram.
It is validated with pydantic and then replayed against the builder API, so
the output is the same as if the calls had been written by hand::

    kind: flowchart
    direction: LR
    nodes:
      - key: start
        text: Start
        shape: stadium
      - key: end
        text: End
    links:
      - source: start
        target: end
        text: done

Elements refer to each other by ``key`` (flowchart, block) or by state ``id``.
"""

from pathlib import Path
from typing import Annotated, Any, Dict, List, Literal, Optional, Union
import logging

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from mermaidkit.basediagram import Look, Theme
from mermaidkit.block import BlockDiagram
from mermaidkit.config import Configuration
from mermaidkit.direction import Direction
from mermaidkit.flowchart import (
    Class,
    CurveStyle,
    Flowchart,
    LinkArrowType,
    LinkShape,
    Node,
    NodeShape,
    NodeStyle,
    Subgraph,
)
from mermaidkit.state import NotePosition, State, StateDiagram, StateType
from mermaidkit.utils import load_config_file

log = logging.getLogger(__name__)

Diagram = Union[Flowchart, BlockDiagram, StateDiagram]


class DescriptionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class StyleDescription(DescriptionModel):
    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: Optional[int] = None
    color: Optional[str] = None
    stroke_dasharray: Optional[str] = None

    def to_style(self) -> NodeStyle:
        return NodeStyle(**self.model_dump())


class ClassDescription(DescriptionModel):
    name: str
    style: StyleDescription = StyleDescription()


class NodeDescription(DescriptionModel):
    key: str
    text: str
    shape: NodeShape = NodeShape.PROCESS
    #: Name of a class declared in the same description.
    class_name: Optional[str] = None
    style: Optional[StyleDescription] = None


class SubgraphDescription(DescriptionModel):
    key: str
    title: str
    direction: Optional[Direction] = None
    #: Keys of member nodes.
    nodes: List[str] = []
    subgraphs: List["SubgraphDescription"] = []


class FlowchartLinkDescription(DescriptionModel):
    source: str
    target: str
    text: str = ""
    shape: LinkShape = LinkShape.OPEN
    head: LinkArrowType = LinkArrowType.ARROW
    tail: LinkArrowType = LinkArrowType.NONE
    length: int = 0


class CommonDescription(DescriptionModel):
    title: Optional[str] = None
    theme: Optional[Theme] = None
    look: Optional[Look] = None
    #: Per kind configuration properties (camelCase or snake_case keys).
    config: Dict[str, Any] = {}


class FlowchartDescription(CommonDescription):
    kind: Literal["flowchart"]
    direction: Direction = Direction.TOP_TO_BOTTOM
    curve: CurveStyle = CurveStyle.NONE
    classes: List[ClassDescription] = []
    nodes: List[NodeDescription] = []
    subgraphs: List[SubgraphDescription] = []
    links: List[FlowchartLinkDescription] = []


class BlockItemDescription(DescriptionModel):
    key: str
    text: str
    width: Optional[int] = None


class SpaceDescription(DescriptionModel):
    #: Width of the blank cell, null for a single cell.
    space: Optional[int]


class BlockLinkDescription(DescriptionModel):
    source: str
    target: str
    text: str = ""


class BlockDiagramDescription(CommonDescription):
    kind: Literal["block"]
    columns: int = 0
    layout: List[Union[BlockItemDescription, SpaceDescription]] = []
    links: List[BlockLinkDescription] = []


class TransitionDescription(DescriptionModel):
    source: str
    target: str
    description: str = ""


class StateDescription(DescriptionModel):
    id: str
    description: str = ""
    type: StateType = StateType.SIMPLE
    note: Optional[str] = None
    note_position: NotePosition = NotePosition.RIGHT
    states: List["StateDescription"] = []
    transitions: List[TransitionDescription] = []


class StateDiagramDescription(CommonDescription):
    kind: Literal["state"]
    direction: Optional[Direction] = None
    states: List[StateDescription] = []
    transitions: List[TransitionDescription] = []


DiagramDescription = Annotated[
    Union[FlowchartDescription, BlockDiagramDescription, StateDiagramDescription],
    Field(discriminator="kind"),
]

_description_adapter = TypeAdapter(DiagramDescription)


def _lookup(items: Dict[str, Any], key: str, what: str) -> Any:
    try:
        return items[key]
    except KeyError:
        raise ValueError(f"Unknown {what} '{key}'") from None


def _apply_common(diagram: Diagram, desc: CommonDescription, config: Configuration) -> None:
    diagram.base.set_title(desc.title)
    diagram.base.set_theme(desc.theme or config.default_theme)
    diagram.base.set_look(desc.look or config.default_look)
    if desc.config:
        try:
            diagram.base.config = type(diagram.base.config).model_validate(desc.config)
        except ValidationError as error:
            raise ValueError(f"Error parsing {desc.kind} configuration properties") from error


def _build_subgraph(
    subgraph: Subgraph, desc: SubgraphDescription, nodes: Dict[str, Node], subgraphs: Dict[str, Subgraph]
) -> None:
    subgraphs[desc.key] = subgraph
    subgraph.set_direction(desc.direction)
    for key in desc.nodes:
        subgraph.add_node(_lookup(nodes, key, "node"))
    for child in desc.subgraphs:
        _build_subgraph(subgraph.add_subgraph(child.title), child, nodes, subgraphs)


def build_flowchart(desc: FlowchartDescription, config: Configuration) -> Flowchart:
    flowchart = Flowchart().set_direction(desc.direction)
    _apply_common(flowchart, desc, config)
    if desc.curve != CurveStyle.NONE:
        flowchart.set_curve_style(desc.curve)

    classes: Dict[str, Class] = {}
    for class_desc in desc.classes:
        classes[class_desc.name] = flowchart.add_class(class_desc.name).set_style(class_desc.style.to_style())

    nodes: Dict[str, Node] = {}
    for node_desc in desc.nodes:
        node = flowchart.add_node(node_desc.text).set_shape(node_desc.shape)
        if node_desc.class_name is not None:
            node.set_class(_lookup(classes, node_desc.class_name, "class"))
        if node_desc.style is not None:
            node.set_style(node_desc.style.to_style())
        nodes[node_desc.key] = node

    subgraphs: Dict[str, Subgraph] = {}
    for subgraph_desc in desc.subgraphs:
        _build_subgraph(flowchart.add_subgraph(subgraph_desc.title), subgraph_desc, nodes, subgraphs)

    # Links may connect nodes and subgraphs alike
    elements: Dict[str, Any] = {**subgraphs, **nodes}
    for link_desc in desc.links:
        flowchart.add_link(
            _lookup(elements, link_desc.source, "element"),
            _lookup(elements, link_desc.target, "element"),
        ).set_shape(link_desc.shape).set_head(link_desc.head).set_tail(link_desc.tail).set_length(
            link_desc.length
        ).set_text(link_desc.text)
    return flowchart


def build_block_diagram(desc: BlockDiagramDescription, config: Configuration) -> BlockDiagram:
    diagram = BlockDiagram().set_columns(desc.columns)
    _apply_common(diagram, desc, config)
    blocks = {}
    for item in desc.layout:
        if isinstance(item, SpaceDescription):
            if item.space is None:
                diagram.add_space()
            else:
                diagram.add_space_with_width(item.space)
        else:
            blocks[item.key] = diagram.add_block(item.text).set_width(item.width)
    for link_desc in desc.links:
        diagram.add_link(
            _lookup(blocks, link_desc.source, "block"),
            _lookup(blocks, link_desc.target, "block"),
        ).set_text(link_desc.text)
    return diagram


def _collect_states(owner, descs: List[StateDescription], states: Dict[str, State]) -> None:
    for desc in descs:
        state = owner.add_state(desc.id, desc.description, desc.type)
        state.set_note(desc.note, desc.note_position)
        states[desc.id] = state
        if desc.states:
            _collect_states(state, desc.states, states)


def _add_transitions(owner, descs: List[StateDescription], transitions, states: Dict[str, State]) -> None:
    for transition_desc in transitions:
        owner.add_transition(
            _lookup(states, transition_desc.source, "state"),
            _lookup(states, transition_desc.target, "state"),
            transition_desc.description,
        )
    for desc in descs:
        if desc.states or desc.transitions:
            _add_transitions(states[desc.id], desc.states, desc.transitions, states)


def build_state_diagram(desc: StateDiagramDescription, config: Configuration) -> StateDiagram:
    diagram = StateDiagram().set_direction(desc.direction)
    _apply_common(diagram, desc, config)
    states: Dict[str, State] = {}
    # All states first, so transitions may point anywhere in the tree
    _collect_states(diagram, desc.states, states)
    _add_transitions(diagram, desc.states, desc.transitions, states)
    return diagram


def build_diagram(data: Any, config: Optional[Configuration] = None) -> Diagram:
    """
    Build a diagram from a description.

    :param data: Parsed description (dict) or a description model
    :param config: Configuration supplying default theme and look
    :return: Flowchart, BlockDiagram or StateDiagram
    :raises ValueError: If the description is invalid or references an unknown element
    """
    if config is None:
        config = Configuration()
    if isinstance(data, BaseModel):
        desc = data
    else:
        try:
            desc = _description_adapter.validate_python(data)
        except ValidationError as error:
            raise ValueError("Error parsing diagram description") from error

    if isinstance(desc, FlowchartDescription):
        diagram: Diagram = build_flowchart(desc, config)
    elif isinstance(desc, BlockDiagramDescription):
        diagram = build_block_diagram(desc, config)
    else:
        diagram = build_state_diagram(desc, config)
    log.debug(f"Built {desc.kind} diagram")
    return diagram


def load_diagram(path: str | Path, config: Optional[Configuration] = None) -> Diagram:
    """
    Load a description file (YAML or JSON) and build the diagram.

    :param path: Description file
    :param config: Configuration supplying default theme and look
    :return: Built diagram
    """
    return build_diagram(load_config_file(path), config)
