"""
States and transitions of state diagrams.

States are identified by the id given by the caller. Start and end states are
pseudo states: they declare nothing and are written as ``[*]`` wherever a
transition references them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional
import logging

from mermaidkit.text import enum_token, escape_label

log = logging.getLogger(__name__)

PSEUDO_STATE = "[*]"
COMPOSITE_INDENT = "    "


class StateType(str, Enum):
    SIMPLE = "simple"
    COMPOSITE = "composite"
    START = "start"
    END = "end"
    CHOICE = "choice"
    FORK = "fork"
    JOIN = "join"


class NotePosition(str, Enum):
    LEFT = "left of"
    RIGHT = "right of"


@dataclass
class Note:
    text: str
    position: NotePosition = NotePosition.RIGHT


def state_ref(state: Any) -> str:
    """
    Reference to a state as used in transitions.

    :param state: State or None
    :return: ``[*]`` for start/end states, the state id otherwise
    """
    if state is None:
        return ""
    if state.state_type in (StateType.START, StateType.END):
        return PSEUDO_STATE
    return state.id


@dataclass
class Transition:
    from_: Any
    to: Any
    description: str = ""

    def set_description(self, description: str) -> "Transition":
        self.description = description
        return self

    def render(self, indent: str = "") -> str:
        line = f"{indent}{state_ref(self.from_)} --> {state_ref(self.to)}"
        if self.description:
            line += f" : {escape_label(self.description)}"
        return line + "\n"

    def __str__(self) -> str:
        return self.render()


@dataclass
class State:
    """
    Node of a state diagram.

    Composite states hold their own nested states and transitions, rendered
    inside ``state <id> { ... }``.
    """

    id: str
    description: str = ""
    state_type: StateType = StateType.SIMPLE
    note: Optional[Note] = None
    states: List["State"] = field(default_factory=list)
    transitions: List[Transition] = field(default_factory=list)

    def set_description(self, description: str) -> "State":
        self.description = description
        return self

    def set_type(self, state_type: StateType) -> "State":
        self.state_type = state_type
        return self

    def set_note(self, text: Optional[str], position: NotePosition = NotePosition.RIGHT) -> "State":
        self.note = Note(text, position) if text else None
        return self

    def add_state(self, id: str, description: str = "", state_type: StateType = StateType.SIMPLE) -> "State":
        """
        Add a nested state, turning this state into a composite one.

        :param id: Nested state id
        :param description: Nested state description
        :param state_type: Nested state type
        :return: The nested state
        """
        self.state_type = StateType.COMPOSITE
        state = State(id, description, state_type)
        self.states.append(state)
        log.debug(f"Added state {id} to composite state {self.id}")
        return state

    def add_transition(self, from_: "State", to: "State", description: str = "") -> Transition:
        """
        Add a nested transition, turning this state into a composite one.

        :param from_: Source state
        :param to: Target state
        :param description: Transition label
        :return: The transition
        """
        self.state_type = StateType.COMPOSITE
        transition = Transition(from_, to, description)
        self.transitions.append(transition)
        return transition

    def render(self, indent: str = "") -> str:
        state_type = StateType(enum_token(self.state_type, StateType, StateType.SIMPLE))
        if state_type in (StateType.START, StateType.END):
            return ""

        if state_type == StateType.COMPOSITE:
            lines = [self._composite_header(indent)]
            inner = indent + COMPOSITE_INDENT
            for state in self.states:
                lines.append(state.render(inner))
            for transition in self.transitions:
                lines.append(transition.render(inner))
            lines.append(f"{indent}}}\n")
        elif state_type in (StateType.CHOICE, StateType.FORK, StateType.JOIN):
            lines = [f"{indent}state {self.id} <<{state_type.value}>>\n"]
        elif self.description:
            lines = [f"{indent}{self.id} : {escape_label(self.description)}\n"]
        else:
            lines = [f"{indent}{self.id}\n"]

        if self.note is not None:
            position = enum_token(self.note.position, NotePosition, NotePosition.RIGHT)
            lines.append(f"{indent}note {position} {self.id} : {escape_label(self.note.text)}\n")
        return "".join(lines)

    def _composite_header(self, indent: str) -> str:
        if self.description:
            return f'{indent}state "{escape_label(self.description)}" as {self.id} {{\n'
        return f"{indent}state {self.id} {{\n"

    def __str__(self) -> str:
        return self.render()
