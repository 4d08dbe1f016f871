"""State diagram aggregate (``stateDiagram-v2``)."""

from pathlib import Path
from typing import List, Optional
import logging

from mermaidkit.basediagram import BaseDiagram
from mermaidkit.direction import Direction
from mermaidkit.state.config import StateConfigurationProperties
from mermaidkit.state.state import State, StateType, Transition
from mermaidkit.text import enum_token
from mermaidkit.utils import render_to_file

log = logging.getLogger(__name__)

STATE_HEADER = "stateDiagram-v2\n"
INDENT = "    "


class StateDiagram:
    """State machine with states and transitions, ids supplied by the caller."""

    def __init__(self):
        self.base: BaseDiagram[StateConfigurationProperties] = BaseDiagram(StateConfigurationProperties())
        self.direction: Optional[Direction] = None
        self.states: List[State] = []
        self.transitions: List[Transition] = []

    def set_direction(self, direction: Optional[Direction]) -> "StateDiagram":
        self.direction = direction
        return self

    def add_state(self, id: str, description: str = "", state_type: StateType = StateType.SIMPLE) -> State:
        """
        Create a state.

        Ids are not checked for uniqueness.

        :param id: State id
        :param description: Description shown in the state
        :param state_type: Type of the state
        :return: The state, for further chaining
        """
        state = State(id, description, state_type)
        self.states.append(state)
        log.debug(f"Added state {id}")
        return state

    def add_transition(self, from_: State, to: State, description: str = "") -> Transition:
        transition = Transition(from_, to, description)
        self.transitions.append(transition)
        return transition

    def render(self) -> str:
        lines = [STATE_HEADER]
        if self.direction is not None:
            lines.append(f"{INDENT}direction {enum_token(self.direction, Direction, Direction.TOP_TO_BOTTOM)}\n")
        for state in self.states:
            lines.append(state.render(INDENT))
        for transition in self.transitions:
            lines.append(transition.render(INDENT))
        return self.base.render("".join(lines))

    def render_to_file(self, path: str | Path) -> None:
        render_to_file(path, self.render())

    def __str__(self) -> str:
        return self.render()
