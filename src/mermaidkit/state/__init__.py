"""State diagrams (``stateDiagram-v2``)."""

from mermaidkit.state.config import StateConfigurationProperties
from mermaidkit.state.diagram import StateDiagram
from mermaidkit.state.state import Note, NotePosition, State, StateType, Transition

__all__ = ["Note", "NotePosition", "State", "StateConfigurationProperties", "StateDiagram", "StateType", "Transition"]
