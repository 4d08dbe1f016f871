"""
Mermaid Live Editor links for built diagrams.

The editor state carries the rendered text together with the diagram's own
theme and look, so the browser shows the same picture as any other Mermaid
renderer.
"""

import base64
import json
import logging
from typing import Any, Dict

from mermaidkit.basediagram import Theme

log = logging.getLogger(__name__)

LIVE_EDITOR_URL = "https://mermaid.live"


def editor_state(diagram, auto_sync: bool = True) -> Dict[str, Any]:
    """
    Live Editor state for a diagram.

    :param diagram: Flowchart, BlockDiagram or StateDiagram
    :param auto_sync: Re-render on every edit
    :return: State dictionary understood by the editor
    """
    mermaid_config = {"theme": (diagram.base.theme or Theme.DEFAULT).value}
    if diagram.base.look is not None:
        mermaid_config["look"] = diagram.base.look.value
    return {
        "code": diagram.render(),
        "mermaid": mermaid_config,
        "autoSync": auto_sync,
        "updateDiagram": True,
    }


def live_editor_link(diagram, view: bool = False, auto_sync: bool = True) -> str:
    """
    Generate a Mermaid Live Editor link for a diagram.

    :param diagram: Flowchart, BlockDiagram or StateDiagram
    :param view: Link to the read-only view instead of the editor
    :param auto_sync: Re-render on every edit
    :return: ``https://mermaid.live/<edit|view>#base64:<state>``
    """
    state = json.dumps(editor_state(diagram, auto_sync))
    encoded = base64.b64encode(state.encode("utf-8")).decode("utf-8")
    mode = "view" if view else "edit"
    log.debug(f"Live editor state is {len(state)} bytes")
    return f"{LIVE_EDITOR_URL}/{mode}#base64:{encoded}"
