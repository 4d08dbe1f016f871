"""
Mermaid text utilities for safe label handling.

This module provides the escaping rules shared by all diagram kinds, so that
labels, titles and edge texts never break the surrounding notation.
"""

import re
import logging
from enum import Enum
from typing import Type, TypeVar

log = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

#: Titles matching this can be written bare inside square brackets.
SAFE_TITLE_RE = re.compile(r"^[A-Za-z0-9_ .,:;!?'+*/-]*$")


def escape_label(text: str) -> str:
    """
    Escape text for use in a quoted Mermaid label.

    Handles:
    - Newlines and runs of whitespace (collapsed into one space)
    - Double quotes (replaced with the ``#quot;`` entity code)
    - Leading and trailing whitespace (trimmed)

    Examples:
        'My Node' -> 'My Node'
        'Say "hi"' -> 'Say #quot;hi#quot;'
        'Line\\nBreak' -> 'Line Break'

    :param text: Original text
    :return: Escaped text safe inside double quotes
    """
    if not text:
        return ""

    text = re.sub(r"\s+", " ", text)

    # Mermaid has no backslash escape inside quoted labels, use entity codes
    text = text.replace('"', "#quot;")

    return text.strip()


def escape_edge_text(text: str) -> str:
    """
    Escape text placed between pipes on a flowchart link (``-->|text|``).

    :param text: Original text
    :return: Escaped text
    """
    return escape_label(text).replace("|", "#124;")


def format_title(title: str) -> str:
    """
    Format a subgraph title in bracket syntax.

    Plain titles are written bare (``[My Subgraph]``), anything with
    brackets, quotes or other special characters is quoted
    (``["A [b]"]``). A title that is empty after escaping yields an empty
    string, the element is then written without brackets.

    :param title: Original title
    :return: Bracketed title or empty string
    """
    if not escape_label(title or ""):
        return ""
    if SAFE_TITLE_RE.match(title) and title.strip() == title:
        return f"[{title}]"
    return f'["{escape_label(title)}"]'


def enum_token(value, enum_type: Type[E], default: E) -> str:
    """
    Resolve an enumeration value to its notation token.

    Unknown or unset values resolve to ``default`` instead of failing.

    :param value: Enum member, raw value or None
    :param enum_type: Enumeration class
    :param default: Member used when value is not part of the enumeration
    :return: Token string
    """
    try:
        return enum_type(value).value
    except ValueError:
        log.debug(f"Unknown {enum_type.__name__} value {value!r}, using {default.value!r}")
        return default.value
