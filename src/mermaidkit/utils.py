import json
import yaml
import logging
from pydantic import ValidationError
from pathlib import Path
from mermaidkit.config import Configuration, JSON

log = logging.getLogger(__name__)


def render_to_file(path: str | Path, text: str) -> None:
    """Write rendered diagram text to a file.

    Errors (permissions, missing directory, ...) propagate as ``OSError``.

    :param path: destination path
    :param text: content to write
    """
    with open(path, "w", encoding="UTF-8") as file:
        file.write(text)
    log.info(f"Diagram written to {path}")


def mermaid_block(text: str) -> str:
    """Wrap Mermaid source in a Markdown code fence."""
    return "```mermaid\n" + text.rstrip() + "\n```\n"


def markdown_document(title: str | None, text: str) -> str:
    """Markdown document with optional heading and a single diagram."""
    if title:
        return f"# {title}\n\n{mermaid_block(text)}"
    return mermaid_block(text)


def load_config_file(path: str | Path) -> JSON:
    if isinstance(path, str):
        path = Path(path)
    with open(path, encoding="UTF-8") as file:
        if path.suffix in [".yaml", ".yml"]:
            loaded = yaml.safe_load(file)
        else:
            loaded = json.load(file)
    return loaded


def load_config(file_name: str | Path | None) -> Configuration:
    if file_name is None:
        return Configuration()
    try:
        return Configuration().model_validate(load_config_file(file_name) or {})
    except ValidationError as error:
        raise ValueError("Error parsing configuration file") from error


class LogFormatter(logging.Formatter):
    _grey = "\x1b[38;21m"
    _green = "\x1b[32m"
    _yellow = "\u001b[33m"
    _red = "\x1b[31;21m"
    _bold_red = "\x1b[31;1m"
    _blue = "\u001b[34m"
    _white = "\u001b[37m"
    _reset = "\x1b[0m"
    _bold = "\u001b[1m"
    _prefix = (
        _green
        + "%(asctime)s  "
        + _reset
        + _blue
        + "%(name)s "
        + _reset
        + _white
        + "%(funcName)s "
        + _reset
        + _bold
        + _grey
        + "%(levelname)s "
        + _reset
    )
    _message = "%(message)s"
    _formats = {
        logging.DEBUG: _prefix + _grey + _message + _reset,
        logging.INFO: _prefix + _white + _message + _reset,
        logging.WARNING: _prefix + _yellow + _message + _reset,
        logging.ERROR: _prefix + _red + _message + _reset,
        logging.CRITICAL: _prefix + _bold_red + _message + _reset,
    }

    def format(self, record):
        log_fmt = self._formats.get(record.levelno)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)
