import click
import json
import logging
from functools import wraps
from importlib.metadata import PackageNotFoundError, version as package_version
from mermaidkit.description import load_diagram
from mermaidkit.debug import live_editor_link
from mermaidkit.utils import load_config, LogFormatter, markdown_document, render_to_file

log = logging.getLogger(__name__)

DISTRIBUTION = "mermaidkit"


def installed_version() -> str:
    try:
        return package_version(DISTRIBUTION)
    except PackageNotFoundError:
        # Running from a source checkout that was never installed
        return "unknown"


def setup_command(func):
    """Decorator to handle common CLI setup (logging, config loading, version)."""

    @wraps(func)
    def wrapper(config, debug, version=None, **kwargs):
        # Handle --version flag
        if version is not None and version:
            click.echo(installed_version())
            return

        # Setup logging
        log_handler = logging.StreamHandler()
        log_handler.setFormatter(LogFormatter())
        logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING, handlers=[log_handler])

        # Load config
        config_obj = load_config(config)
        if debug:
            log.debug(json.dumps(config_obj.model_dump(mode="json"), indent=4))

        # Call actual command with config_obj
        return func(config_obj=config_obj, debug=debug, **kwargs)

    return wrapper


@click.group()
def cli():
    pass


@click.command()
@click.argument("description", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--config", default=None, help="Configuration file.")
@click.option("--debug", default=False, is_flag=True, help="Enable debug.")
@click.option("--version", is_flag=True, help="Show the application's version.")
@click.option("--output", default=None, help="Output file path (default: stdout).")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["mermaid", "markdown"], case_sensitive=False),
    default=None,
    help="Output format (default: from configuration).",
)
@setup_command
def render(config_obj, debug, description, output, output_format):
    """Render a diagram description file (YAML or JSON) to Mermaid."""
    if description is None:
        raise click.UsageError("Missing argument 'DESCRIPTION'.")
    diagram = load_diagram(description, config_obj)
    content = diagram.render()

    if (output_format or config_obj.output_format) == "markdown":
        content = markdown_document(config_obj.markdown_title or diagram.base.title, content)

    if output:
        render_to_file(output, content)
        click.echo(f"Diagram written to {output}")
    else:
        click.echo(content, nl=False)


@click.command()
@click.argument("description", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--config", default=None, help="Configuration file.")
@click.option("--debug", default=False, is_flag=True, help="Enable debug.")
@click.option("--view", default=False, is_flag=True, help="Link to the read-only view instead of the editor.")
@setup_command
def link(config_obj, debug, description, view):
    """Print a Mermaid Live Editor link for a diagram description file."""
    if description is None:
        raise click.UsageError("Missing argument 'DESCRIPTION'.")
    diagram = load_diagram(description, config_obj)
    click.echo(live_editor_link(diagram, view=view))


cli.add_command(render)
cli.add_command(link)

if __name__ == "__main__":
    cli()
