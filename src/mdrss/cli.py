"""CLI interface for mdrss using Typer."""

from pathlib import Path
from typing import Any, Optional

import typer
from typing_extensions import Annotated

from . import __version__
from .config import AppConfig, create_example_config, load_config
from .main import MdRssApp
from .utils.paths import get_config_file_path


app = typer.Typer(
    name="mdrss",
    help="Generate an RSS feed from a directory of markdown files",
    add_completion=False,
)


def build_config(config_file: Optional[Path] = None, **overrides: Any) -> AppConfig:
    """
    Build the run configuration from a config file and command-line overrides.

    Args:
        config_file: Explicit config file. If None, ``mdrss.yaml`` in the
            working directory is used when present.
        **overrides: Option values; None means "not given"

    Returns:
        Validated AppConfig
    """
    if config_file is None:
        config_file = get_config_file_path()

    if config_file is not None:
        return load_config(config_file).with_overrides(**overrides)

    return AppConfig(**{key: value for key, value in overrides.items() if value is not None})


@app.command()
def generate(
    markdown_dir: Annotated[Optional[Path], typer.Argument(help="Directory containing markdown files")] = None,
    output_path: Annotated[Optional[Path], typer.Argument(help="Destination RSS file")] = None,
    title: Annotated[Optional[str], typer.Option("--title", help="Feed title")] = None,
    link: Annotated[Optional[str], typer.Option("--link", help="Feed link")] = None,
    description: Annotated[Optional[str], typer.Option("--description", help="Feed description")] = None,
    delimiter: Annotated[Optional[str], typer.Option("--delimiter", "-d", help="Front matter delimiter")] = None,
    strict: Annotated[bool, typer.Option("--strict", help="Fail on the first invalid markdown file")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show detailed output")] = False,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
) -> None:
    """Generate the RSS feed."""
    try:
        config = build_config(
            config_file,
            markdown_dir=markdown_dir,
            output_path=output_path,
            title=title,
            link=link,
            description=description,
            delimiter=delimiter,
            strict=strict or None,
        )
        exit_code = MdRssApp(config).run(verbose=verbose)
    except Exception as e:
        typer.echo(f"✗ Error: {e}", err=True)
        raise typer.Exit(1)

    if exit_code == 0:
        typer.echo(f"✓ Wrote {config.output_path}")
    raise typer.Exit(exit_code)


@app.command()
def config(
    example: Annotated[bool, typer.Option("--example", help="Generate example config")] = False,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
) -> None:
    """Show the current or an example configuration."""
    if example:
        typer.echo(create_example_config())
        return

    if config_file is None:
        config_file = get_config_file_path()
    if config_file is None:
        typer.echo("No mdrss.yaml found. Use --example to generate one")
        return

    try:
        import yaml
        config_obj = load_config(config_file)
        typer.echo(yaml.dump(config_obj.model_dump(mode="json"), default_flow_style=False, indent=2, sort_keys=False))
    except Exception as e:
        typer.echo(f"✗ Error loading config: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"mdrss v{__version__}")


if __name__ == "__main__":
    app()
