"""Main CLI entry point for light-stemcell."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from light_stemcell.cli import stemcell

app = typer.Typer(
    name="light-stemcell",
    help="Manage BOSH light stemcells on Azure.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register subcommands
app.command(name="create")(stemcell.create_cmd)
app.command(name="delete")(stemcell.delete_cmd)
app.command(name="exists")(stemcell.exists_cmd)
app.command(name="info")(stemcell.info_cmd)


@app.callback()
def main(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
) -> None:
    """
    light-stemcell: manage BOSH light stemcells on Azure.

    - [bold]create[/bold]: Register a platform or gallery image as a stemcell
    - [bold]exists[/bold]: Check a stemcell's image in a location
    - [bold]info[/bold]: Show the resolved image of a stemcell
    - [bold]delete[/bold]: Remove a stemcell's metadata
    """
    from light_stemcell.utils.config import apply_env_overrides, get_config, load_config, set_config
    from light_stemcell.utils.errors import ConfigurationError
    from light_stemcell.utils.logging import configure_logging

    try:
        if config is not None:
            set_config(apply_env_overrides(load_config(config)))
        logging_config = get_config().logging

        if verbose:
            configure_logging(level="DEBUG", structured=logging_config.structured)
        elif quiet:
            configure_logging(level="WARNING", structured=logging_config.structured)
        else:
            configure_logging(level=logging_config.level, structured=logging_config.structured)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e.message}", highlight=False, soft_wrap=True)
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the light-stemcell version."""
    from light_stemcell import __version__

    console.print(f"light-stemcell version {__version__}")


if __name__ == "__main__":
    app()
