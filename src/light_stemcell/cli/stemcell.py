"""CLI commands for light stemcells."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.panel import Panel
from rich.table import Table

from light_stemcell.cli.utils import (
    console,
    get_manager,
    handle_cloud_error,
    load_properties,
    output_json,
)
from light_stemcell.utils.errors import CloudError


def create_cmd(
    image: Optional[str] = typer.Option(
        None,
        "--image",
        "-i",
        help="Image reference as JSON, e.g. '{\"publisher\": \"canonical\", ...}'",
    ),
    properties_file: Optional[Path] = typer.Option(
        None,
        "--properties",
        "-p",
        help="YAML file with the stemcell properties",
    ),
    overrides: Optional[List[str]] = typer.Option(
        None,
        "--set",
        "-s",
        help="Extra stemcell property as key=value (repeatable)",
    ),
) -> None:
    """
    Create a light stemcell.

    Validates that the image version exists in the default location and
    stores the stemcell metadata.

    Example:
        light-stemcell create --image '{"publisher": "canonical", "offer": "ubuntu", "sku": "18.04", "version": "1.0.0"}'
    """
    properties = load_properties(image, properties_file, overrides)

    try:
        manager = get_manager()
        with console.status("Creating stemcell..."):
            name = manager.create_stemcell(properties)
    except CloudError as e:
        handle_cloud_error(e)

    console.print(name, markup=False, highlight=False)


def delete_cmd(
    name: str = typer.Argument(..., help="Stemcell name"),
) -> None:
    """
    Delete a light stemcell. Deleting a missing stemcell succeeds.
    """
    try:
        get_manager().delete_stemcell(name)
    except CloudError as e:
        handle_cloud_error(e)

    console.print(f"Deleted {name}", markup=False, highlight=False)


def exists_cmd(
    name: str = typer.Argument(..., help="Stemcell name"),
    location: Optional[str] = typer.Option(
        None,
        "--location",
        "-l",
        help="Location to check (defaults to the storage account location)",
    ),
) -> None:
    """
    Check whether a light stemcell exists and its image is available.

    Prints true or false; exits 1 when the stemcell is not usable.
    """
    try:
        manager = get_manager()
        found = manager.has_stemcell(location or manager.default_location, name)
    except CloudError as e:
        handle_cloud_error(e)

    console.print("true" if found else "false")
    if not found:
        raise typer.Exit(1)


def info_cmd(
    name: str = typer.Argument(..., help="Stemcell name"),
    format: str = typer.Option(
        "terminal",
        "--format",
        "-f",
        help="Output format (terminal, json)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (json format only)",
    ),
) -> None:
    """
    Show the resolved image and metadata of a light stemcell.
    """
    try:
        info = get_manager().get_stemcell_info(name)
    except CloudError as e:
        handle_cloud_error(e, format)

    if format == "json":
        output_json({"uri": info.uri, "metadata": info.metadata}, output)
        return

    console.print()
    console.print(Panel(f"[bold]Image ID:[/bold] {info.uri}", title=f"Stemcell {name}"))

    table = Table(show_header=True, header_style="bold")
    table.add_column("Property")
    table.add_column("Value")
    table.add_row("Name", str(info.name or "-"))
    table.add_row("Version", str(info.version or "-"))
    table.add_row("OS type", info.os_type)
    table.add_row("Image size (MiB)", str(info.image_size))
    table.add_row("Image", str(info.image_reference))
    table.add_row("Kind", info.image_reference.kind)
    console.print(table)
