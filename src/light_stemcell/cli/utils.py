"""Shared utilities for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import typer
import yaml
from pydantic import BaseModel
from rich.console import Console

from light_stemcell.utils.errors import CloudError

if TYPE_CHECKING:
    from light_stemcell.core.manager import LightStemcellManager

# Shared console instance
console = Console()


def get_manager() -> "LightStemcellManager":
    """Build a manager from the CLI configuration."""
    from light_stemcell.core.manager import LightStemcellManager
    from light_stemcell.utils.config import get_config

    return LightStemcellManager.from_config(get_config())


def load_properties(
    image: str | None,
    properties_file: Path | None,
    overrides: list[str] | None,
) -> dict[str, Any]:
    """Assemble stemcell properties from CLI options.

    Args:
        image: Image reference as a JSON object
        properties_file: YAML or JSON file with the stemcell properties.
            All scalar values are read as strings
        overrides: ``key=value`` pairs applied last

    Returns:
        Stemcell properties

    Raises:
        typer.BadParameter: If an option cannot be parsed
    """
    properties: dict[str, Any] = {}

    if properties_file is not None:
        try:
            # Scalars stay strings, so `version: 1.10` is not read as 1.1
            data = yaml.load(properties_file.read_text(), Loader=yaml.BaseLoader)
        except (OSError, yaml.YAMLError) as e:
            raise typer.BadParameter(f"Cannot read {properties_file}: {e}", param_hint="--properties")
        if not isinstance(data, dict):
            raise typer.BadParameter(f"{properties_file} must contain a mapping", param_hint="--properties")
        properties.update(data)

    if image is not None:
        try:
            properties["image"] = json.loads(image, parse_int=str, parse_float=str)
        except ValueError as e:
            raise typer.BadParameter(f"Image must be a JSON object: {e}", param_hint="--image")

    for item in overrides or []:
        if "=" not in item:
            raise typer.BadParameter(f"Expected key=value, got '{item}'", param_hint="--set")
        key, value = item.split("=", 1)
        properties[key.strip()] = value

    if "image" not in properties:
        raise typer.BadParameter("An image is required (--image or an 'image' key in --properties)")

    return properties


def handle_cloud_error(error: CloudError, format: str = "terminal") -> None:
    """Report a CloudError and exit.

    Args:
        error: The error to report
        format: Output format (terminal, json)
    """
    if format == "json":
        output_json(error.to_error_detail())
    else:
        console.print(f"[red]Error:[/red] {error.message}", highlight=False, soft_wrap=True)
    raise typer.Exit(1)


def output_json(data: dict[str, Any] | BaseModel, output: Path | None = None) -> None:
    """Output data as JSON to console or file.

    Args:
        data: Data to output (dict or Pydantic model)
        output: Optional output file path
    """
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")

    json_str = json.dumps(data, indent=2, default=str)

    if output:
        output.write_text(json_str)
        console.print(f"Written to {output}")
    else:
        console.print(json_str, markup=False, highlight=False, soft_wrap=True)
