"""Command-line interface for inspecting the model catalog.

Every command is read-only: the CLI renders the static catalog and the
effective model selection but never changes them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Optional

import click
from rich import box
from rich.console import Console
from rich.table import Table

from modelcatalog import __version__
from modelcatalog.core.catalog import get_catalog
from modelcatalog.core.config import get_selected_model
from modelcatalog.core.errors import CatalogError, UnknownModelError
from modelcatalog.core.types import ModelConfig
from modelcatalog.utils.log import enable_file_logging, get_logger

console = Console()
logger = get_logger()


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))


def _format_tokens(value: Optional[int]) -> str:
    return f"{value:,}" if value else "-"


def _vision_label(model: ModelConfig) -> str:
    if model.supports_vision is None:
        return "?"
    return "yes" if model.supports_vision else "no"


def _models_table(models: Iterable[ModelConfig], title: str) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("Full ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Context", justify="right")
    table.add_column("Max output", justify="right")
    table.add_column("Vision", justify="center")
    for model in models:
        table.add_row(
            model.full_id,
            model.display_name,
            _format_tokens(model.context_window),
            _format_tokens(model.max_output_tokens),
            _vision_label(model),
        )
    return table


@click.group(help="Inspect the provider and model catalog.")
@click.version_option(version=__version__, prog_name="modelcatalog")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write debug logs to this file.",
)
def cli(log_file: Optional[Path]) -> None:
    if log_file is not None:
        enable_file_logging(log_file)


@cli.command(name="providers")
@click.option("--json", "as_json", is_flag=True, help="Output JSON.")
def providers_cmd(as_json: bool) -> None:
    """List catalog providers in display order."""
    providers = get_catalog().providers
    if as_json:
        _echo_json([provider.model_dump(mode="json") for provider in providers])
        return

    table = Table(title="Providers", box=box.SIMPLE_HEAVY)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("API key env")
    table.add_column("Base URL")
    table.add_column("Models", justify="right")
    for provider in providers:
        table.add_row(
            provider.id.value,
            provider.name,
            provider.api_key_env_var or "-",
            provider.base_url or "(default)",
            str(len(provider.models)),
        )
    console.print(table)


@cli.command(name="models")
@click.option("--provider", "provider_id", default=None, help="Only list this provider's models.")
@click.option("--vision", is_flag=True, help="Only list models that accept images.")
@click.option("--json", "as_json", is_flag=True, help="Output JSON.")
def models_cmd(provider_id: Optional[str], vision: bool, as_json: bool) -> None:
    """List catalog models."""
    catalog = get_catalog()
    try:
        if provider_id is not None:
            models = list(catalog.require_provider(provider_id).models)
        else:
            models = catalog.models()
    except CatalogError as exc:
        raise click.ClickException(str(exc)) from exc

    if vision:
        models = [model for model in models if model.has_vision]
    logger.debug(
        "[cli] Listing models",
        extra={"provider": provider_id, "vision_only": vision, "count": len(models)},
    )

    if as_json:
        _echo_json([model.model_dump(mode="json") for model in models])
        return
    console.print(_models_table(models, title="Models"))


@cli.command(name="show")
@click.argument("full_id")
@click.option("--json", "as_json", is_flag=True, help="Output JSON.")
def show_cmd(full_id: str, as_json: bool) -> None:
    """Show one model by its provider/model id."""
    model = get_catalog().find_model(full_id)
    if model is None:
        raise click.ClickException(str(UnknownModelError(None, full_id)))

    if as_json:
        _echo_json(model.model_dump(mode="json"))
        return
    console.print(_models_table([model], title=model.display_name))


@cli.command(name="default")
@click.option("--json", "as_json", is_flag=True, help="Output JSON.")
def default_cmd(as_json: bool) -> None:
    """Show the default model selection."""
    catalog = get_catalog()
    selection = catalog.default
    model = catalog.default_model_config()
    if as_json:
        _echo_json(
            {
                "selection": selection.model_dump(mode="json"),
                "model": model.model_dump(mode="json"),
            }
        )
        return
    console.print(f"Default model: [bold]{model.display_name}[/bold] ({selection.model})")


@cli.command(name="current")
@click.option("--json", "as_json", is_flag=True, help="Output JSON.")
def current_cmd(as_json: bool) -> None:
    """Show the effective model selection from the user config."""
    selection = get_selected_model()
    is_default = selection == get_catalog().default
    if as_json:
        _echo_json({"selection": selection.model_dump(mode="json"), "is_default": is_default})
        return

    suffix = " [dim](default)[/dim]" if is_default else ""
    console.print(f"Current model: [bold]{selection.model}[/bold]{suffix}")
    if selection.base_url:
        console.print(f"Base URL: {selection.base_url}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
