"""Typer CLI for mezzanine configuration files."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from mezzanine.application import (
    AccessoryNotFoundError,
    AccessoryRejectedError,
    MutationResult,
    apply_accessory_add,
    apply_accessory_remove,
    apply_accessory_update,
    apply_dimensions_update,
    compute_available_perimeter,
    compute_pricing,
    compute_railing_placements,
)
from mezzanine.application.config import (
    ConfigError,
    config_to_domain,
    domain_to_config,
    load_config,
    save_config,
)
from mezzanine.domain import AccessoryKind, Configuration, StairVariant
from mezzanine.infrastructure import PlacementFormatter, PricingFormatter, SummaryFormatter

app = typer.Typer(
    name="mezzanine",
    help="Configure mezzanine platforms, their accessories and prices.",
)

ConfigFileArg = Annotated[Path, typer.Argument(help="Path to the JSON configuration file")]
VariantOpt = Annotated[
    StairVariant | None, typer.Option("--variant", help="Stair variant")
]
LengthOpt = Annotated[
    float | None, typer.Option("--length", "-l", help="Railing segment length in meters")
]
GateOpt = Annotated[
    int | None, typer.Option("--opening-width", help="Pallet gate opening in mm (2000, 2500, 3000)")
]
QuantityOpt = Annotated[int | None, typer.Option("--quantity", "-q", help="Number of units")]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Configure mezzanine platforms, their accessories and prices."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def _display_config_error(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    if error.error_type == "validation" and error.details:
        for detail in error.details:
            typer.echo(f"  {detail.get('path', 'unknown')}: {detail.get('message')}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def _load(path: Path) -> Configuration:
    try:
        return config_to_domain(load_config(path))
    except ConfigError as e:
        _display_config_error(e)
        raise typer.Exit(code=1)


def _save(configuration: Configuration, path: Path) -> None:
    try:
        save_config(domain_to_config(configuration), path)
    except ConfigError as e:
        _display_config_error(e)
        raise typer.Exit(code=1)


def _run_mutation(path: Path, mutate) -> None:
    """Apply ``mutate`` to the configuration in ``path`` and write it back."""
    configuration = _load(path)
    try:
        result: MutationResult = mutate(configuration)
    except AccessoryRejectedError as e:
        typer.echo(f"Rejected: {e.reason}", err=True)
        if e.deficit is not None:
            typer.echo(
                f"  Available {e.available:g} m, requested {e.requested:g} m "
                f"(short by {e.deficit:g} m)",
                err=True,
            )
        raise typer.Exit(code=1)
    except (AccessoryNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _save(result.configuration, path)
    if result.note:
        typer.echo(result.note)
    typer.echo(f"Saved {path}")


def _params(**values) -> dict:
    return {key: value for key, value in values.items() if value is not None}


@app.command()
def init(
    config_file: ConfigFileArg,
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing file")] = False,
) -> None:
    """Write a default 9400 x 4000 x 3000 mm configuration."""
    if config_file.exists() and not force:
        typer.echo(f"Error: {config_file} already exists (use --force)", err=True)
        raise typer.Exit(code=1)
    _save(Configuration.default(), config_file)
    typer.echo(f"Created {config_file}")


@app.command()
def summary(config_file: ConfigFileArg) -> None:
    """Show dimensions, accessories and free perimeter."""
    configuration = _load(config_file)
    pricing = compute_pricing(configuration)
    typer.echo(
        SummaryFormatter().format(
            configuration,
            compute_available_perimeter(configuration),
            pricing.square_meters,
        )
    )


@app.command()
def price(config_file: ConfigFileArg) -> None:
    """Show the price breakdown."""
    typer.echo(PricingFormatter().format(compute_pricing(_load(config_file))))


@app.command()
def placements(config_file: ConfigFileArg) -> None:
    """Show where railing segments go around the perimeter."""
    layout = compute_railing_placements(_load(config_file))
    typer.echo(PlacementFormatter().format(layout))


@app.command()
def add(
    config_file: ConfigFileArg,
    kind: Annotated[AccessoryKind, typer.Argument(help="stair, railing or pallet_gate")],
    variant: VariantOpt = None,
    length: LengthOpt = None,
    opening_width: GateOpt = None,
    quantity: QuantityOpt = None,
    accessory_id: Annotated[
        str | None, typer.Option("--id", help="Accessory id (generated if omitted)")
    ] = None,
) -> None:
    """Add an accessory."""
    params = _params(
        id=accessory_id,
        variant=variant,
        segment_length=length,
        opening_width=opening_width,
        quantity=quantity,
    )
    _run_mutation(config_file, lambda c: apply_accessory_add(c, kind, params))


@app.command()
def update(
    config_file: ConfigFileArg,
    accessory_id: Annotated[str, typer.Argument(help="Id of the accessory to change")],
    variant: VariantOpt = None,
    length: LengthOpt = None,
    opening_width: GateOpt = None,
    quantity: QuantityOpt = None,
) -> None:
    """Change an existing accessory."""
    patch = _params(
        variant=variant,
        segment_length=length,
        opening_width=opening_width,
        quantity=quantity,
    )
    if not patch:
        typer.echo("Error: nothing to update", err=True)
        raise typer.Exit(code=1)
    _run_mutation(config_file, lambda c: apply_accessory_update(c, accessory_id, patch))


@app.command()
def remove(
    config_file: ConfigFileArg,
    accessory_id: Annotated[str, typer.Argument(help="Id of the accessory to remove")],
) -> None:
    """Remove an accessory."""
    _run_mutation(config_file, lambda c: apply_accessory_remove(c, accessory_id))


@app.command()
def resize(
    config_file: ConfigFileArg,
    length: Annotated[int | None, typer.Option("--length", help="Length in mm")] = None,
    width: Annotated[int | None, typer.Option("--width", help="Depth in mm")] = None,
    height: Annotated[int | None, typer.Option("--height", help="Height in mm")] = None,
    load: Annotated[
        int | None, typer.Option("--load", help="Load class in kg/m² (250, 350, 500)")
    ] = None,
) -> None:
    """Change platform dimensions or load class."""
    _run_mutation(
        config_file,
        lambda c: apply_dimensions_update(
            c, length=length, width=width, height=height, load_class=load
        ),
    )


if __name__ == "__main__":
    app()
