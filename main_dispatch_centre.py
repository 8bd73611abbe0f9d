"""Mini README: Entry point CLI for the PizzaDronz dispatch service.

This script exposes a Typer CLI with two commands: ``run`` starts the
FastAPI application under uvicorn, and ``plan`` validates an order file and
prints its delivery path as GeoJSON. Settings come from ``PIZZADRONZ_*``
environment variables when flags are omitted.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from pizzadronz.configuration import get_settings
from pizzadronz.data_source import RestDataSource, StaticDataSource
from pizzadronz.interface.schemas import OrderPayload
from pizzadronz.logging_utils import configure_root_logger, level_for_environment
from pizzadronz.orders import OrderValidator
from pizzadronz.route_planning import PathPlanner, RestaurantNotFound
from pizzadronz.utils import region_to_geojson

cli = typer.Typer(help="Run and exercise the PizzaDronz dispatch service.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(level_for_environment(settings.environment))

    # Browsers cannot open the 0.0.0.0 / :: wildcard addresses.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting PizzaDronz on {effective_host}:{effective_port}.\n"
        f"Try http://{browser_host}:{effective_port}/uuid"
    )
    uvicorn.run(
        "pizzadronz.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def plan(
    order_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Order JSON file."),
    feed_file: Optional[Path] = typer.Option(
        None,
        exists=True,
        dir_okay=False,
        help="Offline feed JSON with restaurants, noFlyZones and centralArea.",
    ),
    include_regions: bool = typer.Option(
        False, help="Emit a FeatureCollection including no-fly zones and the central area."
    ),
) -> None:
    """Validate an order and print its delivery path as GeoJSON."""

    settings = get_settings()
    configure_root_logger(level_for_environment(settings.environment))
    if feed_file is not None:
        data_source = StaticDataSource.from_json(feed_file)
    else:
        data_source = RestDataSource(
            settings.data_source_url, timeout_seconds=settings.request_timeout_seconds
        )

    payload = OrderPayload.model_validate(json.loads(order_file.read_text(encoding="utf-8")))
    result = OrderValidator(data_source).validate(payload.to_domain())
    if not result.is_valid:
        typer.echo(f"Order rejected: {result.code.value}", err=True)
        raise typer.Exit(code=1)

    planner = PathPlanner(data_source, max_steps=settings.max_planning_steps)
    try:
        flight_path = planner.plan_for_order(result.order)
    except RestaurantNotFound as error:
        typer.echo(f"Order rejected: {error}", err=True)
        raise typer.Exit(code=1) from error

    if not include_regions:
        typer.echo(json.dumps(flight_path.as_geojson()))
        return
    features = [
        {"type": "Feature", "geometry": flight_path.as_geojson(), "properties": {"name": "path"}}
    ]
    features.append(region_to_geojson(data_source.central_area()))
    features.extend(region_to_geojson(zone) for zone in data_source.no_fly_zones())
    typer.echo(json.dumps({"type": "FeatureCollection", "features": features}))


if __name__ == "__main__":
    cli()
