"""Command line interface for resistance curves of a configured ship."""

from pathlib import Path
import logging

import click
import numpy as np

from .config import ShipConfig, resistance_method_from_name
from .curves import resistance_curve

_DISPLAY_COLUMNS = [
    "froude_number",
    "frictional_n",
    "appendage_n",
    "wave_n",
    "bulbous_bow_n",
    "immersed_transom_n",
    "model_ship_correlation_n",
    "air_n",
    "total_n",
    "effective_power_kw",
]


@click.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--speed-knots",
    type=float,
    multiple=True,
    help="Speed in knots (repeat for several speeds, e.g., --speed-knots 12 --speed-knots 14).",
)
@click.option(
    "--min-speed-knots",
    type=float,
    default=None,
    help="Lower end of an evenly spaced speed range (used without --speed-knots).",
)
@click.option(
    "--max-speed-knots",
    type=float,
    default=None,
    help="Upper end of the speed range. Default: the ship's maximum speed.",
)
@click.option(
    "--speed-step-knots",
    type=float,
    default=1.0,
    help="Step of the speed range in knots.",
)
@click.option(
    "--dynamic-method",
    type=click.Choice(["holtrop", "lang_mao"], case_sensitive=False),
    default=None,
    help="Override the method for added resistance in wind and waves.",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the full table to this CSV file.",
)
def main(
    config,
    speed_knots,
    min_speed_knots,
    max_speed_knots,
    speed_step_knots,
    dynamic_method,
    output,
):
    """Print the resistance components of the ship configured in CONFIG."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    ship_config = ShipConfig.load_json(config)
    ship = ship_config.build_ship()
    if dynamic_method is not None:
        ship.dynamic_resistance_strategy = resistance_method_from_name(dynamic_method)

    if speed_knots:
        speeds = list(speed_knots)
    elif min_speed_knots is not None:
        upper = ship.max_speed_knots if max_speed_knots is None else max_speed_knots
        if speed_step_knots <= 0 or upper < min_speed_knots:
            raise click.BadParameter(
                "Speed range needs a positive step and max >= min.",
                param_hint="--speed-step-knots",
            )
        speeds = list(
            np.arange(min_speed_knots, upper + 0.5 * speed_step_knots, speed_step_knots)
        )
    else:
        speeds = [ship_config.speed_knots]

    logging.info(
        f"{ship.name}: {ship.resistance_strategy.method_name()} at {len(speeds)} speed(s)"
    )
    table = resistance_curve(ship, speeds)

    columns = [c for c in _DISPLAY_COLUMNS if c in table.columns]
    columns += [c for c in ("added_n", "total_with_added_n") if c in table.columns]
    click.echo(table[columns].to_string(float_format=lambda v: f"{v:,.4g}"))

    if output is not None:
        output = Path(output)
        output.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(output)
        click.echo(f"Results saved to {output}")


if __name__ == "__main__":
    main()
