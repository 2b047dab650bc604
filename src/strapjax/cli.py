"""Command-line sweep over simulation step sizes.

Runs the attitude simulation once per ``--dt`` value, writes one CSV per run
and prints how far each run's final position lies from the finest run's.

Usage:
    strapjax [OPTIONS]

Examples:
    # Reference sweep: dt = 0.2, 0.1, 0.025, 0.0125 over 60 s
    strapjax --output-dir results

    # Single run
    strapjax --dt 0.1 --output-dir results
"""

import logging
from pathlib import Path
from typing import Annotated

import jax.numpy as jnp
import typer

from strapjax.config import set_dtype
from strapjax.constants import DEFAULT_AIRSPEED_KNOTS, DEFAULT_STEP_SIZES, DEFAULT_TOTAL_TIME
from strapjax.io import output_filename, write_records
from strapjax.simulation import InitialConditions, final_position_differences, run_sweep

app = typer.Typer(add_completion=False)


@app.command()
def main(
    dt: Annotated[
        list[float] | None,
        typer.Option(help="Timestep in seconds (repeatable; default: reference sweep)"),
    ] = None,
    total_time: Annotated[float, typer.Option(help="Simulation horizon in seconds")] = DEFAULT_TOTAL_TIME,
    airspeed: Annotated[
        float, typer.Option(help="Airspeed along body x in knots")
    ] = DEFAULT_AIRSPEED_KNOTS,
    output_dir: Annotated[Path, typer.Option(help="Directory for output files")] = Path("."),
    prefix: Annotated[str, typer.Option(help="Output file name prefix")] = "attitude",
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Simulate attitude kinematics for each timestep and write the records."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    set_dtype(jnp.float64)  # Must be before any tracing

    step_sizes = tuple(dt) if dt else DEFAULT_STEP_SIZES

    try:
        results = run_sweep(
            step_sizes,
            total_time=total_time,
            initial=InitialConditions.from_airspeed(airspeed),
        )
    except ValueError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    for result in results:
        path = write_records(result.records, output_dir / output_filename(result.dt, prefix))
        typer.echo(f"dt={result.dt:g} s: {result.records.time.shape[0]} records -> {path}")

    if len(results) > 1:
        typer.echo("\nFinal position difference from finest timestep:")
        for step, diff in final_position_differences(results).items():
            typer.echo(f"  dt={step:g} s: {diff:.6f} ft")


def run() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    run()
