"""Tabular output of simulation records.

Converts a stacked :class:`~strapjax.simulation.state.StateRecord` into a
Polars DataFrame with one row per step and writes it as CSV with a header
row and fixed-point values at six decimal places.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import polars as pl

from strapjax.simulation.state import StateRecord

logger = logging.getLogger(__name__)

RECORD_COLUMNS: tuple[str, ...] = (
    "time",
    "phi", "theta", "psi",
    "p", "q", "r",
    "phi_dot", "theta_dot", "psi_dot",
    "vel_n", "vel_e", "vel_d",
    "pos_n", "pos_e", "pos_d",
)
"""Output column order: time [s], Euler angles [deg], body rates [deg/s],
Euler-angle rates [deg/s], NED velocity [ft/s], NED position [ft]."""

FLOAT_PRECISION: int = 6
"""Decimal places written for every value."""


def records_to_dataframe(records: StateRecord) -> pl.DataFrame:
    """Flatten stacked records into a DataFrame.

    Args:
        records: Records with a leading step axis, as returned by
            :func:`~strapjax.simulation.simulate`.

    Returns:
        pl.DataFrame: One ``Float64`` column per entry of
            :data:`RECORD_COLUMNS`, one row per step.
    """
    table = np.column_stack([
        np.asarray(records.time, dtype=np.float64),
        np.asarray(records.euler, dtype=np.float64),
        np.asarray(records.rates, dtype=np.float64),
        np.asarray(records.euler_rates, dtype=np.float64),
        np.asarray(records.velocity_ned, dtype=np.float64),
        np.asarray(records.position_ned, dtype=np.float64),
    ])

    return pl.DataFrame(
        {name: pl.Series(table[:, i], dtype=pl.Float64) for i, name in enumerate(RECORD_COLUMNS)}
    )


def write_records(records: StateRecord, filepath: str | Path, separator: str = ",") -> Path:
    """Write records to *filepath* as delimited text.

    Creates parent directories if they do not exist.

    Args:
        records: Stacked per-step records.
        filepath: Destination file.
        separator: Column delimiter.  Default: ``","``.

    Returns:
        Path: The written file.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    df = records_to_dataframe(records)
    df.write_csv(
        filepath,
        separator=separator,
        float_precision=FLOAT_PRECISION,
        float_scientific=False,
    )

    logger.info("Wrote %d records to %s", df.height, filepath)
    return filepath


def output_filename(dt: float, prefix: str = "attitude") -> str:
    """File name for the run with timestep *dt*.

    Examples:
        >>> output_filename(0.025)
        'attitude_dt_0.025.csv'
    """
    return f"{prefix}_dt_{dt:g}.csv"
