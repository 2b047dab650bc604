"""Tests for the strapjax.io module.

Tests cover:
- Column names and order of the record table
- CSV header and fixed-point six-decimal formatting
- Output file naming
"""

import re

import jax.numpy as jnp
import polars as pl
import pytest

from strapjax.io import (
    RECORD_COLUMNS,
    output_filename,
    records_to_dataframe,
    write_records,
)
from strapjax.simulation import SimulationConfig, simulate

_FIXED_POINT = re.compile(r"^-?\d+\.\d{6}$")


@pytest.fixture
def records():
    return simulate(SimulationConfig(dt=0.1, total_time=1.0))


class TestRecordsToDataFrame:
    def test_columns(self, records):
        df = records_to_dataframe(records)
        assert tuple(df.columns) == RECORD_COLUMNS
        assert len(RECORD_COLUMNS) == 16

    def test_shape_and_dtype(self, records):
        df = records_to_dataframe(records)
        assert df.height == 10
        assert all(dtype == pl.Float64 for dtype in df.dtypes)

    def test_values(self, records):
        df = records_to_dataframe(records)
        assert df["time"].to_list()[0] == 0.0
        assert df["p"].to_list()[0] == pytest.approx(900.0, abs=1e-9)
        assert df["pos_n"].to_list()[-1] == pytest.approx(float(records.position_ned[-1, 0]))
        assert df["theta_dot"].to_list()[3] == pytest.approx(float(records.euler_rates[3, 1]))


class TestWriteRecords:
    def test_header(self, records, tmp_path):
        path = write_records(records, tmp_path / "out.csv")
        header = path.read_text().splitlines()[0]
        assert header.split(",") == list(RECORD_COLUMNS)

    def test_row_count(self, records, tmp_path):
        path = write_records(records, tmp_path / "out.csv")
        assert len(path.read_text().splitlines()) == 11

    def test_fixed_point_six_decimals(self, records, tmp_path):
        path = write_records(records, tmp_path / "out.csv")
        for line in path.read_text().splitlines()[1:]:
            fields = line.split(",")
            assert len(fields) == 16
            assert all(_FIXED_POINT.match(field) for field in fields), line

    def test_first_row(self, records, tmp_path):
        path = write_records(records, tmp_path / "out.csv")
        first = path.read_text().splitlines()[1].split(",")
        assert first[:7] == [
            "0.000000", "0.000000", "0.000000", "0.000000",
            "900.000000", "57.295780", "0.000000",
        ]

    def test_creates_parent_directory(self, records, tmp_path):
        path = write_records(records, tmp_path / "nested" / "dir" / "out.csv")
        assert path.exists()

    def test_separator(self, records, tmp_path):
        path = write_records(records, tmp_path / "out.txt", separator="\t")
        assert path.read_text().splitlines()[0].split("\t") == list(RECORD_COLUMNS)

    def test_round_trip_precision(self, records, tmp_path):
        path = write_records(records, tmp_path / "out.csv")
        df = pl.read_csv(path)
        assert jnp.allclose(
            jnp.asarray(df["pos_n"].to_numpy()), records.position_ned[:, 0], atol=5e-7
        )


class TestOutputFilename:
    @pytest.mark.parametrize(
        "dt, expected",
        [
            (0.2, "attitude_dt_0.2.csv"),
            (0.1, "attitude_dt_0.1.csv"),
            (0.025, "attitude_dt_0.025.csv"),
            (0.0125, "attitude_dt_0.0125.csv"),
        ],
    )
    def test_reference_step_sizes(self, dt, expected):
        assert output_filename(dt) == expected

    def test_prefix(self):
        assert output_filename(0.1, prefix="run") == "run_dt_0.1.csv"
