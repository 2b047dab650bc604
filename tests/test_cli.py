"""Tests for the strapjax command-line interface."""

from typer.testing import CliRunner

from strapjax.cli import app
from strapjax.io import RECORD_COLUMNS

runner = CliRunner()


class TestCli:
    def test_writes_one_file_per_step_size(self, tmp_path):
        result = runner.invoke(
            app,
            ["--dt", "0.2", "--dt", "0.1", "--total-time", "2", "--output-dir", str(tmp_path)],
        )
        assert result.exit_code == 0, result.output
        coarse = tmp_path / "attitude_dt_0.2.csv"
        fine = tmp_path / "attitude_dt_0.1.csv"
        assert coarse.exists()
        assert fine.exists()
        assert len(coarse.read_text().splitlines()) == 11
        assert len(fine.read_text().splitlines()) == 21
        assert "Final position difference" in result.output

    def test_single_run(self, tmp_path):
        result = runner.invoke(
            app, ["--dt", "0.1", "--total-time", "1", "--output-dir", str(tmp_path)]
        )
        assert result.exit_code == 0, result.output
        lines = (tmp_path / "attitude_dt_0.1.csv").read_text().splitlines()
        assert lines[0].split(",") == list(RECORD_COLUMNS)
        assert "Final position difference" not in result.output

    def test_prefix_and_airspeed(self, tmp_path):
        result = runner.invoke(
            app,
            [
                "--dt", "0.5", "--total-time", "1", "--airspeed", "0",
                "--prefix", "still", "--output-dir", str(tmp_path),
            ],
        )
        assert result.exit_code == 0, result.output
        rows = (tmp_path / "still_dt_0.5.csv").read_text().splitlines()[1:]
        for row in rows:
            assert all(float(v) == 0.0 for v in row.split(",")[10:])

    def test_invalid_step_size(self, tmp_path):
        result = runner.invoke(
            app, ["--dt", "5", "--total-time", "1", "--output-dir", str(tmp_path)]
        )
        assert result.exit_code == 1
        assert not list(tmp_path.iterdir())
