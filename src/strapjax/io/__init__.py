"""Output of simulation records."""

from strapjax.io.records import (
    FLOAT_PRECISION,
    RECORD_COLUMNS,
    output_filename,
    records_to_dataframe,
    write_records,
)

__all__ = [
    "FLOAT_PRECISION",
    "RECORD_COLUMNS",
    "output_filename",
    "records_to_dataframe",
    "write_records",
]
