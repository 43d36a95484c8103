"""Flat CSV of per-entity average throughput and latency."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Union

from .constants import CSV_FILE_NAME, OUTPUT_ENCODING, OUTPUT_ERRORS
from .models import REPORT_WRITE_FAILURE, ReportError, SimpleResult
from .numbers import format_csv_value


def format_csv_line(label: str, result: SimpleResult) -> str:
    """One summary line, e.g. "cfgA, 100.46, 2.00"."""
    tp = format_csv_value(result.avg_throughput)
    lat = format_csv_value(result.avg_latency)
    return f"{label}, {tp}, {lat}\n"


def write_csv_summary(
    out_folder: Path,
    simple_results: Mapping[str, SimpleResult],
    file_name: str = CSV_FILE_NAME,
) -> Union[Path, ReportError]:
    """
    Write the summary CSV into a folder, replacing any previous one.

    Lines follow the mapping's iteration order; there is no header row.

    Returns:
        The written path, or a ReportError if the file could not be written
    """
    out_file = Path(out_folder) / file_name

    try:
        with open(out_file, "w", encoding=OUTPUT_ENCODING, errors=OUTPUT_ERRORS, newline="") as f:
            for label, result in simple_results.items():
                f.write(format_csv_line(label, result))
    except (OSError, UnicodeError) as e:
        abs_path = os.path.abspath(out_file)
        return ReportError(
            kind=REPORT_WRITE_FAILURE,
            path=Path(abs_path),
            message=f"Exception is raised during file processing: {abs_path}",
            cause=e,
        )

    return out_file
