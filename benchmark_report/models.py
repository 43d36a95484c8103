"""Data types shared by the report generator."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .constants import (
    CSV_FILE_NAME,
    DEFAULT_CHART_COLUMNS,
    DEFAULT_INLINE_STATS,
    HTML_FILE_NAME,
)

# Malformed chart file name, the file is skipped
MALFORMED_FILE_NAME = "MalformedFileName"
# I/O error while writing Results.html or results.csv
REPORT_WRITE_FAILURE = "ReportWriteFailure"
# Folder could not be listed, nothing is written for it
FOLDER_SCAN_FAILURE = "FolderScanFailure"


class GenerationMode(enum.Enum):
    """How the plotting stage combined the runs shown on a page."""
    STANDARD = "standard"
    COMPARISON = "comparison"
    COMPOUND = "compound"


@dataclass(frozen=True)
class PlotInfo:
    """Statistics and legend data for one series drawn on a chart.

    Attributes:
        name: Display name of the benchmark, possibly prefixed with a run timestamp
        configuration: Configuration labels of the plotted run(s)
        color: Hex color of the series without the leading '#'
        average: Mean value of the series
        minimum: Minimum value of the series
        maximum: Maximum value of the series
        standard_deviation: Standard deviation of the series
        mode: Generation mode the chart was produced in
        probe_name: Probe the series belongs to
    """
    name: str
    configuration: Tuple[str, ...]
    color: str
    average: float
    minimum: float
    maximum: float
    standard_deviation: float
    mode: GenerationMode = GenerationMode.STANDARD
    probe_name: str = ""


@dataclass(frozen=True)
class SimpleResult:
    """Average throughput and latency of one benchmarked entity."""
    avg_throughput: float
    avg_latency: float


@dataclass(frozen=True)
class ReportConfig:
    """Caller-tunable settings for page generation.

    Attributes:
        chart_columns: Number of chart images per grid row
        inline_stats: Repeat each statistics table below its thumbnail
        html_file_name: Name of the page written into each folder
        csv_file_name: Name of the CSV summary written into each folder
    """
    chart_columns: int = DEFAULT_CHART_COLUMNS
    inline_stats: bool = DEFAULT_INLINE_STATS
    html_file_name: str = HTML_FILE_NAME
    csv_file_name: str = CSV_FILE_NAME

    def __post_init__(self):
        if self.chart_columns < 1:
            raise ValueError(f"chart_columns must be positive, got {self.chart_columns}")


@dataclass
class ReportError:
    """A failure that was reported and skipped instead of aborting the batch."""
    kind: str
    path: Path
    message: str
    cause: Optional[BaseException] = None


@dataclass
class GroupingResult:
    """Charts of one folder grouped by probe, plus the files that were skipped."""
    groups: Dict[str, List[Path]]
    errors: List[ReportError] = field(default_factory=list)


@dataclass
class FolderReport:
    """Outcome of generating the outputs for one run folder."""
    folder: Path
    html_path: Optional[Path] = None
    csv_path: Optional[Path] = None
    errors: List[ReportError] = field(default_factory=list)


@dataclass
class GenerationSummary:
    """Outcome of one generate() call over an input root."""
    folders: List[FolderReport] = field(default_factory=list)

    @property
    def errors(self) -> List[ReportError]:
        return [e for report in self.folders for e in report.errors]

    @property
    def html_files(self) -> List[Path]:
        return [r.html_path for r in self.folders if r.html_path is not None]

    def get_summary_stats(self) -> Dict[str, int]:
        """Count generated pages, CSV files and reported errors."""
        return {
            'folders': len(self.folders),
            'html': len(self.html_files),
            'csv': sum(1 for r in self.folders if r.csv_path is not None),
            'errors': len(self.errors),
        }


# Statistics supplied by the plotting stage, keyed by absolute chart path
PlotInfoMap = Mapping[str, Sequence[PlotInfo]]


def info_key(path: Path) -> str:
    """Key of a chart file in a PlotInfoMap."""
    return os.path.abspath(path)


def plot_infos(info_map: PlotInfoMap, path: Path) -> Optional[Sequence[PlotInfo]]:
    """PlotInfo records of one chart, or None if the plotting stage supplied none."""
    return info_map.get(info_key(path))
