"""Generation of result pages for every run folder under an input root.

Typical use from the plotting stage, once all charts are written:

    summary = generate(out_dir, ReportConfig(chart_columns=3), info_map, simple_results)

Each folder that holds chart images gets its own Results.html (and
results.csv when simple results are supplied). A bad file name or a
failed write is reported and skipped; the remaining folders are still
processed.
"""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .csv_summary import write_csv_summary
from .file_grouper import candidate_folders, group_chart_files
from .html_report import write_html_report
from .models import (
    FOLDER_SCAN_FAILURE,
    FolderReport,
    GenerationSummary,
    PlotInfoMap,
    ReportConfig,
    ReportError,
    SimpleResult,
    info_key,
)
from .name_parser import parse_folder_time
from .reporting import ConsoleReporter


def slice_info_map(groups: Dict[str, List[Path]], info_map: PlotInfoMap) -> PlotInfoMap:
    """Read-only view of the statistics of just the charts in `groups`."""
    sliced = {}
    for files in groups.values():
        for f in files:
            key = info_key(f)
            if key in info_map:
                sliced[key] = tuple(info_map[key])
    return MappingProxyType(sliced)


def generate_folder(
    folder: Path,
    config: ReportConfig,
    info_map: PlotInfoMap,
    simple_results: Optional[Mapping[str, SimpleResult]],
    reporter,
) -> Optional[FolderReport]:
    """
    Produce the outputs of one folder.

    Returns:
        FolderReport, or None when the folder holds no usable charts and
        nothing was attempted. A folder that cannot be listed yields a
        FolderReport with a single FolderScanFailure error
    """
    try:
        grouping = group_chart_files(folder)
    except OSError as e:
        error = ReportError(
            kind=FOLDER_SCAN_FAILURE,
            path=Path(os.path.abspath(folder)),
            message=f"Failed to scan folder: {os.path.abspath(folder)}",
            cause=e,
        )
        reporter.error(error.message, error.cause)
        return FolderReport(folder=folder, errors=[error])

    for error in grouping.errors:
        reporter.error(error.message)

    if not grouping.groups:
        if not grouping.errors:
            return None
        return FolderReport(folder=folder, errors=list(grouping.errors))

    report = FolderReport(folder=folder, errors=list(grouping.errors))

    test_time = parse_folder_time(folder.name)
    folder_infos = slice_info_map(grouping.groups, info_map)

    html = write_html_report(
        folder / config.html_file_name,
        grouping.groups,
        folder_infos,
        config,
        test_time,
    )
    if isinstance(html, ReportError):
        reporter.error(html.message, html.cause)
        report.errors.append(html)
    else:
        report.html_path = html
        reporter.info(f"Html file is generated: {html}")

    if simple_results is not None:
        csv = write_csv_summary(folder, simple_results, config.csv_file_name)
        if isinstance(csv, ReportError):
            reporter.error(csv.message, csv.cause)
            report.errors.append(csv)
        else:
            report.csv_path = csv

    return report


def generate(
    in_folder: Path,
    config: Optional[ReportConfig] = None,
    info_map: Optional[PlotInfoMap] = None,
    simple_results: Optional[Mapping[str, SimpleResult]] = None,
    reporter=None,
) -> GenerationSummary:
    """
    Generate result pages for the input root and its immediate subfolders.

    Args:
        in_folder: Root folder written by the plotting stage
        config: Layout settings (defaults to ReportConfig())
        info_map: Chart statistics keyed by absolute chart path
        simple_results: Per-entity averages; when given, results.csv is
            written next to every generated page
        reporter: Sink with info(message) and error(message, cause=None);
            defaults to printing to the console

    Returns:
        GenerationSummary with one FolderReport per folder that had charts
        or malformed chart names
    """
    config = config or ReportConfig()
    info_map = info_map if info_map is not None else {}
    reporter = reporter or ConsoleReporter()

    summary = GenerationSummary()
    for folder in candidate_folders(Path(in_folder)):
        report = generate_folder(folder, config, info_map, simple_results, reporter)
        if report is not None:
            summary.folders.append(report)

    return summary
