"""Discovery of run folders and grouping of chart images by probe."""

from __future__ import annotations

import functools
import os
import re
from pathlib import Path
from typing import Dict, List, Tuple

from .constants import CHART_FILE_SUFFIX, PRIMARY_PROBE
from .models import MALFORMED_FILE_NAME, GroupingResult, ReportError
from .name_parser import MalformedFileNameError, parse_probe_name

_DIGIT_RUN = re.compile(r"(\d+)")


def _normalize_probe(probe: str) -> str:
    return probe.strip().lower()


def compare_probes(probe1: str, probe2: str) -> int:
    """
    Order probe identifiers for display.

    The throughput/latency probe always comes first; all other probes are
    ordered case-insensitively. Identifiers that differ only by case or
    surrounding whitespace compare equal.

    Returns:
        Negative, zero or positive, like a classic comparison function
    """
    p1 = _normalize_probe(probe1)
    p2 = _normalize_probe(probe2)

    if p1 == p2:
        return 0

    primary = PRIMARY_PROBE.lower()
    if p1 == primary:
        return -1
    if p2 == primary:
        return 1

    return -1 if p1 < p2 else 1


probe_sort_key = functools.cmp_to_key(compare_probes)


def chart_file_key(path: Path) -> Tuple[tuple, str]:
    """
    Sort key giving chart files a stable natural order.

    Digit runs compare numerically and text compares case-insensitively,
    so "b_P_2.png" sorts before "b_P_10.png". The raw name breaks ties.
    """
    name = path.name
    parts = _DIGIT_RUN.split(name)
    # re.split with a capture group alternates text and digit runs
    natural = tuple(int(p) if i % 2 else p.lower() for i, p in enumerate(parts))
    return natural, name


def candidate_folders(root: Path) -> List[Path]:
    """
    Folders that may hold charts: the root itself plus its immediate subfolders.

    Returns an empty list when the root does not exist or is empty.
    """
    root = Path(root)
    if not root.is_dir():
        return []

    entries = sorted(root.iterdir(), key=lambda p: p.name)
    if not entries:
        return []

    return [root] + [p for p in entries if p.is_dir()]


def group_chart_files(folder: Path) -> GroupingResult:
    """
    Group the chart images of one folder by probe identifier.

    Only regular files ending in ".png" are considered. Files whose name
    cannot be parsed are returned as errors and left out of every group.

    Args:
        folder: Folder to scan (not recursive)

    Returns:
        GroupingResult whose groups iterate in probe display order, each
        holding its files in chart_file_key order
    """
    folder = Path(folder)
    buckets: Dict[str, Tuple[str, List[Path]]] = {}
    errors: List[ReportError] = []

    for path in sorted(folder.iterdir(), key=chart_file_key):
        if not path.is_file() or not path.name.endswith(CHART_FILE_SUFFIX):
            continue

        try:
            probe = parse_probe_name(path.name)
        except MalformedFileNameError as e:
            abs_path = Path(os.path.abspath(path))
            errors.append(ReportError(
                kind=MALFORMED_FILE_NAME,
                path=abs_path,
                message=f"Incorrect file name: {abs_path}",
                cause=e,
            ))
            continue

        # Case variants of one probe share the group of the first file's spelling
        key = _normalize_probe(probe)
        if key not in buckets:
            buckets[key] = (probe, [])
        buckets[key][1].append(path)

    groups: Dict[str, List[Path]] = {}
    for probe, files in sorted(buckets.values(), key=lambda item: probe_sort_key(item[0])):
        groups[probe] = sorted(files, key=chart_file_key)

    return GroupingResult(groups=groups, errors=errors)
