"""Parsing of run timestamps and probe identifiers out of file and folder names."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from .constants import (
    FILE_NAME_SEPARATOR,
    MIN_FILE_NAME_TOKENS,
    PROBE_TOKEN_INDEX,
    TIMESTAMP_FORMATS,
    TIMESTAMP_SEPARATOR,
)


class MalformedFileNameError(ValueError):
    """Chart file name does not have enough '_'-separated tokens."""


# strptime alone would also accept unpadded fields such as "2023011-930"
_TIMESTAMP_SHAPE = re.compile(r"\d{8}-(\d{6}|\d{4})")


def _parse_timestamp(text: str) -> Optional[datetime]:
    if not _TIMESTAMP_SHAPE.fullmatch(text):
        return None
    for fmt in TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def parse_time(name: str) -> Optional[str]:
    """
    Return the timestamp prefix of a plot or configuration name.

    The prefix runs up to the second '-' because the timestamp itself
    contains one, e.g. "20230101-120000-ignite-put" -> "20230101-120000".

    Returns:
        The prefix, or None if the name does not start with a timestamp
    """
    first = name.find(TIMESTAMP_SEPARATOR)
    if first == -1:
        return None

    second = name.find(TIMESTAMP_SEPARATOR, first + 1)
    if second == -1:
        return None

    prefix = name[:second]
    return prefix if _parse_timestamp(prefix) is not None else None


def strip_time(name: str) -> str:
    """Remove a leading timestamp prefix and its separator from a name."""
    prefix = parse_time(name)
    return name if prefix is None else name[len(prefix) + 1:]


def parse_folder_time(folder_name: str) -> Optional[datetime]:
    """
    Parse the run time embedded in a run folder name.

    Everything before the last '-' is treated as the timestamp, so
    "20230101-120000-run1" resolves to 2023-01-01 12:00:00. Names that
    do not match are not an error, they simply have no run time.
    """
    i = folder_name.rfind(TIMESTAMP_SEPARATOR)
    if i == -1:
        return None
    return _parse_timestamp(folder_name[:i])


def parse_probe_name(file_name: str) -> str:
    """
    Extract the probe identifier from a chart file name.

    Args:
        file_name: Base name such as "bench_ThroughputLatencyProbe_1.png"

    Returns:
        The second '_'-separated token, e.g. "ThroughputLatencyProbe"

    Raises:
        MalformedFileNameError: If the name has fewer than three tokens
    """
    tokens = file_name.split(FILE_NAME_SEPARATOR)
    if len(tokens) < MIN_FILE_NAME_TOKENS:
        raise MalformedFileNameError(f"Incorrect file name: {file_name}")
    return tokens[PROBE_TOKEN_INDEX]
