"""Generation mode detection and page heading text."""

from __future__ import annotations

from datetime import datetime
from html import escape
from pathlib import Path
from typing import Dict, List, Optional

from .constants import TITLE_TIME_FORMAT
from .models import GenerationMode, PlotInfoMap, plot_infos


def first_chart(groups: Dict[str, List[Path]]) -> Optional[Path]:
    """First file of the first probe group, in display order."""
    for files in groups.values():
        return files[0] if files else None
    return None


def resolve_generation_mode(
    groups: Dict[str, List[Path]],
    info_map: PlotInfoMap,
) -> Optional[GenerationMode]:
    """
    Mode the page's charts were generated in.

    Taken from the first PlotInfo of the first chart; None when that chart
    has no statistics attached.
    """
    chart = first_chart(groups)
    if chart is None:
        return None

    infos = plot_infos(info_map, chart)
    if infos:
        return infos[0].mode
    return None


def mode_prefix(mode: Optional[GenerationMode]) -> str:
    """Title prefix for a mode, e.g. "Comparison " (empty for standard pages)."""
    if mode is None or mode is GenerationMode.STANDARD:
        return ""
    name = mode.name
    return name[0].upper() + name[1:].lower() + " "


def render_title(mode: Optional[GenerationMode], test_time: Optional[datetime] = None) -> str:
    """Page heading markup, with the run time as a small suffix when known."""
    time_html = ""
    if test_time is not None:
        time_html = f"<small> on {escape(test_time.strftime(TITLE_TIME_FORMAT))}</small>"
    return f"Benchmark {mode_prefix(mode)}Results{time_html}"
