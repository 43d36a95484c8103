"""Rendering of the per-folder Results.html page.

The page is a Bootstrap 3 document: a heading, a legend of the plotted
benchmarks, and one panel per probe holding a grid of chart thumbnails.
Every thumbnail opens a modal with the enlarged chart and its statistics.
"""

from __future__ import annotations

import os
from datetime import datetime
from html import escape
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .constants import (
    BOOTSTRAP_CSS_URL,
    BOOTSTRAP_GRID_WIDTH,
    BOOTSTRAP_JS_URL,
    FONT_AWESOME_CSS_URL,
    JQUERY_JS_URL,
    LOGO_URL,
    OUTPUT_ENCODING,
    OUTPUT_ERRORS,
    PERCENTILE_PROBE,
)
from .models import (
    REPORT_WRITE_FAILURE,
    PlotInfo,
    PlotInfoMap,
    ReportConfig,
    ReportError,
    plot_infos,
)
from .name_parser import strip_time
from .numbers import format_stat_value
from .page_title import first_chart, render_title, resolve_generation_mode


def _color_marker(color: str) -> str:
    return f'<td><i style="color:#{escape(color)};" class="fa fa-square"></i></td>'


def _value_cell(value: float) -> str:
    return f'<td class="text-left">{format_stat_value(value)}</td>'


def _is_percentile_probe(probe: str) -> bool:
    return probe.strip().lower() == PERCENTILE_PROBE.lower()


def chunk_rows(files: Sequence[Path], columns: int) -> List[Sequence[Path]]:
    """Split files into grid rows of `columns` items; the last row may be shorter."""
    return [files[start:start + columns] for start in range(0, len(files), columns)]


def render_head() -> List[str]:
    return [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8">',
        '<meta http-equiv="X-UA-Compatible" content="IE=edge">',
        '<meta name="viewport" content="width=device-width, initial-scale=1">',
        f'<link rel="stylesheet" href="{BOOTSTRAP_CSS_URL}">',
        f'<link rel="stylesheet" href="{FONT_AWESOME_CSS_URL}">',
        f'<script src="{JQUERY_JS_URL}"></script>',
        f'<script src="{BOOTSTRAP_JS_URL}"></script>',
        "</head>",
    ]


def render_legend(infos: Sequence[PlotInfo]) -> List[str]:
    """Legend table: color, benchmark name and configurations of every plotted series."""
    lines = [
        '<table class="table" style="width:auto;">',
        "<thead><tr><th>Color</th><th>Benchmark</th><th>Configurations</th></tr></thead>",
        "<tbody>",
    ]

    for info in infos:
        benchmark = escape(strip_time(info.name)).replace(",", "<br>")
        configs = "".join(f"{escape(strip_time(cfg))}<br>" for cfg in info.configuration)

        lines.append("<tr>")
        lines.append(_color_marker(info.color))
        lines.append(f"<td>{benchmark}</td>")
        lines.append(f"<td>{configs}</td>")
        lines.append("</tr>")

    lines.append("</tbody>")
    lines.append("</table>")
    return lines


def render_stats_table(infos: Optional[Sequence[PlotInfo]]) -> List[str]:
    """Avg/Min/Max/SD table of one chart. Rendered with an empty body when no stats exist."""
    lines = [
        '<table class="table table-condensed">',
        "<thead>",
        "<tr>",
        "<th></th>",
        '<th class="text-left">Avg</th>',
        '<th class="text-left">Min</th>',
        '<th class="text-left">Max</th>',
        '<th class="text-left">SD</th>',
        "</tr>",
        "</thead>",
        "<tbody>",
    ]

    for info in infos or ():
        lines.append("<tr>")
        lines.append(_color_marker(info.color))
        lines.append(_value_cell(info.average))
        lines.append(_value_cell(info.minimum))
        lines.append(_value_cell(info.maximum))
        lines.append(_value_cell(info.standard_deviation))
        lines.append("</tr>")

    lines.append("</tbody>")
    lines.append("</table>")
    return lines


def render_chart_cell(
    chart: Path,
    modal_id: int,
    infos: Optional[Sequence[PlotInfo]],
    show_stats: bool,
    config: ReportConfig,
) -> List[str]:
    """One grid cell: thumbnail, its modal, and the inline statistics copy."""
    src = escape(chart.name)
    col_width = max(1, BOOTSTRAP_GRID_WIDTH // config.chart_columns)

    lines = [
        f'<div class="col-md-{col_width}">',
        f'<a data-toggle="modal" data-target="#{modal_id}" href="#">'
        f'<img src="{src}" class="img-thumbnail"/></a>',
        f'<div class="modal" id="{modal_id}" tabindex="-1" role="dialog" aria-hidden="true">',
        '<div class="modal-dialog modal-lg">',
        '<div class="modal-content">',
        '<div class="modal-body text-center">',
        f'<img src="{src}" class="img-thumbnail"/>',
        "<p>&nbsp;</p>",
    ]

    if show_stats:
        lines.extend(render_stats_table(infos))

    lines.extend([
        "</div>",
        '<div class="modal-footer">',
        '<button type="button" class="btn btn-primary" data-dismiss="modal">Close</button>',
        "</div>",
        "</div>",
        "</div>",
        "</div>",
    ])

    if show_stats and config.inline_stats:
        lines.extend(render_stats_table(infos))

    lines.append("</div>")
    return lines


def render_html_report(
    groups: Dict[str, List[Path]],
    info_map: PlotInfoMap,
    config: ReportConfig,
    test_time: Optional[datetime] = None,
) -> str:
    """
    Render the complete page for one folder.

    Args:
        groups: Chart files per probe, in display order
        info_map: Statistics of the charts, keyed by absolute path
        config: Layout settings
        test_time: Run time parsed from the folder name, if any

    Returns:
        HTML document as a string
    """
    lines = render_head()
    lines.append("<body>")
    lines.append('<div class="container-fluid">')
    lines.append(f'<img src="{LOGO_URL}"/>')

    mode = resolve_generation_mode(groups, info_map)
    lines.append(f"<h3>{render_title(mode, test_time)}</h3>")

    chart = first_chart(groups)
    legend_infos = plot_infos(info_map, chart) if chart is not None else None
    if legend_infos is not None:
        lines.extend(render_legend(legend_infos))

    modal_id = 0
    for probe, files in groups.items():
        show_stats = not _is_percentile_probe(probe)

        lines.append('<div class="panel panel-default">')
        lines.append(f'<div class="panel-heading"><h2 class="panel-title">{escape(probe)}</h2></div>')
        lines.append('<div class="panel-body">')

        for row in chunk_rows(files, config.chart_columns):
            lines.append('<div class="row">')
            for f in row:
                lines.extend(render_chart_cell(f, modal_id, plot_infos(info_map, f), show_stats, config))
                modal_id += 1
            lines.append("</div>")

        lines.append("</div>")
        lines.append("</div>")

    lines.append("</div>")
    lines.append("</body>")
    lines.append("</html>")

    return "\n".join(lines) + "\n"


def write_html_report(
    out_file: Path,
    groups: Dict[str, List[Path]],
    info_map: PlotInfoMap,
    config: ReportConfig,
    test_time: Optional[datetime] = None,
) -> Union[Path, ReportError]:
    """
    Render and write one Results.html.

    Returns:
        The written path, or a ReportError if the file could not be written
    """
    out_file = Path(out_file)
    html = render_html_report(groups, info_map, config, test_time)

    try:
        with open(out_file, "w", encoding=OUTPUT_ENCODING, errors=OUTPUT_ERRORS) as f:
            f.write(html)
    except (OSError, UnicodeError) as e:
        abs_path = os.path.abspath(out_file)
        return ReportError(
            kind=REPORT_WRITE_FAILURE,
            path=Path(abs_path),
            message=f"Exception is raised during file processing: {abs_path}",
            cause=e,
        )

    return out_file
