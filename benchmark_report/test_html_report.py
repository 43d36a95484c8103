#!/usr/bin/env python3
"""
Tests for html_report.py, page_title.py and numbers.py
"""
import math
import re
from datetime import datetime
from pathlib import Path

import numpy as np
import pytest

from benchmark_report.html_report import (
    chunk_rows,
    render_html_report,
    render_legend,
    render_stats_table,
    write_html_report,
)
from benchmark_report.models import (
    REPORT_WRITE_FAILURE,
    GenerationMode,
    PlotInfo,
    ReportConfig,
    ReportError,
    info_key,
)
from benchmark_report.numbers import format_csv_value, format_stat_value
from benchmark_report.page_title import mode_prefix, render_title, resolve_generation_mode


def _info(name="ignite-put", color="ff0000", mode=GenerationMode.STANDARD, **values):
    return PlotInfo(
        name=name,
        configuration=values.pop("configuration", ("-b 1 -t 64",)),
        color=color,
        average=values.pop("average", 1.0),
        minimum=values.pop("minimum", 0.5),
        maximum=values.pop("maximum", 2.0),
        standard_deviation=values.pop("standard_deviation", 0.25),
        mode=mode,
    )


def _charts(folder: Path, probe: str, count: int):
    return [folder / f"bench_{probe}_{i}.png" for i in range(count)]


class TestFormatStatValue:
    """Test statistics cell formatting."""

    def test_nan(self):
        assert format_stat_value(float("nan")) == "NaN"
        assert format_stat_value(np.nan) == "NaN"

    @pytest.mark.parametrize("value", [math.inf, -math.inf, np.float64("inf")])
    def test_infinite(self, value):
        assert format_stat_value(value) == "Inf"

    @pytest.mark.parametrize("value, text", [
        (12.345, "12.35"),
        (0, "0.00"),
        (2.001, "2.00"),
        (-1.005, "-1.01"),
        (1234.5, "1,234.50"),
        (np.float64(3.14159), "3.14"),
    ])
    def test_two_decimals(self, value, text):
        assert format_stat_value(value) == text

    def test_csv_value_has_no_grouping(self):
        assert format_csv_value(1234.567) == "1234.57"
        assert format_csv_value(float("nan")) == "NaN"
        assert format_csv_value(math.inf) == "Infinity"
        assert format_csv_value(-math.inf) == "-Infinity"


class TestPageTitle:
    """Test generation mode and heading text."""

    def test_mode_prefix(self):
        assert mode_prefix(None) == ""
        assert mode_prefix(GenerationMode.STANDARD) == ""
        assert mode_prefix(GenerationMode.COMPARISON) == "Comparison "
        assert mode_prefix(GenerationMode.COMPOUND) == "Compound "

    def test_title_without_time(self):
        assert render_title(GenerationMode.COMPOUND) == "Benchmark Compound Results"
        assert render_title(None) == "Benchmark Results"

    def test_title_with_time(self):
        title = render_title(GenerationMode.STANDARD, datetime(2023, 1, 1, 12, 0))
        assert title == "Benchmark Results<small> on Sun Jan 01 12:00:00 2023</small>"

    def test_mode_from_first_chart_of_first_group(self, tmp_path):
        tl = _charts(tmp_path, "ThroughputLatencyProbe", 1)
        other = _charts(tmp_path, "AProbe", 1)
        groups = {"ThroughputLatencyProbe": tl, "AProbe": other}
        info_map = {
            info_key(tl[0]): [_info(mode=GenerationMode.COMPARISON), _info(mode=GenerationMode.COMPOUND)],
            info_key(other[0]): [_info(mode=GenerationMode.STANDARD)],
        }

        assert resolve_generation_mode(groups, info_map) is GenerationMode.COMPARISON

    def test_mode_unknown_without_info(self, tmp_path):
        groups = {"P": _charts(tmp_path, "P", 1)}

        assert resolve_generation_mode(groups, {}) is None
        assert resolve_generation_mode(groups, {info_key(groups["P"][0]): []}) is None
        assert resolve_generation_mode({}, {}) is None


class TestChunkRows:
    """Test grid pagination."""

    def test_partial_last_row(self):
        rows = chunk_rows(list(range(7)), 3)
        assert [len(r) for r in rows] == [3, 3, 1]

    def test_exact_rows(self):
        assert [len(r) for r in chunk_rows(list(range(6)), 2)] == [2, 2, 2]

    def test_empty(self):
        assert chunk_rows([], 3) == []


class TestRenderTables:
    """Test legend and statistics tables."""

    def test_legend_strips_timestamps(self):
        info = _info(
            name="20230101-120000-ignite-put,ignite-get",
            configuration=("20230101-120000-cfg A", "cfg B"),
        )

        html = "\n".join(render_legend([info]))

        assert "<td>ignite-put<br>ignite-get</td>" in html
        assert "<td>cfg A<br>cfg B<br></td>" in html
        assert 'style="color:#ff0000;"' in html
        assert "20230101-120000" not in html

    def test_stats_table_columns_and_values(self):
        info = _info(average=12.345, minimum=float("nan"), maximum=float("inf"), standard_deviation=0)

        html = "\n".join(render_stats_table([info]))

        headers = re.findall(r"<th[^>]*>([^<]*)</th>", html)
        assert headers == ["", "Avg", "Min", "Max", "SD"]
        cells = re.findall(r'<td class="text-left">([^<]*)</td>', html)
        assert cells == ["12.35", "NaN", "Inf", "0.00"]

    def test_stats_table_without_info(self):
        html = "\n".join(render_stats_table(None))
        assert "<tbody>\n</tbody>" in html


class TestRenderHtmlReport:
    """Test the full page layout."""

    def test_panels_in_group_order(self, tmp_path):
        groups = {
            "ThroughputLatencyProbe": _charts(tmp_path, "ThroughputLatencyProbe", 1),
            "PercentileProbe": _charts(tmp_path, "PercentileProbe", 1),
        }

        html = render_html_report(groups, {}, ReportConfig())

        titles = re.findall(r'<h2 class="panel-title">([^<]*)</h2>', html)
        assert titles == ["ThroughputLatencyProbe", "PercentileProbe"]
        assert html.startswith("<!DOCTYPE html>")
        assert "bootstrap.min.css" in html
        assert "<h3>Benchmark Results</h3>" in html

    def test_rows_follow_column_count(self, tmp_path):
        groups = {"P": _charts(tmp_path, "P", 5), "Q": _charts(tmp_path, "Q", 2)}

        html = render_html_report(groups, {}, ReportConfig(chart_columns=2))

        rows = html.split('<div class="row">')[1:]
        thumbs_per_row = [row.count('data-toggle="modal"') for row in rows]
        assert thumbs_per_row == [2, 2, 1, 2]
        assert 'class="col-md-6"' in html

    def test_modal_ids_sequential_across_panels(self, tmp_path):
        groups = {"P": _charts(tmp_path, "P", 4), "Q": _charts(tmp_path, "Q", 3)}

        html = render_html_report(groups, {}, ReportConfig(chart_columns=3))

        targets = [int(t) for t in re.findall(r'data-target="#(\d+)"', html)]
        modal_ids = [int(t) for t in re.findall(r'<div class="modal" id="(\d+)"', html)]
        assert targets == list(range(7))
        assert modal_ids == list(range(7))

    def test_stats_table_rendered_twice(self, tmp_path):
        chart = _charts(tmp_path, "ThroughputLatencyProbe", 1)
        info_map = {info_key(chart[0]): [_info()]}

        html = render_html_report({"ThroughputLatencyProbe": chart}, info_map, ReportConfig())

        assert html.count('<table class="table table-condensed">') == 2
        modal_body = html.split('<div class="modal-body text-center">')[1].split('<div class="modal-footer">')[0]
        assert '<table class="table table-condensed">' in modal_body

    def test_inline_stats_can_be_disabled(self, tmp_path):
        chart = _charts(tmp_path, "P", 1)
        info_map = {info_key(chart[0]): [_info()]}

        html = render_html_report({"P": chart}, info_map, ReportConfig(inline_stats=False))

        assert html.count('<table class="table table-condensed">') == 1

    def test_percentile_charts_have_no_stats(self, tmp_path):
        chart = _charts(tmp_path, "PercentileProbe", 2)
        info_map = {info_key(c): [_info()] for c in chart}

        html = render_html_report({"PercentileProbe": chart}, info_map, ReportConfig())

        assert "table-condensed" not in html

    def test_legend_only_with_first_chart_info(self, tmp_path):
        first = _charts(tmp_path, "ThroughputLatencyProbe", 1)
        second = _charts(tmp_path, "AProbe", 1)
        groups = {"ThroughputLatencyProbe": first, "AProbe": second}

        without = render_html_report(groups, {info_key(second[0]): [_info()]}, ReportConfig())
        with_legend = render_html_report(groups, {info_key(first[0]): [_info(), _info(name="b")]}, ReportConfig())

        assert "<th>Configurations</th>" not in without
        assert "<th>Configurations</th>" in with_legend
        legend = with_legend.split("<th>Configurations</th>")[1].split("</table>")[0]
        assert legend.count("<tr>") == 2

    def test_title_uses_mode_and_time(self, tmp_path):
        chart = _charts(tmp_path, "P", 1)
        info_map = {info_key(chart[0]): [_info(mode=GenerationMode.COMPARISON)]}

        html = render_html_report({"P": chart}, info_map, ReportConfig(), datetime(2023, 1, 1, 12, 0))

        assert "<h3>Benchmark Comparison Results<small> on Sun Jan 01 12:00:00 2023</small></h3>" in html


class TestWriteHtmlReport:
    """Test writing the page to disk."""

    def test_writes_file(self, tmp_path):
        groups = {"P": _charts(tmp_path, "P", 1)}

        result = write_html_report(tmp_path / "Results.html", groups, {}, ReportConfig())

        assert result == tmp_path / "Results.html"
        assert "panel-title" in result.read_text(encoding="utf-8")

    def test_write_failure_returns_error(self, tmp_path):
        groups = {"P": _charts(tmp_path, "P", 1)}
        target = tmp_path / "missing" / "Results.html"

        result = write_html_report(target, groups, {}, ReportConfig())

        assert isinstance(result, ReportError)
        assert result.kind == REPORT_WRITE_FAILURE
        assert str(target) in result.message
        assert isinstance(result.cause, OSError)

    def test_unencodable_name_returns_error(self, tmp_path):
        groups = {"P": [tmp_path / "bench_P\ud800_1.png"]}

        result = write_html_report(tmp_path / "Results.html", groups, {}, ReportConfig())

        assert isinstance(result, ReportError)
        assert result.kind == REPORT_WRITE_FAILURE
        assert isinstance(result.cause, UnicodeEncodeError)


class TestReportConfig:
    """Test configuration validation."""

    def test_columns_must_be_positive(self):
        with pytest.raises(ValueError, match="chart_columns must be positive"):
            ReportConfig(chart_columns=0)
