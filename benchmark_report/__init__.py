"""Result page generator for benchmark chart folders."""

from .models import (
    GenerationMode,
    GenerationSummary,
    PlotInfo,
    ReportConfig,
    ReportError,
    SimpleResult,
)
from .result_page import generate

__all__ = [
    "GenerationMode",
    "GenerationSummary",
    "PlotInfo",
    "ReportConfig",
    "ReportError",
    "SimpleResult",
    "generate",
]
