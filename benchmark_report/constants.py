"""
Benchmark Result Page Generator - Constants Configuration

This module centralizes all configuration constants used by the report
generator. Each constant is documented with its purpose.
"""

# ==============================================================================
# OUTPUT FILES
# ==============================================================================

# Name of the HTML page written into every folder that holds charts
HTML_FILE_NAME = "Results.html"

# Name of the per-run CSV summary (only written when simple results are given)
CSV_FILE_NAME = "results.csv"

# Only chart images with this suffix are picked up
CHART_FILE_SUFFIX = ".png"

# Output encoding for HTML and CSV files
OUTPUT_ENCODING = "utf-8"

# Undecodable bytes in file names and labels are written back unchanged,
# so <img src> still points at the file on disk
OUTPUT_ERRORS = "surrogateescape"


# ==============================================================================
# CHART FILE NAMING
# ==============================================================================

# Chart file names are "<benchmark>_<probe>_<rest>.png"
# Anything that splits into fewer tokens is skipped
FILE_NAME_SEPARATOR = "_"
MIN_FILE_NAME_TOKENS = 3
PROBE_TOKEN_INDEX = 1

# Probe whose panel is always rendered first
PRIMARY_PROBE = "ThroughputLatencyProbe"

# Percentile charts carry their own legend, so no statistics table is rendered
PERCENTILE_PROBE = "PercentileProbe"


# ==============================================================================
# TIMESTAMPS
# ==============================================================================

# Run folders and plot names are prefixed with the run start time,
# e.g. "20230101-120000-run1". The first format is the one the benchmark
# writers produce; the short form is accepted for hand-named folders.
TIMESTAMP_FORMATS = ("%Y%m%d-%H%M%S", "%Y%m%d-%H%M")

# Separator between the timestamp prefix and the rest of a name
TIMESTAMP_SEPARATOR = "-"

# How a resolved run time is shown in the page heading
TITLE_TIME_FORMAT = "%a %b %d %H:%M:%S %Y"


# ==============================================================================
# LAYOUT
# ==============================================================================

# Default number of chart images per grid row
DEFAULT_CHART_COLUMNS = 3

# Bootstrap grid width; each image cell gets GRID_WIDTH // columns units
BOOTSTRAP_GRID_WIDTH = 12

# Render the statistics table a second time below each thumbnail
DEFAULT_INLINE_STATS = True


# ==============================================================================
# NUMBER FORMATTING
# ==============================================================================

# Number of decimal places for statistics cells and CSV values
VALUE_DECIMALS = 2

# Placeholders for values that cannot be formatted
NAN_TEXT = "NaN"
INF_TEXT = "Inf"

# CSV placeholders for infinite values, signed
CSV_POS_INF_TEXT = "Infinity"
CSV_NEG_INF_TEXT = "-Infinity"


# ==============================================================================
# UI/HTML REPORT CONSTANTS
# ==============================================================================

BOOTSTRAP_CSS_URL = "http://netdna.bootstrapcdn.com/bootstrap/3.1.1/css/bootstrap.min.css"
FONT_AWESOME_CSS_URL = "http://netdna.bootstrapcdn.com/font-awesome/4.1.0/css/font-awesome.min.css"
JQUERY_JS_URL = "http://code.jquery.com/jquery-1.11.0.min.js"
BOOTSTRAP_JS_URL = "http://netdna.bootstrapcdn.com/bootstrap/3.1.1/js/bootstrap.min.js"

# Logo shown at the top of every page
LOGO_URL = "http://www.gridgain.com/images/yardstick/yardstick-logo-no-background-200x85px-rgb.png"
