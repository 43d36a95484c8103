"""
benchmark-report - Result pages for benchmark chart folders

Turns a folder tree of per-probe benchmark charts into a browsable HTML page
per run folder, plus an optional CSV summary of per-entity averages.

Features:
- Charts grouped by probe, throughput/latency probe always first
- Run time and generation mode shown in the page heading
- Legend of plotted benchmarks and their configurations
- Paginated thumbnail grid with enlargeable modal views and Avg/Min/Max/SD tables
- Bad file names and failed writes are reported and skipped, never fatal
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else __doc__

setup(
    name="benchmark-report",
    version="1.0.0",
    description="HTML result pages and CSV summaries for benchmark chart folders",
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "*.tests", "*.tests.*", "tests.*"]),
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Testing",
        "Topic :: System :: Benchmark",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    keywords="benchmark report html charts probes",
)
