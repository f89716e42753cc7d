"""Benchmark per-keystroke header analysis.

The editor re-runs the parser and lexer on every edit, so a full scan of
the header line has to stay well under a frame budget even for long lines.

Run with:
    pytest benchmarks/benchmark_header.py -v --benchmark-only
"""

import pytest

from arroba import (
    HeaderConfig,
    analyze,
    header_config_context,
    parse_first_line,
    tokenize_first_line,
)

pytest.importorskip("pytest_benchmark")

TYPICAL = "\n\n@option key=value count=10 path=/usr/local/bin format=json\nbody\n"
LONG_LINE = "@option " + " ".join(f"key{i}=value{i}" for i in range(300)) + "\nbody"


@pytest.mark.benchmark(group="header-parse")
def test_benchmark_parse_typical(benchmark):
    """Parse a typical header line."""
    benchmark(parse_first_line, TYPICAL)


@pytest.mark.benchmark(group="header-lex")
def test_benchmark_tokenize_typical(benchmark):
    """Tokenize a typical header line."""
    benchmark(tokenize_first_line, TYPICAL)


@pytest.mark.benchmark(group="header-analyze")
def test_benchmark_analyze_long_line(benchmark):
    """Parse and tokenize a header with hundreds of pairs."""
    with header_config_context(HeaderConfig(max_line_length=None)):
        benchmark(analyze, LONG_LINE)
