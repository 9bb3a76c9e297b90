"""Utility modules.

This package provides shared utilities used across the codebase.
"""

from .sdr_io import (
    format_sdr_lines,
    neurogram_output_path,
    read_sdr_text,
    sdr_output_path,
    write_neurogram,
    write_sdr_text,
)

__all__ = [
    # SDR / neurogram persistence
    "format_sdr_lines",
    "neurogram_output_path",
    "read_sdr_text",
    "sdr_output_path",
    "write_neurogram",
    "write_sdr_text",
]
