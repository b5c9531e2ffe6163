"""Writers and readers for registry credential output files."""

from .reader import find_latest_output, load_output, parse_output_timestamp
from .writer import (
    CRED_FILE_BASENAME,
    CRED_FILE_EXTENSION,
    CRED_FILE_TIME_FORMAT,
    build_entry,
    generate_output,
    output_filename,
    render_output,
)

__all__ = [
    "CRED_FILE_BASENAME",
    "CRED_FILE_EXTENSION",
    "CRED_FILE_TIME_FORMAT",
    "build_entry",
    "find_latest_output",
    "generate_output",
    "load_output",
    "output_filename",
    "parse_output_timestamp",
    "render_output",
]
