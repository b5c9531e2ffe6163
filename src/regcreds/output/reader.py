"""Read registry credential outputs back from disk."""

from __future__ import annotations

import os
import re
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from regcreds.exceptions import OutputReadError
from regcreds.models import OutputDocument
from regcreds.output.writer import CRED_FILE_BASENAME, CRED_FILE_EXTENSION, CRED_FILE_TIME_FORMAT

_FILENAME_PATTERN = re.compile(
    rf"^{re.escape(CRED_FILE_BASENAME)}_(?P<stamp>\d{{8}}T\d{{6}}Z){re.escape(CRED_FILE_EXTENSION)}$"
)


def load_output(path: Path) -> OutputDocument:
    """Parse and validate the output file at `path`."""

    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise OutputReadError(path, f"unable to read file ({exc})") from exc

    try:
        payload: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise OutputReadError(path, f"invalid YAML ({exc})") from exc

    if not isinstance(payload, Mapping):
        raise OutputReadError(path, f"expected a mapping, got {type(payload).__name__}")

    try:
        return OutputDocument.model_validate(payload)
    except ValidationError as exc:
        raise OutputReadError(path, f"unsupported document ({exc.error_count()} errors)\n{exc}") from exc


def parse_output_timestamp(name: str) -> datetime | None:
    """Return the UTC timestamp encoded in an output filename, if it is one."""

    match = _FILENAME_PATTERN.match(name)
    if not match:
        return None
    try:
        parsed = datetime.strptime(match.group("stamp"), CRED_FILE_TIME_FORMAT)
    except ValueError:
        return None
    return parsed.replace(tzinfo=UTC)


def find_latest_output(directory: str | os.PathLike[str] = "") -> Path:
    """Return the newest output file in `directory` (the working directory when empty)."""

    root = Path(directory) if directory else Path.cwd()
    candidates: list[tuple[datetime, Path]] = []
    for entry in root.glob(f"{CRED_FILE_BASENAME}_*{CRED_FILE_EXTENSION}"):
        stamp = parse_output_timestamp(entry.name)
        if stamp is not None and entry.is_file():
            candidates.append((stamp, entry))

    if not candidates:
        raise OutputReadError(root, "no registry credential output files found")
    return max(candidates, key=lambda item: item[0])[1]


__all__ = ["find_latest_output", "load_output", "parse_output_timestamp"]
