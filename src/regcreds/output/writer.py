"""Write registry credential outputs as timestamped YAML files."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping, Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Optional

import yaml

from regcreds.exceptions import DirectoryResolutionError, FileCreateError, SerializationError, WriteError
from regcreds.models import OUTPUT_VERSION, CredentialEntry, CredentialResources, OutputDocument

LOGGER = logging.getLogger(__name__)

CRED_FILE_BASENAME = "ecs-registry-creds"
# Same layout as 20060102T150405Z.
CRED_FILE_TIME_FORMAT = "%Y%m%dT%H%M%SZ"
CRED_FILE_EXTENSION = ".yml"


class _IndentedDumper(yaml.SafeDumper):
    """Safe dumper that nests sequence items under their parent key."""

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        super().increase_indent(flow, False)


class _DoubleQuoted(str):
    """String emitted in double quotes, used for the schema version."""


_IndentedDumper.add_representer(
    _DoubleQuoted,
    lambda dumper, value: dumper.represent_scalar("tag:yaml.org,2002:str", str(value), style='"'),
)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _as_utc(timestamp: datetime) -> datetime:
    """Normalize `timestamp` to UTC, reading naive values as UTC already."""

    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=UTC)
    return timestamp.astimezone(UTC)


def build_entry(
    credential_reference_id: str,
    encryption_key_id: Optional[str],
    container_names: Sequence[str],
) -> CredentialEntry:
    """Return a `CredentialEntry` populated verbatim from the arguments."""

    return CredentialEntry(
        credential_reference_id=credential_reference_id,
        encryption_key_id=encryption_key_id,
        container_names=tuple(container_names),
    )


def output_filename(timestamp: datetime) -> str:
    """Return the output filename for `timestamp`, e.g. ``ecs-registry-creds_20230102T030405Z.yml``."""

    stamp = _as_utc(timestamp).strftime(CRED_FILE_TIME_FORMAT)
    return f"{CRED_FILE_BASENAME}_{stamp}{CRED_FILE_EXTENSION}"


def render_output(document: OutputDocument) -> str:
    """Serialize `document` to YAML text."""

    payload = document.to_wire()
    payload["version"] = _DoubleQuoted(payload["version"])
    try:
        return yaml.dump(
            payload,
            Dumper=_IndentedDumper,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as exc:
        raise SerializationError(f"Unable to encode registry credential output: {exc}") from exc


def generate_output(
    credentials: Mapping[str, CredentialEntry],
    role_name: str,
    output_dir: str | os.PathLike[str] = "",
    creation_time: datetime | None = None,
    *,
    clock: Callable[[], datetime] = _utc_now,
    getcwd: Callable[[], str] = os.getcwd,
) -> Path:
    """Write `credentials` for `role_name` to a new timestamped YAML file.

    The file lands in `output_dir`, or in the working directory reported by
    `getcwd` when `output_dir` is empty. Its name is derived from
    `creation_time` (or `clock()` when omitted) in UTC, so two calls within
    the same second target the same file and the later one wins.

    Returns the path of the written file.
    """

    document = OutputDocument(
        version=OUTPUT_VERSION,
        credential_resources=CredentialResources(
            task_execution_role=role_name,
            container_credentials=dict(credentials),
        ),
    )
    payload = render_output(document).encode("utf-8")

    if output_dir:
        directory = Path(output_dir)
    else:
        try:
            directory = Path(getcwd())
        except OSError as exc:
            raise DirectoryResolutionError(f"Unable to resolve the current working directory: {exc}") from exc

    timestamp = creation_time if creation_time is not None else clock()
    dest = directory / output_filename(timestamp)

    try:
        handle = dest.open("wb")
    except OSError as exc:
        raise FileCreateError(dest, exc) from exc

    with handle:
        try:
            handle.write(payload)
            handle.flush()
        except OSError as exc:
            raise WriteError(dest, exc) from exc

    LOGGER.info("Wrote registry credential output to new file %s", dest)
    return dest


__all__ = [
    "CRED_FILE_BASENAME",
    "CRED_FILE_EXTENSION",
    "CRED_FILE_TIME_FORMAT",
    "build_entry",
    "generate_output",
    "output_filename",
    "render_output",
]
