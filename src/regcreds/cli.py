"""Command-line entry points for registry credential outputs."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, List, Mapping, Optional

import typer
import yaml

from regcreds.config import ConfigError, dump_example_config, load_config
from regcreds.exceptions import CredentialOutputError, InputError
from regcreds.models import CredentialEntry
from regcreds.output import build_entry, find_latest_output, generate_output, load_output
from regcreds.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Registry credential output CLI")


def _parse_timestamp(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"Expected an ISO-8601 timestamp, got {value!r}") from exc


def _load_entries(path: Path) -> dict[str, CredentialEntry]:
    """Read resolved credential entries keyed by registry from a YAML file."""

    try:
        payload: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise InputError(f"Unable to read credential input {path}: {exc}") from exc

    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise InputError(f"Credential input {path} must be a mapping of registry entries.")

    entries: dict[str, CredentialEntry] = {}
    for key, raw in payload.items():
        if not isinstance(raw, Mapping) or "secret_manager_arn" not in raw:
            raise InputError(f"Entry '{key}' in {path} needs a secret_manager_arn.")
        names = raw.get("container_names")
        if names is None:
            names = []
        elif isinstance(names, str):
            names = [names]
        elif not isinstance(names, list) or any(isinstance(name, (Mapping, list)) for name in names):
            raise InputError(f"Entry '{key}' in {path}: container_names must be a list of names.")
        key_id = raw.get("kms_key_id")
        entries[str(key)] = build_entry(
            str(raw["secret_manager_arn"]),
            None if key_id is None else str(key_id),
            [str(name) for name in names],
        )
    return entries


def _parse_overrides(values: Optional[List[str]]) -> dict[str, str]:
    """Turn repeated ``--set key=value`` options into dotted config overrides."""

    overrides: dict[str, str] = {}
    for item in values or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected key=value, got {item!r}", param_hint="--set")
        overrides[key.strip()] = value
    return overrides


@app.command()
def write(
    input_path: Path = typer.Argument(..., help="YAML mapping of registry key to resolved credential entry"),
    role: str = typer.Option(..., "--role", "-r", help="Task execution role name"),
    output_dir: Optional[str] = typer.Option(None, help="Output directory (default from config, else cwd)"),
    created_at: Optional[str] = typer.Option(None, help="Creation time ISO-8601, used for the filename"),
    config: Optional[Path] = typer.Option(None, help="Path to a config file"),
    settings: Optional[List[str]] = typer.Option(None, "--set", help="Config override key=value, e.g. output.directory=/srv/creds"),
) -> None:
    """Write a timestamped registry credential output file."""

    overrides = _parse_overrides(settings)
    try:
        cfg = load_config(config, overrides=overrides)
        configure_logging(log_path=cfg.logging.log_path, level=cfg.logging.level)
        entries = _load_entries(input_path)
        creation_time = _parse_timestamp(created_at) if created_at else None
        dest = generate_output(entries, role, output_dir or cfg.output.directory, creation_time)
    except (ConfigError, CredentialOutputError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Wrote {dest}")


@app.command()
def show(
    path: Optional[Path] = typer.Argument(None, help="Output file (default: latest in the output directory)"),
    config: Optional[Path] = typer.Option(None, help="Path to a config file"),
    settings: Optional[List[str]] = typer.Option(None, "--set", help="Config override key=value, e.g. output.directory=/srv/creds"),
) -> None:
    """Print the role and entries recorded in an output file."""

    overrides = _parse_overrides(settings)
    try:
        cfg = load_config(config, overrides=overrides)
        target = path or find_latest_output(cfg.output.directory)
        document = load_output(target)
    except (ConfigError, CredentialOutputError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    resources = document.credential_resources
    typer.echo(f"File: {target}")
    typer.echo(f"Task execution role: {resources.task_execution_role}")
    for key, entry in sorted(resources.container_credentials.items()):
        typer.echo(f"{key}: {entry.credential_reference_id}")
        if entry.encryption_key_id:
            typer.echo(f"  kms key: {entry.encryption_key_id}")
        typer.echo(f"  containers: {', '.join(entry.container_names) or '-'}")


@app.command("init-config")
def init_config(dest: Path = typer.Argument(..., help="Destination YAML or JSON file")) -> None:
    """Write the default configuration to DEST."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
