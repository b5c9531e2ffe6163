"""Errors raised while writing and reading registry credential outputs."""

from __future__ import annotations

from pathlib import Path


class CredentialOutputError(RuntimeError):
    """Base class for every error raised by the output writer and reader."""


class SerializationError(CredentialOutputError):
    """The output document could not be encoded as YAML."""


class DirectoryResolutionError(CredentialOutputError):
    """No output directory was given and the working directory is unavailable."""


class FileCreateError(CredentialOutputError):
    """The output file could not be created or truncated."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to create {path}: {cause}")


class WriteError(CredentialOutputError):
    """The serialized document could not be written in full."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to write {path}: {cause}")


class OutputReadError(CredentialOutputError):
    """An existing output file is missing, unreadable or malformed."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class InputError(CredentialOutputError):
    """A credential input file does not describe a mapping of entries."""


__all__ = [
    "CredentialOutputError",
    "DirectoryResolutionError",
    "FileCreateError",
    "InputError",
    "OutputReadError",
    "SerializationError",
    "WriteError",
]
