"""Registry credential output files for container tasks."""

from regcreds.models import CredentialEntry, CredentialResources, OutputDocument
from regcreds.output import build_entry, find_latest_output, generate_output, load_output

__all__ = [
    "CredentialEntry",
    "CredentialResources",
    "OutputDocument",
    "build_entry",
    "find_latest_output",
    "generate_output",
    "load_output",
]
