"""Pydantic models describing a registry credential output document."""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

OUTPUT_VERSION = "1"


class CredentialEntry(BaseModel):
    """Credential reference, optional KMS key and the containers that share them."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    credential_reference_id: str = Field(alias="secret_manager_arn")
    encryption_key_id: Optional[str] = Field(default=None, alias="kms_key_id")
    container_names: Tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("encryption_key_id", mode="before")
    @classmethod
    def _empty_key_is_unset(cls, value: Any) -> Any:
        """Treat an empty key the same as no key so it is never serialized."""

        if value == "":
            return None
        return value

    @field_validator("container_names", mode="before")
    @classmethod
    def _null_names_are_empty(cls, value: Any) -> Any:
        if value is None:
            return ()
        return value


class CredentialResources(BaseModel):
    """Every credential entry resolved for one task, keyed by registry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    task_execution_role: str
    container_credentials: Dict[str, CredentialEntry] = Field(default_factory=dict)

    @field_validator("container_credentials", mode="before")
    @classmethod
    def _null_credentials_are_empty(cls, value: Any) -> Any:
        if value is None:
            return {}
        return value


class OutputDocument(BaseModel):
    """Top-level versioned document written to an output file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: Literal["1"] = OUTPUT_VERSION
    credential_resources: CredentialResources = Field(alias="registry_credential_outputs")

    def to_wire(self) -> dict[str, Any]:
        """Return the plain mapping that is serialized to disk.

        Unset KMS keys are dropped and registry keys are sorted so the same
        document always renders to the same text.
        """

        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        resources = payload["registry_credential_outputs"]
        resources["container_credentials"] = dict(sorted(resources["container_credentials"].items()))
        return payload


__all__ = [
    "CredentialEntry",
    "CredentialResources",
    "OUTPUT_VERSION",
    "OutputDocument",
]
