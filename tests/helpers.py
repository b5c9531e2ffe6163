from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from regcreds.models import CredentialEntry
from regcreds.output import build_entry

ROLE = "myEcsTaskExecutionRole"
CREATED_AT = datetime(2023, 1, 2, 3, 4, 5, tzinfo=UTC)
EXPECTED_NAME = "ecs-registry-creds_20230102T030405Z.yml"

DOCKER_ARN = "arn:aws:secretsmanager:us-west-2:123456789012:secret:dockerhub-AbCdEf"
QUAY_ARN = "arn:aws:secretsmanager:us-west-2:123456789012:secret:quay-GhIjKl"
QUAY_KEY = "arn:aws:kms:us-west-2:123456789012:key/0f1e2d3c-aaaa-bbbb-cccc-1234567890ab"


def reset_regcreds_logger() -> None:
    """Remove and close every handler on the ``regcreds`` logger."""

    logger = logging.getLogger("regcreds")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def sample_credentials() -> dict[str, CredentialEntry]:
    """Two registries, one with a KMS key and one without."""

    return {
        "docker.io": build_entry(DOCKER_ARN, "", ["web", "worker"]),
        "quay.io": build_entry(QUAY_ARN, QUAY_KEY, ["metrics"]),
    }


def write_input_file(path: Path) -> Path:
    """Write a CLI credential input file matching `sample_credentials`."""

    path.write_text(
        "docker.io:\n"
        f"  secret_manager_arn: {DOCKER_ARN}\n"
        "  container_names:\n"
        "    - web\n"
        "    - worker\n"
        "quay.io:\n"
        f"  secret_manager_arn: {QUAY_ARN}\n"
        f"  kms_key_id: {QUAY_KEY}\n"
        "  container_names: [metrics]\n",
        encoding="utf-8",
    )
    return path
