from __future__ import annotations

import logging

import pytest

from tests.helpers import reset_regcreds_logger


@pytest.fixture(autouse=True)
def _isolated_regcreds_logger():
    """Drop handlers that CLI runs bind to their short-lived capture streams."""

    yield
    reset_regcreds_logger()
    logging.getLogger("regcreds").setLevel(logging.NOTSET)
