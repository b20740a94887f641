from __future__ import annotations

import os

import pytest

from positionless.core.config import clear_config_cache
from positionless.core.constants import (
    ENV_PREFIX_CHECK_PRECONDITIONS,
    ENV_PREFIX_LOG_STAGES,
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch):
    for key in list(os.environ):
        if key.startswith((ENV_PREFIX_CHECK_PRECONDITIONS, ENV_PREFIX_LOG_STAGES)):
            monkeypatch.delenv(key, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()
