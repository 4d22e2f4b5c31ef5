from __future__ import annotations

from typing import Iterator

import pytest

from infores.logger import reset


@pytest.fixture(autouse=True)
def _detach_cli_log_handlers() -> Iterator[None]:
    yield
    reset()
