from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep local .env / shell settings out of the tests."""
    for name in ("RAPIDAPI_PROXY_SECRET", "BOX_PACKER_MAX_UNITS", "BOX_PACKER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
