from __future__ import annotations

import pytest

import nonempty.config as config_module


@pytest.fixture(autouse=True)
def default_config(monkeypatch: pytest.MonkeyPatch) -> None:
    # Each test builds its own default config from a clean environment.
    monkeypatch.delenv("NONEMPTY_STRIP", raising=False)
    monkeypatch.delenv("NONEMPTY_STRIP_CHARS", raising=False)
    monkeypatch.setattr(config_module, "_default_config", None)
