from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test away from any project/user .env and KINECALC_ vars."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for key in list(os.environ):
        if key.upper().startswith("KINECALC_"):
            monkeypatch.delenv(key, raising=False)
    yield
