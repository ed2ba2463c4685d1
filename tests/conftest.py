"""Shared pytest fixtures."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def clean_styletheme_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``STYLETHEME_*`` variables from the host shell out of every test."""

    for name in list(os.environ):
        if name.startswith("STYLETHEME_"):
            monkeypatch.delenv(name, raising=False)
