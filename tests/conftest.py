"""Pytest configuration for svgpolicy."""

from __future__ import annotations

import logging

import pytest

from svgpolicy.policy.builder import reset_allowlist

_ENV_VARS = (
    "SVGPOLICY_STRIP_EVENT_HANDLERS",
    "SVGPOLICY_BLOCKED_ELEMENTS",
    "SVGPOLICY_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_policy_state(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_allowlist()
    yield
    reset_allowlist()
    # the CLI attaches a handler bound to the runner's captured stderr
    logger = logging.getLogger("svgpolicy")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
