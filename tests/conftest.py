"""Shared fixtures for markdoclet tests."""

from __future__ import annotations

import pytest

from markdoclet.renderers.protocol import MarkupMode


class RecordingMarkup:
    """Markup engine that tags its output and records every call.

    ``markup("x", MarkupMode.INLINE)`` returns ``"[inline:x]"`` so tests can
    see exactly which spans were rendered and in which mode.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, MarkupMode]] = []

    def __call__(self, text: str, mode: MarkupMode) -> str:
        self.calls.append((text, mode))
        return f"[{mode.value}:{text}]"


class IdentityMarkup:
    """Markup engine that returns its input unchanged."""

    def __call__(self, text: str, mode: MarkupMode) -> str:
        return text


@pytest.fixture
def markup() -> RecordingMarkup:
    """Fresh recording markup engine."""
    return RecordingMarkup()


@pytest.fixture
def identity() -> IdentityMarkup:
    """Markup engine that passes text through."""
    return IdentityMarkup()
