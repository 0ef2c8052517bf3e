"""
Pytest configuration and fixtures for cleanup tests.
"""

import pytest

from tidyoutput.config.cleanup.models import DOM, TIDY, Action, CleanupConfig
from tidyoutput.services.cleanup.base import BaseCleanupStrategy
from tidyoutput.services.cleanup.strategies import STRATEGY_REGISTRY


class RecordingStrategy(BaseCleanupStrategy):
    """Stand-in for the tidy strategy: records calls and wraps content in a marker."""

    supports = frozenset({Action.REPAIR, Action.REFORMAT, Action.WHOLE_DOCUMENT})
    label = "Recording"
    calls: list[tuple[str, bool]] = []

    @classmethod
    def is_available(cls) -> bool:
        return True

    @property
    def strategy_name(self) -> str:
        return TIDY

    def clean(self, content: str, whole_document: bool, config: CleanupConfig) -> str:
        RecordingStrategy.calls.append((content, whole_document))
        return f"[{content}]"


@pytest.fixture
def recording_strategy(monkeypatch: pytest.MonkeyPatch) -> type[RecordingStrategy]:
    """Replace the tidy registry entry with RecordingStrategy for the duration of a test."""
    RecordingStrategy.calls = []
    monkeypatch.setitem(STRATEGY_REGISTRY, TIDY, RecordingStrategy)
    return RecordingStrategy


@pytest.fixture
def tidy_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend libtidy is not installed."""
    cls = STRATEGY_REGISTRY[TIDY]
    monkeypatch.setattr(cls, "is_available", classmethod(lambda c: False))


@pytest.fixture
def dom_config() -> CleanupConfig:
    """DOM strategy with repair on, no extra indentation."""
    return CleanupConfig(method=DOM, repair=True, reformat=False, whole_document=False)


@pytest.fixture
def recording_config() -> CleanupConfig:
    """Config that routes through the recording stand-in."""
    return CleanupConfig(
        method=TIDY,
        repair=True,
        reformat=False,
        whole_document=False,
        indent_content=1,
        indent_comment=2,
    )
