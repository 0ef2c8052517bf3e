"""Cleanup strategy implementations. Registry order is priority order; disabled stays last."""

from tidyoutput.config.cleanup.models import DISABLED, DOM, TIDY
from tidyoutput.services.cleanup.base import BaseCleanupStrategy
from tidyoutput.services.cleanup.strategies.disabled_strategy import DisabledCleanupStrategy
from tidyoutput.services.cleanup.strategies.dom_strategy import DomCleanupStrategy
from tidyoutput.services.cleanup.strategies.tidy_strategy import TidyCleanupStrategy

STRATEGY_REGISTRY: dict[str, type[BaseCleanupStrategy]] = {
    TIDY: TidyCleanupStrategy,
    DOM: DomCleanupStrategy,
    DISABLED: DisabledCleanupStrategy,
}


def get_cleanup_strategy(strategy_name: str) -> BaseCleanupStrategy | None:
    """Return an instance of the cleanup strategy for the given name, or None."""
    cls = STRATEGY_REGISTRY.get(strategy_name)
    if cls is None:
        return None
    return cls()
