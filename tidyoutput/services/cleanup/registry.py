"""
Capability registry: which cleanup strategies this runtime can run and which
actions each supports. Descriptors are rebuilt on every query; only the
facility probes behind is_available() are memoized.
"""

from tidyoutput.config.cleanup.models import DISABLED, Action, StrategyDescriptor
from tidyoutput.services.cleanup.strategies import STRATEGY_REGISTRY

RECOMMENDED_SUFFIX = " (Recommended)"


def available_strategies() -> list[StrategyDescriptor]:
    """
    Return available strategies in priority order. Strategies whose backing
    library is missing are omitted. The first entry is marked recommended;
    'disabled' is always present and always last.
    """
    descriptors: list[StrategyDescriptor] = []
    for name, cls in STRATEGY_REGISTRY.items():
        if name != DISABLED and not cls.is_available():
            continue
        first = not descriptors
        descriptors.append(
            StrategyDescriptor(
                name=name,
                label=cls.label + (RECOMMENDED_SUFFIX if first else ""),
                supports=cls.supports,
                recommended=first,
            )
        )
    return descriptors


def get_strategy_descriptor(strategy_id: str) -> StrategyDescriptor | None:
    """Return the descriptor for an available strategy, or None."""
    return next((d for d in available_strategies() if d.name == strategy_id), None)


def recommended_strategy() -> str:
    """Name of the highest-priority available strategy ('disabled' when nothing else is installed)."""
    return available_strategies()[0].name


def strategy_supports(strategy_id: str, action: Action | str) -> bool:
    """True when the strategy is available and supports action. Unknown ids or actions give False."""
    try:
        action = Action(action)
    except ValueError:
        return False
    descriptor = get_strategy_descriptor(strategy_id)
    return descriptor is not None and action in descriptor.supports


def strategy_supports_any(strategy_id: str) -> bool:
    """True when the strategy is available and supports at least one action."""
    descriptor = get_strategy_descriptor(strategy_id)
    return descriptor is not None and bool(descriptor.supports)
