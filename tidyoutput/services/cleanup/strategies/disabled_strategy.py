"""No-op cleanup strategy. Always available; supports no actions."""

from tidyoutput.config.cleanup.models import DISABLED, CleanupConfig
from tidyoutput.services.cleanup.base import BaseCleanupStrategy


class DisabledCleanupStrategy(BaseCleanupStrategy):
    """Passes content through untouched. Listed last so it is never recommended."""

    supports = frozenset()
    label = "Disable"

    @property
    def strategy_name(self) -> str:
        return DISABLED

    def clean(self, content: str, whole_document: bool, config: CleanupConfig) -> str:
        return content
