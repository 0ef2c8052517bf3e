"""Base cleanup strategy and contract."""

from abc import ABC, abstractmethod

from tidyoutput.config.cleanup.models import Action, CleanupConfig


class BaseCleanupStrategy(ABC):
    """
    Abstract cleanup strategy. A strategy repairs and/or reformats markup and
    never raises on bad input: on any parse failure it returns the content it
    was given. Instances hold no parser state between calls.
    """

    #: Actions this strategy can perform; a subset of Action.
    supports: frozenset[Action] = frozenset()

    #: Human-readable name shown in strategy listings.
    label: str = ""

    @classmethod
    def is_available(cls) -> bool:
        """Runtime check that the facility backing this strategy is present."""
        return True

    @abstractmethod
    def clean(self, content: str, whole_document: bool, config: CleanupConfig) -> str:
        """
        Clean content. whole_document tells whether content is a full page
        (doctype, <html> root) or a fragment. Returns content unchanged on failure.
        """
        ...

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'tidy', 'dom'."""
        ...
