"""Whole-page capture: buffer rendered output, then clean it as one document."""

from tidyoutput.config.cleanup.models import CleanupConfig, ContentKind
from tidyoutput.config.logging import get_logger
from tidyoutput.services.cleanup.cleaner import clean, clean_page
from tidyoutput.services.cleanup.registry import strategy_supports_any

logger = get_logger(__name__)


class PageCapture:
    """
    Collects a page as it is rendered. Fragments cleaned while a capture is in
    progress skip indentation when the page itself will be reformatted.
    Not thread-safe; use one instance per render.
    """

    def __init__(self, config: CleanupConfig) -> None:
        self._config = config
        self._buffer: list[str] | None = None

    @property
    def capturing(self) -> bool:
        return self._buffer is not None

    def begin(self) -> bool:
        """Start buffering. Does nothing (returns False) when already capturing or the strategy can do nothing."""
        if self.capturing or not strategy_supports_any(self._config.method):
            return False
        self._buffer = []
        return True

    def write(self, chunk: str) -> None:
        """Append rendered output. Ignored when not capturing."""
        if self._buffer is not None:
            self._buffer.append(chunk)

    def end(self) -> str | None:
        """Stop buffering and return the cleaned page, or None when no capture was running."""
        if self._buffer is None:
            return None
        page = "".join(self._buffer)
        self._buffer = None
        logger.debug("Cleaning captured page", extra={"length": len(page)})
        return clean_page(page, self._config)

    def clean_fragment(self, content: str, kind: ContentKind | str = ContentKind.CONTENT) -> str:
        """Clean a fragment rendered during this capture."""
        return clean(content, kind, False, self._config, capturing=self.capturing)
