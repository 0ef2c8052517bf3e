"""HTML Tidy cleanup strategy (libtidy via pytidylib). Repairs and/or reformats markup."""

import os
import re
from functools import lru_cache

from tidyoutput.config.cleanup.models import TIDY, Action, CleanupConfig
from tidyoutput.config.logging import get_logger
from tidyoutput.services.cleanup.base import BaseCleanupStrategy

logger = get_logger(__name__)

# Leading html5 doctype on the input; tidy's own doctype is replaced when present
_HTML5_DOCTYPE = re.compile(r"<!doctype\s+html\s*>", re.IGNORECASE)
# First doctype declaration in tidy output, with the line break that ends it
_DOCTYPE_LINE = re.compile(r"<!doctype[^>]*>[ \t]*(?:\r\n|\n|\r)?", re.IGNORECASE)

CANONICAL_DOCTYPE = "<!doctype html>"

_BASE_OPTIONS: dict[str, str | int] = {
    "doctype": "auto",
    "tidy-mark": "no",
    "wrap": 0,
}
_INDENT_OPTIONS: dict[str, str | int] = {
    "indent": "auto",
    "indent-spaces": 4,
}


@lru_cache
def tidy_available() -> bool:
    """True when the pytidylib binding imports and the native libtidy loads."""
    try:
        from tidylib import Tidy

        Tidy()
    except (ImportError, OSError) as e:
        logger.info("libtidy not available, tidy strategy disabled", extra={"error": str(e)})
        return False
    return True


class TidyCleanupStrategy(BaseCleanupStrategy):
    """
    Cleanup through HTML Tidy. Repair runs tidy with forced output; reformat
    alone refuses output for markup with errors, so broken input comes back
    untouched. A fresh libtidy handle is created per call.
    """

    supports = frozenset({Action.REPAIR, Action.REFORMAT, Action.WHOLE_DOCUMENT})
    label = "Tidy"

    @classmethod
    def is_available(cls) -> bool:
        return tidy_available()

    @property
    def strategy_name(self) -> str:
        return TIDY

    def _run(self, content: str, options: dict[str, str | int]) -> str | None:
        """Run tidy over content. Returns None when tidy produced nothing usable."""
        from tidylib import Tidy

        try:
            document, errors = Tidy().tidy_document(content, options=options)
        except (OSError, ValueError, UnicodeError) as e:
            logger.warning("Tidy failed; returning original content", extra={"error": str(e)})
            return None
        if content.strip() and not document.strip():
            logger.warning(
                "Tidy produced no output; returning original content",
                extra={"tidy_errors": errors.strip()[:500]},
            )
            return None
        return document

    def clean(self, content: str, whole_document: bool, config: CleanupConfig) -> str:
        options: dict[str, str | int] = {
            **_BASE_OPTIONS,
            "show-body-only": "no" if whole_document else "yes",
        }

        if config.repair and config.reformat:
            options.update(_INDENT_OPTIONS)
            options["force-output"] = "yes"
        elif config.repair:
            options["indent"] = "no"
            options["force-output"] = "yes"
        elif config.reformat:
            options.update(_INDENT_OPTIONS)
            options["force-output"] = "no"
        else:
            return content

        cleaned = self._run(content, options)
        if cleaned is None:
            return content

        if whole_document and _HTML5_DOCTYPE.match(content):
            cleaned = _DOCTYPE_LINE.sub("", cleaned, count=1)
            cleaned = CANONICAL_DOCTYPE + os.linesep + cleaned
        return cleaned
