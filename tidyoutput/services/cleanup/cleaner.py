"""
Cleaner: takes content + kind + resolved config, runs the configured strategy and
applies extra indentation. Pure function of its inputs; never raises for bad
markup. Orchestration: resolve indent → skip if redundant → strategy → indent.
"""

from tidyoutput.config.cleanup.models import CleanupConfig, ContentKind
from tidyoutput.config.logging import get_logger
from tidyoutput.services.cleanup.indent import indent
from tidyoutput.services.cleanup.registry import strategy_supports_any
from tidyoutput.services.cleanup.strategies import get_cleanup_strategy

logger = get_logger(__name__)


def resolve_indent_levels(kind: ContentKind | str, config: CleanupConfig) -> int:
    """Extra indent levels for kind. Full documents are never indented. Raises ValueError for unknown kinds."""
    try:
        kind = ContentKind(kind)
    except ValueError:
        raise ValueError(f"Invalid content kind: {kind!r}") from None
    if kind is ContentKind.CONTENT:
        return config.indent_content
    if kind is ContentKind.COMMENT:
        return config.indent_comment
    return 0


def clean(
    content: str,
    kind: ContentKind | str,
    whole_document: bool,
    config: CleanupConfig,
    capturing: bool = False,
) -> str:
    """
    Clean content with the strategy named by config.method.
    capturing tells whether a whole-page capture is in progress; a page that will
    be reformatted as a whole does not need its fragments indented.
    """
    indents = resolve_indent_levels(kind, config)

    if not whole_document and config.whole_document and not indents:
        # The whole-page pass does the cleanup and no indentation was asked for
        return content

    if strategy_supports_any(config.method):
        strategy = get_cleanup_strategy(config.method)
        content = strategy.clean(content, whole_document, config)
    else:
        logger.debug("Cleanup strategy supports no actions; passing through", extra={"method": config.method})

    if not whole_document and (not config.reformat or not capturing) and indents > 0:
        content = indent(content, indents)

    return content


def clean_content(content: str, config: CleanupConfig, whole_document: bool = False, capturing: bool = False) -> str:
    """Clean post content."""
    return clean(content, ContentKind.CONTENT, whole_document, config, capturing=capturing)


def clean_comment(content: str, config: CleanupConfig, whole_document: bool = False, capturing: bool = False) -> str:
    """Clean a comment."""
    return clean(content, ContentKind.COMMENT, whole_document, config, capturing=capturing)


def clean_page(content: str, config: CleanupConfig) -> str:
    """Clean a whole rendered page."""
    return clean(content, ContentKind.FULL_DOCUMENT, True, config)
