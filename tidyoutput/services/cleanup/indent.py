"""
Extra indentation for cleaned fragments. Pads every line that follows a run of
line breaks so a fragment lines up with the page around it.
"""

import re

from tidyoutput.config.cleanup.models import INDENT_WIDTH

# A run of \r / \n in any combination (\r\n, \n\r, blank lines) followed by content.
# Other Unicode line separators are deliberately not treated as breaks.
_BREAK_RUN = re.compile(r"[\r\n]+(?=[^\r\n])")


def indent(content: str, levels: int) -> str:
    """
    Insert levels * 4 spaces after each run of line breaks that precedes a
    non-break character. Breaks are copied verbatim; trailing breaks get no
    padding and content without breaks is returned as is. Not idempotent:
    apply once per content unit.
    """
    if levels <= 0 or not content:
        return content
    pad = " " * (levels * INDENT_WIDTH)
    return _BREAK_RUN.sub(lambda m: m.group(0) + pad, content)
