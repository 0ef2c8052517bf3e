"""DOM cleanup strategy (lxml). Repairs markup by a parse/serialize round-trip and prunes empty elements."""

from copy import deepcopy
from functools import lru_cache
from html import escape
from io import StringIO

from tidyoutput.config.cleanup.models import DOM, Action, CleanupConfig
from tidyoutput.config.logging import get_logger
from tidyoutput.services.cleanup.base import BaseCleanupStrategy
from tidyoutput.utils.ids import generate_wrapper_id

logger = get_logger(__name__)

# Elements with neither child nodes (text included) nor attributes
EMPTY_ELEMENTS_XPATH = ".//*[not(node() or @*)]"

DEFAULT_DOCTYPE = "<!DOCTYPE html>"

_CONTAINER_TAG = "body"


@lru_cache
def dom_available() -> bool:
    """True when lxml imports."""
    try:
        import lxml.etree  # noqa: F401
    except ImportError as e:
        logger.info("lxml not available, dom strategy disabled", extra={"error": str(e)})
        return False
    return True


def xpath_available() -> bool:
    """True when lxml exposes XPath, used for recursive empty-element removal."""
    from lxml import etree

    return hasattr(etree, "XPath")


def _is_empty_element(node) -> bool:
    # Comments and processing instructions have a non-str tag and are never pruned
    return isinstance(node.tag, str) and len(node) == 0 and not node.text and not node.attrib


def _append_text(container, text: str | None) -> None:
    """Append text after the last child of container (or to its text when childless)."""
    if not text:
        return
    if len(container):
        last = container[-1]
        last.tail = (last.tail or "") + text
    else:
        container.text = (container.text or "") + text


def _drop_element(node) -> None:
    """Remove node from its parent, keeping its tail text in place."""
    parent = node.getparent()
    previous = node.getprevious()
    if node.tail:
        if previous is not None:
            previous.tail = (previous.tail or "") + node.tail
        else:
            parent.text = (parent.text or "") + node.tail
    parent.remove(node)


def _source_nodes(tree, uid: str, whole_document: bool):
    """
    Return (leading_text, nodes) for the node whose direct children are copied.
    Fragments are found by the wrapper body id; whole documents use <html>, or
    the document's top-level nodes when there is no <html> element.
    """
    root = tree.getroot()
    if not whole_document:
        body = next((el for el in root.iter("body") if el.get("id") == uid), None)
        if body is None:
            return None
        return body.text, list(body)
    html_root = root if root.tag == "html" else next(root.iter("html"), None)
    if html_root is not None:
        return html_root.text, list(html_root)
    preceding = list(root.itersiblings(preceding=True))
    preceding.reverse()
    return None, [*preceding, root, *root.itersiblings()]


def _doctype_line(tree, whole_document: bool) -> str:
    """Doctype declaration to prepend. Fragments get none; undeclared documents get the html5 one."""
    if not whole_document:
        return ""
    docinfo = tree.docinfo
    name = docinfo.root_name
    if not name:
        return DEFAULT_DOCTYPE
    doctype = f"<!DOCTYPE {name}"
    public_id = (docinfo.public_id or "").strip()
    system_id = (docinfo.system_url or "").strip()
    if public_id and system_id:
        doctype += f' PUBLIC "{escape(public_id)}" "{escape(system_id)}"'
    return doctype + ">"


class DomCleanupStrategy(BaseCleanupStrategy):
    """
    Cleanup through lxml's recovering HTML parser. Only repair is supported:
    formatting is whatever serialization produces. Fragments are wrapped in a
    synthetic document so broken snippets still parse; the doctype never enters
    the element tree and is rebuilt from the parsed document info.
    """

    supports = frozenset({Action.REPAIR, Action.WHOLE_DOCUMENT})
    label = "DOM (lxml)"

    @classmethod
    def is_available(cls) -> bool:
        return dom_available()

    @property
    def strategy_name(self) -> str:
        return DOM

    def clean(self, content: str, whole_document: bool, config: CleanupConfig) -> str:
        if not config.repair:
            return content

        from lxml import etree
        from lxml import html as lxml_html

        uid = generate_wrapper_id()
        markup = content if whole_document else f'<html><body id="{uid}">{content}</body>'
        parser = lxml_html.HTMLParser(recover=True, default_doctype=False)
        try:
            tree = etree.parse(StringIO(markup), parser)
        except (etree.LxmlError, ValueError) as e:
            logger.warning("DOM parse failed; returning original content", extra={"error": str(e)})
            return content
        if tree.getroot() is None:
            return content

        source = _source_nodes(tree, uid, whole_document)
        if source is None:
            logger.warning("Wrapped fragment not found after parse; returning original content")
            return content
        leading_text, nodes = source

        has_xpath = xpath_available()
        output = lxml_html.Element(_CONTAINER_TAG)
        try:
            output.text = leading_text
            for child in nodes:
                if not has_xpath and _is_empty_element(child):
                    # Top level only; nested empty elements survive without XPath
                    _append_text(output, child.tail)
                    continue
                output.append(deepcopy(child))

            if has_xpath:
                for node in output.xpath(EMPTY_ELEMENTS_XPATH):
                    _drop_element(node)

            serialized = etree.tostring(output, method="html", encoding="unicode")
        except (etree.LxmlError, ValueError, TypeError) as e:
            logger.warning("DOM rebuild failed; returning original content", extra={"error": str(e)})
            return content

        inner = serialized[len(f"<{_CONTAINER_TAG}>") : -len(f"</{_CONTAINER_TAG}>")]
        return _doctype_line(tree, whole_document) + inner
