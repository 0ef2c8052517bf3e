"""Tests for the cleanup orchestrator: indent resolution, short-circuits and dispatch."""

import pytest

from tidyoutput.config.cleanup.models import DISABLED, DOM, TIDY, CleanupConfig, ContentKind
from tidyoutput.services.cleanup.cleaner import (
    clean,
    clean_comment,
    clean_content,
    clean_page,
    resolve_indent_levels,
)


class TestResolveIndentLevels:

    def test_per_kind(self, recording_config):
        assert resolve_indent_levels(ContentKind.CONTENT, recording_config) == 1
        assert resolve_indent_levels(ContentKind.COMMENT, recording_config) == 2
        assert resolve_indent_levels(ContentKind.FULL_DOCUMENT, recording_config) == 0

    def test_string_kinds(self, recording_config):
        assert resolve_indent_levels("comment", recording_config) == 2

    @pytest.mark.parametrize("kind", ["page", "", None, 7])
    def test_invalid_kind_rejected(self, recording_config, kind):
        with pytest.raises(ValueError, match="Invalid content kind"):
            resolve_indent_levels(kind, recording_config)


class TestDispatch:

    def test_strategy_runs_then_indent(self, recording_strategy, recording_config):
        assert clean("a\nb", ContentKind.CONTENT, False, recording_config) == "[a\n    b]"
        assert recording_strategy.calls == [("a\nb", False)]

    def test_comment_uses_comment_indent(self, recording_strategy, recording_config):
        assert clean_comment("a\nb", recording_config) == "[a\n        b]"

    def test_full_document_never_indented(self, recording_strategy):
        config = CleanupConfig(method=TIDY, whole_document=True, indent_content=5, indent_comment=5)
        assert clean("a\nb", ContentKind.FULL_DOCUMENT, True, config) == "[a\nb]"
        assert recording_strategy.calls == [("a\nb", True)]

    def test_whole_document_flag_blocks_indent(self, recording_strategy, recording_config):
        """Indentation is only for fragments, whatever the kind says."""
        assert clean("a\nb", ContentKind.CONTENT, True, recording_config) == "[a\nb]"

    def test_invalid_kind_rejected_before_cleanup(self, recording_strategy, recording_config):
        with pytest.raises(ValueError):
            clean("<p>x</p>", "sidebar", False, recording_config)
        assert recording_strategy.calls == []

    def test_unavailable_method_passes_through(self, tidy_unavailable):
        config = CleanupConfig(method=TIDY, indent_content=1)
        assert clean_content("<span></span>\nx", config) == "<span></span>\n    x"

    def test_unknown_method_passes_through(self):
        config = CleanupConfig(method="nope")
        assert clean_content("<span></span>", config) == "<span></span>"

    def test_disabled_still_indents(self, recording_strategy):
        config = CleanupConfig(method=DISABLED, repair=False, indent_content=1)
        assert clean_content("a\nb", config) == "a\n    b"
        assert recording_strategy.calls == []

    def test_dom_end_to_end(self):
        config = CleanupConfig(method=DOM, repair=True)
        assert clean_content("<span>test</span><span></span>", config) == "<span>test</span>"


class TestWholePageMode:
    """Fragment calls when the whole page is cleaned later."""

    def test_fragment_skipped_without_indent(self, recording_strategy):
        config = CleanupConfig(method=TIDY, whole_document=True, reformat=True)
        assert clean_content("<p><span></span>", config) == "<p><span></span>"
        assert clean_comment("<a>test</a><a>", config) == "<a>test</a><a>"
        assert recording_strategy.calls == []

    def test_fragment_cleaned_when_indent_requested(self, recording_strategy):
        config = CleanupConfig(method=TIDY, whole_document=True, indent_content=1)
        assert clean_content("a\nb", config) == "[a\n    b]"

    def test_page_always_cleaned(self, recording_strategy):
        config = CleanupConfig(method=TIDY, whole_document=True)
        assert clean_page("<html>", config) == "[<html>]"


class TestCapturingIndent:

    def test_reformat_while_capturing_skips_indent(self, recording_strategy):
        config = CleanupConfig(method=TIDY, reformat=True, indent_content=1)
        assert clean_content("a\nb", config, capturing=True) == "[a\nb]"

    def test_reformat_not_capturing_indents(self, recording_strategy):
        config = CleanupConfig(method=TIDY, reformat=True, indent_content=1)
        assert clean_content("a\nb", config, capturing=False) == "[a\n    b]"

    def test_capturing_without_reformat_indents(self, recording_strategy):
        config = CleanupConfig(method=TIDY, reformat=False, indent_content=1)
        assert clean_content("a\nb", config, capturing=True) == "[a\n    b]"


class TestNoActionsEnabled:

    @pytest.mark.parametrize("method", [TIDY, DOM, DISABLED])
    @pytest.mark.parametrize("whole_document", [False, True])
    def test_input_unchanged(self, method, whole_document):
        config = CleanupConfig(method=method, repair=False, reformat=False)
        content = "<p><span></span>broken"
        kind = ContentKind.FULL_DOCUMENT if whole_document else ContentKind.CONTENT
        assert clean(content, kind, whole_document, config) == content
