"""Tests for the tag classifier."""

import pytest

from cfmlfmt import DEFAULT_VOCABULARY, Dialect, classify


class TestLexicalShape:
    """Comment, doctype, opening, closing and self-closing detection."""

    def test_html_comment(self) -> None:
        info = classify("<!-- note -->")
        assert info.is_comment
        assert info.is_block
        assert not info.is_opening and not info.is_closing
        assert info.tag_name == ""

    def test_cfml_comment(self) -> None:
        info = classify("<!--- hidden from output --->")
        assert info.is_comment
        assert info.dialect is Dialect.NONE

    @pytest.mark.parametrize("text", ["<!DOCTYPE html>", "<!doctype html>", "<!DocType html>"])
    def test_doctype_any_case(self, text: str) -> None:
        info = classify(text)
        assert info.is_doctype
        assert info.is_block
        assert not info.is_comment

    def test_closing_tag(self) -> None:
        info = classify("</div>")
        assert info.is_closing
        assert not info.is_opening
        assert info.tag_name == "div"
        assert info.closes_block

    def test_opening_tag(self) -> None:
        info = classify('<div class="row">')
        assert info.is_opening
        assert not info.is_closing
        assert not info.is_self_closing
        assert info.opens_block

    def test_trailing_slash_is_self_closing(self) -> None:
        info = classify('<div class="spacer" />')
        assert info.is_self_closing
        assert info.is_block
        assert not info.opens_block

    def test_surrounding_whitespace_trimmed(self) -> None:
        info = classify("   <p>  ")
        assert info.raw_text == "<p>"
        assert info.tag_name == "p"


class TestTagNames:
    """Name extraction and case folding."""

    def test_name_is_lowercased(self) -> None:
        assert classify("<CFIF x GT 1>").tag_name == "cfif"
        assert classify("</CfIf>").tag_name == "cfif"

    def test_attributes_ignored(self) -> None:
        info = classify('<cfloop query="q" startrow="1" endrow="10">')
        assert info.tag_name == "cfloop"

    def test_name_stops_at_non_alphanumeric(self) -> None:
        assert classify("<h2>").tag_name == "h2"
        assert classify("<cf_custom>").tag_name == "cf"

    @pytest.mark.parametrize("text", ["<>", "< div>", "<?xml version='1.0'?>", "<![CDATA[x]]>", "</ >", ""])
    def test_unnamed_tags_are_inert(self, text: str) -> None:
        info = classify(text)
        assert info.tag_name == ""
        assert not info.is_block
        assert info.dialect is Dialect.NONE


class TestDialect:
    """Templating vs markup dispatch."""

    def test_templating_tag(self) -> None:
        info = classify("<cfoutput>")
        assert info.dialect is Dialect.TEMPLATING
        assert info.is_templating
        assert info.is_block

    def test_markup_tag(self) -> None:
        info = classify("<section>")
        assert info.dialect is Dialect.MARKUP
        assert not info.is_templating
        assert info.is_block

    def test_inline_markup_is_not_block(self) -> None:
        info = classify("<span>")
        assert info.dialect is Dialect.MARKUP
        assert not info.is_block

    def test_unknown_templating_tag_is_not_block(self) -> None:
        info = classify("<cfwhatever>")
        assert info.is_templating
        assert not info.is_block
        assert not info.is_self_closing

    def test_markup_block_name_not_block_in_templating_lookup(self) -> None:
        # "cfdiv" is templating by prefix and unknown there
        assert not classify("<cfdiv>").is_block


class TestVocabularyPartition:
    """Every listed name classifies according to its set."""

    @pytest.mark.parametrize(
        "name",
        sorted(DEFAULT_VOCABULARY.block_templating | DEFAULT_VOCABULARY.block_markup),
    )
    def test_block_names(self, name: str) -> None:
        info = classify(f"<{name}>")
        assert info.is_block
        assert not info.is_self_closing

    @pytest.mark.parametrize(
        "name",
        sorted(DEFAULT_VOCABULARY.self_closing_templating | DEFAULT_VOCABULARY.self_closing_markup),
    )
    def test_self_closing_names(self, name: str) -> None:
        info = classify(f"<{name}>")
        assert info.is_self_closing
        assert not info.is_block

    def test_self_closing_regardless_of_case(self) -> None:
        assert classify("<CFSET x = 1>").is_self_closing
        assert classify("<BR>").is_self_closing
