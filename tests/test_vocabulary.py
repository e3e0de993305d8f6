"""Tests for tag vocabularies: defaults, validation, extension."""

import pytest

from cfmlfmt import DEFAULT_VOCABULARY, Vocabulary, VocabularyError, classify, format_document
from cfmlfmt.vocabulary import BLOCK_MARKUP_TAGS, SELF_CLOSING_MARKUP_TAGS


class TestDefaults:
    def test_sets_are_disjoint(self) -> None:
        v = DEFAULT_VOCABULARY
        assert not v.block_templating & v.self_closing_templating
        assert not v.block_markup & v.self_closing_markup

    def test_embed_is_void_only(self) -> None:
        assert "embed" in SELF_CLOSING_MARKUP_TAGS
        assert "embed" not in BLOCK_MARKUP_TAGS

    def test_preserve_whitespace_tags(self) -> None:
        assert DEFAULT_VOCABULARY.preserve_whitespace == {"pre", "script", "style", "textarea"}

    def test_branch_tags(self) -> None:
        assert DEFAULT_VOCABULARY.branch_parent("cfelse") == "cfif"
        assert DEFAULT_VOCABULARY.branch_parent("cfelseif") == "cfif"
        assert DEFAULT_VOCABULARY.branch_parent("cfcatch") is None

    def test_immutability(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_VOCABULARY.templating_prefix = "x"  # type: ignore[misc]


class TestValidation:
    def test_block_and_self_closing_overlap_rejected(self) -> None:
        with pytest.raises(VocabularyError) as exc_info:
            Vocabulary(block_markup={"div", "br"})
        assert "br" in str(exc_info.value)
        assert exc_info.value.names == {"br"}

    def test_templating_overlap_rejected(self) -> None:
        with pytest.raises(VocabularyError):
            Vocabulary(self_closing_templating={"cfif"})

    def test_templating_name_without_prefix_rejected(self) -> None:
        with pytest.raises(VocabularyError, match="prefix"):
            Vocabulary(block_templating={"cfif", "cfelse", "cfelseif", "loop"})

    def test_markup_name_with_prefix_rejected(self) -> None:
        with pytest.raises(VocabularyError, match="prefix"):
            Vocabulary(inline_markup={"cfspan"})

    def test_branch_parent_must_be_block(self) -> None:
        with pytest.raises(VocabularyError, match="branch"):
            Vocabulary(branch_tags={"cfelse": "cfset"})

    def test_names_are_lowercased(self) -> None:
        vocab = Vocabulary(block_markup=["DIV", "Section"])
        assert vocab.block_markup == {"div", "section"}


class TestFromDict:
    def test_lists_accepted_and_unknown_keys_ignored(self) -> None:
        vocab = Vocabulary.from_dict(
            {
                "block_markup": ["div", "ul", "li"],
                "description": "ignored",
            }
        )
        assert vocab.block_markup == {"div", "ul", "li"}
        assert vocab.block_templating == DEFAULT_VOCABULARY.block_templating

    def test_custom_prefix(self) -> None:
        vocab = Vocabulary.from_dict(
            {
                "templating_prefix": "tpl",
                "block_templating": ["tplif", "tplelse"],
                "self_closing_templating": ["tplset"],
                "branch_tags": {"tplelse": "tplif"},
            }
        )
        assert classify("<tplif a>", vocab).is_block
        assert classify("<tplset a>", vocab).is_self_closing
        result = format_document("<tplif a>\n<tplset b>\n<tplelse>\n<tplset c>\n</tplif>", vocabulary=vocab)
        assert result == "<tplif a>\n    <tplset b>\n<tplelse>\n    <tplset c>\n</tplif>"

    def test_prefix_is_case_folded(self) -> None:
        vocab = Vocabulary.from_dict({"templating_prefix": "CF"})
        assert vocab.templating_prefix == "cf"
        assert classify("<CFIF a>", vocab).is_templating


class TestExtend:
    def test_extend_adds_names(self) -> None:
        vocab = DEFAULT_VOCABULARY.extend(block_markup=["Widget"])
        assert "widget" in vocab.block_markup
        assert "div" in vocab.block_markup
        assert "widget" not in DEFAULT_VOCABULARY.block_markup

    def test_extend_changes_formatting(self) -> None:
        text = "<widget>\n<p>x</p>\n</widget>"
        assert format_document(text) == text
        vocab = DEFAULT_VOCABULARY.extend(block_markup=["widget"])
        assert format_document(text, vocabulary=vocab) == "<widget>\n    <p>x</p>\n</widget>"

    def test_extend_branch_tags(self) -> None:
        vocab = DEFAULT_VOCABULARY.extend(branch_tags={"cfdefaultcase": "cfswitch"})
        assert vocab.branch_parent("cfdefaultcase") == "cfswitch"
        assert vocab.branch_parent("cfelse") == "cfif"

    def test_extend_is_validated(self) -> None:
        with pytest.raises(VocabularyError):
            DEFAULT_VOCABULARY.extend(block_markup=["img"])
