"""RichTextBuilderのテスト"""

import pytest

from slack_block_builder.builders.rich_text import RichTextBuilder
from slack_block_builder.exceptions import BlockValidationError, MissingArgumentError
from slack_block_builder.models import (
    RichTextEmoji,
    RichTextLink,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
    RichTextText,
    RichTextUser,
)


class TestRichTextBuilder:
    """RichTextBuilderのテスト"""

    def test_section(self) -> None:
        """装飾付きテキストの段落を追加できること"""
        block = (
            RichTextBuilder()
            .add_section(
                lambda section: section.add_text("Hello ", bold=True)
                .add_user("U123")
                .add_emoji("wave")
                .add_link("https://example.com", "site")
            )
            .build()
        )
        (section,) = block.elements
        assert isinstance(section, RichTextSection)
        text, user, emoji, link = section.elements
        assert isinstance(text, RichTextText)
        assert text.style is not None
        assert text.style.bold is True
        assert text.style.italic is None
        assert isinstance(user, RichTextUser)
        assert isinstance(emoji, RichTextEmoji)
        assert isinstance(link, RichTextLink)

    def test_plain_text_has_no_style(self) -> None:
        """装飾なしのテキストはstyleを持たないこと"""
        block = RichTextBuilder().add_section(lambda section: section.add_text("plain")).build()
        section = block.elements[0]
        assert isinstance(section, RichTextSection)
        assert isinstance(section.elements[0], RichTextText)
        assert section.elements[0].style is None

    def test_list(self) -> None:
        """箇条書きを追加できること"""
        block = (
            RichTextBuilder()
            .add_list(
                "ordered",
                lambda items: items.add_section(lambda s: s.add_text("one"))
                .add_section(lambda s: s.add_text("two"))
                .indent(1)
                .border(1),
            )
            .build()
        )
        (rich_list,) = block.elements
        assert isinstance(rich_list, RichTextList)
        assert rich_list.style == "ordered"
        assert len(rich_list.elements) == 2
        assert rich_list.indent == 1
        assert rich_list.border == 1

    def test_preformatted_from_string(self) -> None:
        """文字列からコードブロックを追加できること"""
        block = RichTextBuilder().add_preformatted("print('hi')").build()
        (preformatted,) = block.elements
        assert isinstance(preformatted, RichTextPreformatted)
        assert preformatted.elements == [RichTextText(text="print('hi')")]

    def test_quote(self) -> None:
        """引用を追加できること"""
        block = RichTextBuilder().add_quote(lambda section: section.add_text("quoted", italic=True)).build()
        assert isinstance(block.elements[0], RichTextQuote)

    def test_section_configure_none(self) -> None:
        """configureがNoneの場合にエラーになること"""
        with pytest.raises(MissingArgumentError):
            RichTextBuilder().add_section(None)  # type: ignore[arg-type]

    def test_block_id_too_long(self) -> None:
        """長すぎるblock_idはbuild()でエラーになること"""
        with pytest.raises(BlockValidationError):
            RichTextBuilder().block_id("x" * 256).build()
