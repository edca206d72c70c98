"""rich_textブロック用のビルダー"""

from collections.abc import Callable
from typing import Any, Literal, Self

from slack_block_builder.limits import DEFAULT_LIMITS, BlockLimits
from slack_block_builder.models.rich_text import (
    RichTextBlock,
    RichTextChannel,
    RichTextEmoji,
    RichTextLink,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
    RichTextStyle,
    RichTextText,
    RichTextUser,
)
from slack_block_builder.validation import require, validate_block_id

ListStyle = Literal["bullet", "ordered"]


def _style(bold: bool, italic: bool, strike: bool, code: bool) -> RichTextStyle | None:
    if not (bold or italic or strike or code):
        return None
    return RichTextStyle(bold=bold or None, italic=italic or None, strike=strike or None, code=code or None)


class RichTextSectionBuilder:
    """rich_text_section等の中身（装飾付きテキストの並び）を組み立てる"""

    def __init__(self) -> None:
        self.elements: list[Any] = []

    def add(self, element: Any) -> Self:
        require(element, "element")
        self.elements.append(element)
        return self

    def add_text(
        self,
        text: str,
        *,
        bold: bool = False,
        italic: bool = False,
        strike: bool = False,
        code: bool = False,
    ) -> Self:
        require(text, "text")
        return self.add(RichTextText(text=text, style=_style(bold, italic, strike, code)))

    def add_link(self, url: str, text: str | None = None) -> Self:
        require(url, "url")
        return self.add(RichTextLink(url=url, text=text))

    def add_emoji(self, name: str) -> Self:
        return self.add(RichTextEmoji(name=name))

    def add_user(self, user_id: str) -> Self:
        return self.add(RichTextUser(user_id=user_id))

    def add_channel(self, channel_id: str) -> Self:
        return self.add(RichTextChannel(channel_id=channel_id))

    def build(self) -> list[Any]:
        return self.elements


def _build_section(configure: Callable[[RichTextSectionBuilder], Any]) -> list[Any]:
    require(configure, "configure")
    builder = RichTextSectionBuilder()
    configure(builder)
    return builder.build()


class RichTextListBuilder:
    """箇条書き（rich_text_list）を組み立てる"""

    def __init__(self, style: ListStyle) -> None:
        self.list = RichTextList(style=style)

    def add_section(self, configure: Callable[[RichTextSectionBuilder], Any]) -> Self:
        """箇条書きの項目を1つ追加する"""
        self.list.elements.append(RichTextSection(elements=_build_section(configure)))
        return self

    def indent(self, indent: int) -> Self:
        self.list.indent = indent
        return self

    def offset(self, offset: int) -> Self:
        self.list.offset = offset
        return self

    def border(self, border: int) -> Self:
        self.list.border = border
        return self

    def build(self) -> RichTextList:
        return self.list


class RichTextBuilder:
    """rich_textブロックを組み立てるビルダー

    段落（section）、箇条書き（list）、コードブロック（preformatted）、引用（quote）を
    呼び出し順に並べる。
    """

    def __init__(self, limits: BlockLimits | None = None) -> None:
        self.block = RichTextBlock()
        self._limits = limits or DEFAULT_LIMITS

    def block_id(self, block_id: str | None) -> Self:
        self.block.block_id = block_id
        return self

    def add_section(self, configure: Callable[[RichTextSectionBuilder], Any]) -> Self:
        self.block.elements.append(RichTextSection(elements=_build_section(configure)))
        return self

    def add_list(self, style: ListStyle, configure: Callable[[RichTextListBuilder], Any]) -> Self:
        require(configure, "configure")
        list_builder = RichTextListBuilder(style)
        configure(list_builder)
        self.block.elements.append(list_builder.build())
        return self

    def add_preformatted(
        self,
        content: str | Callable[[RichTextSectionBuilder], Any],
        border: int | None = None,
    ) -> Self:
        """コードブロックを追加する（文字列はそのまま1つのtext要素になる）"""
        require(content, "content")
        if isinstance(content, str):
            elements: list[Any] = [RichTextText(text=content)]
        else:
            elements = _build_section(content)
        self.block.elements.append(RichTextPreformatted(elements=elements, border=border))
        return self

    def add_quote(self, configure: Callable[[RichTextSectionBuilder], Any], border: int | None = None) -> Self:
        self.block.elements.append(RichTextQuote(elements=_build_section(configure), border=border))
        return self

    def build(self) -> RichTextBlock:
        """rich_textブロックを検証して返す

        Raises:
            BlockValidationError: block_idが長すぎる場合
        """
        validate_block_id(self.block.block_id, self._limits)
        return self.block
