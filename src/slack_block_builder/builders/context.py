"""contextブロック用のビルダー"""

from typing import Self

from slack_block_builder.limits import DEFAULT_LIMITS, BlockLimits
from slack_block_builder.models.blocks import ContextBlock
from slack_block_builder.models.composition import Markdown, PlainText, SlackFile
from slack_block_builder.models.elements import ImageElement
from slack_block_builder.validation import require, require_non_blank, require_text, validate_context


class ContextBlockBuilder:
    """contextブロック（テキストと画像の小さな補足情報）を組み立てるビルダー

    要素は呼び出し順に追加される。要素数（1〜10）はbuild()時に検証する。
    """

    def __init__(self, limits: BlockLimits | None = None) -> None:
        self.block = ContextBlock()
        self._limits = limits or DEFAULT_LIMITS

    def block_id(self, block_id: str) -> Self:
        require(block_id, "block_id")
        self.block.block_id = block_id
        return self

    def add_text(self, text: str, emoji: bool = True) -> Self:
        require(text, "text")
        self.block.elements.append(PlainText(text=text, emoji=emoji))
        return self

    def add_markdown(self, text: str, verbatim: bool = False) -> Self:
        require(text, "text")
        self.block.elements.append(Markdown(text=text, verbatim=verbatim))
        return self

    def add_image_from_url(self, image_url: str, alt_text: str) -> Self:
        """URLで指定した画像を追加する

        Raises:
            MissingArgumentError: image_urlがNoneまたは空文字、alt_textがNoneの場合
            BlockArgumentError: alt_textが空白のみの場合
        """
        require_text(image_url, "image_url")
        require_non_blank(alt_text, "alt_text")
        self.block.elements.append(ImageElement(image_url=image_url, alt_text=alt_text))
        return self

    def add_image_from_slack_file(self, slack_file: SlackFile, alt_text: str) -> Self:
        """Slackにアップロード済みの画像を追加する"""
        require(slack_file, "slack_file")
        require_non_blank(alt_text, "alt_text")
        self.block.elements.append(ImageElement(slack_file=slack_file, alt_text=alt_text))
        return self

    def build(self) -> ContextBlock:
        """contextブロックを検証して返す

        Raises:
            BlockValidationError: 要素が0個、上限を超える、またはblock_idが長すぎる場合
        """
        validate_context(self.block, self._limits)
        return self.block
