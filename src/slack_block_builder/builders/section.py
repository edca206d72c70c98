"""sectionブロック用のビルダー"""

from collections.abc import Callable
from typing import Any, Self

from slack_block_builder.builders.registry import builder_for
from slack_block_builder.limits import DEFAULT_LIMITS, BlockLimits
from slack_block_builder.models.blocks import SectionBlock
from slack_block_builder.models.composition import Markdown, PlainText
from slack_block_builder.mrkdwn import convert_markdown_to_mrkdwn
from slack_block_builder.validation import require, validate_section


class SectionBuilder:
    """sectionブロックを組み立てるビルダー

    text（またはfields）と、任意のaccessory要素を1つ持つ。
    fieldsの数や文字数の上限はbuild()時にまとめて検証するため、
    組み立て途中で一時的に上限を超えてもエラーにはならない。
    """

    def __init__(self, limits: BlockLimits | None = None) -> None:
        self.block = SectionBlock()
        self._limits = limits or DEFAULT_LIMITS

    def block_id(self, block_id: str | None) -> Self:
        self.block.block_id = block_id
        return self

    def text(self, text: str, emoji: bool | None = None) -> Self:
        """本文をplain_textで設定する

        mrkdwn用に設定したexpandは解除する。

        Raises:
            MissingArgumentError: textがNoneの場合
        """
        require(text, "text")
        self.block.text = PlainText(text=text, emoji=emoji)
        self.block.expand = None
        return self

    def markdown(self, text: str, verbatim: bool = False, expand: bool = False) -> Self:
        """本文をmrkdwnで設定する

        Args:
            text: mrkdwn形式のテキスト
            verbatim: URLやメンションの自動変換を行わない場合はTrue
            expand: 長い本文を「もっと見る」で折りたたまずに表示する場合はTrue

        Raises:
            MissingArgumentError: textがNoneの場合
        """
        require(text, "text")
        self.block.text = Markdown(text=text, verbatim=verbatim)
        self.block.expand = expand or None
        return self

    def github_markdown(self, text: str, expand: bool = False) -> Self:
        """GitHub Markdownをmrkdwnに変換して本文に設定する"""
        require(text, "text")
        return self.markdown(convert_markdown_to_mrkdwn(text), expand=expand)

    def fields(self, *fields: str | PlainText | Markdown) -> Self:
        """fieldsをまとめて置き換える（文字列はplain_textになる）"""
        self.block.fields = list(fields)
        return self

    def add_text_field(self, text: str, emoji: bool | None = None) -> Self:
        require(text, "text")
        return self._add_field(PlainText(text=text, emoji=emoji))

    def add_markdown_field(self, text: str, verbatim: bool = False) -> Self:
        require(text, "text")
        return self._add_field(Markdown(text=text, verbatim=verbatim))

    def _add_field(self, field: PlainText | Markdown) -> Self:
        if self.block.fields is None:
            self.block.fields = []
        self.block.fields.append(field)
        return self

    def accessory(self, accessory: Any, configure: Callable[[Any], Any] | None = None) -> Self:
        """accessory要素を設定する（1つのみ。既存のものは置き換える）

        Args:
            accessory: 要素インスタンス、または要素クラス（新しいインスタンスを作成する）
            configure: 要素のビルダーを受け取り設定する関数

        Raises:
            MissingArgumentError: accessoryがNone、または要素クラスを渡してconfigureがNoneの場合
        """
        require(accessory, "accessory")
        if isinstance(accessory, type):
            require(configure, "configure")
            accessory = accessory()
        if configure is not None:
            configure(builder_for(accessory))
        self.block.accessory = accessory
        return self

    def expand(self, expand: bool = True) -> Self:
        """AIアシスタントのメッセージ等で、長い本文を常に展開表示するかを設定する"""
        self.block.expand = expand
        return self

    def build(self) -> SectionBlock:
        """sectionブロックを検証して返す

        Raises:
            BlockValidationError: fieldsが多すぎる、fieldやtextが長すぎる、block_idが長すぎる場合
        """
        validate_section(self.block, self._limits)
        return self.block
