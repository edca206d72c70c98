"""inputブロック用のビルダー

InputBlockBuilderは要素ごとのビルダー（PlainTextInputBuilder等）と組み合わせて使う。
create_input_block_builder()が両方を継承したクラスを作るため、
要素の設定（placeholder等）とブロックの設定（hint等）を同じオブジェクトにチェーンできる。
"""

from functools import cache
from typing import Any, Self, TypeVar

from slack_block_builder.builders.element import ElementBuilder
from slack_block_builder.builders.registry import builder_class_for
from slack_block_builder.limits import DEFAULT_LIMITS, BlockLimits
from slack_block_builder.models.blocks import InputBlock
from slack_block_builder.models.composition import PlainText
from slack_block_builder.validation import validate_input

E = TypeVar("E")


class InputBlockBuilder(ElementBuilder[E]):
    """1つの入力要素を持つinputブロックを組み立てるビルダー"""

    def __init__(self, element: E, label: str | PlainText, limits: BlockLimits | None = None) -> None:
        super().__init__(element)
        self.block = InputBlock(label=label, element=element)
        self._limits = limits or DEFAULT_LIMITS

    def label(self, label: str | PlainText) -> Self:
        self.block.label = label
        return self

    def block_id(self, block_id: str | None) -> Self:
        self.block.block_id = block_id
        return self

    def hint(self, hint: str | PlainText | None) -> Self:
        """入力欄の下に表示する補足テキストを設定する"""
        self.block.hint = hint
        return self

    def optional(self, optional: bool = True) -> Self:
        """未入力でも送信できるようにする"""
        self.block.optional = optional
        return self

    def dispatch_action(self, dispatch: bool = True) -> Self:
        """値の入力・選択時にblock_actionsを送信するかを設定する"""
        self.block.dispatch_action = dispatch
        return self

    def build(self) -> InputBlock:
        """inputブロックを検証して返す

        Raises:
            BlockValidationError: block_id・label・hintが長すぎる場合
        """
        validate_input(self.block, self._limits)
        return self.block


@cache
def input_block_builder_class(element_type: type) -> type[InputBlockBuilder[Any]]:
    """要素の型に対応するビルダーとInputBlockBuilderを合成したクラスを返す"""
    element_builder = builder_class_for(element_type)
    return type(f"{element_type.__name__}InputBlockBuilder", (InputBlockBuilder, element_builder), {})


def create_input_block_builder(
    element: Any,
    label: str | PlainText,
    limits: BlockLimits | None = None,
) -> InputBlockBuilder[Any]:
    """要素を包んだInputBlockBuilderを作成する"""
    return input_block_builder_class(type(element))(element, label, limits)
