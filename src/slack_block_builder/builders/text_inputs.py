"""テキスト入力系要素用のビルダー"""

from typing import Literal, Self, TypeVar

from slack_block_builder.builders.element import (
    ElementBuilder,
    FocusableBuilder,
    IdentifiableBuilder,
    PlaceholderBuilder,
)
from slack_block_builder.models.composition import DispatchActionConfig
from slack_block_builder.models.elements import EmailInput, NumberInput, PlainTextInput, RichTextInput, UrlInput
from slack_block_builder.models.rich_text import RichTextBlock

TriggerAction = Literal["on_enter_pressed", "on_character_entered"]

T = TypeVar("T")


class _TextInputBuilder(
    IdentifiableBuilder[T],
    FocusableBuilder[T],  # type: ignore[type-var]
    PlaceholderBuilder[T],  # type: ignore[type-var]
):
    """テキスト入力系要素に共通する操作"""

    def dispatch_on(self, *triggers: TriggerAction) -> Self:
        """block_actionsを送信するタイミングを設定する"""
        self.element.dispatch_action_config = DispatchActionConfig(trigger_actions_on=list(triggers))  # type: ignore[attr-defined]
        return self


class _InitialValueBuilder(ElementBuilder[T]):
    def initial_value(self, value: str | None) -> Self:
        self.element.initial_value = value  # type: ignore[attr-defined]
        return self


class PlainTextInputBuilder(_TextInputBuilder[PlainTextInput], _InitialValueBuilder[PlainTextInput]):
    def multiline(self, multiline: bool = True) -> Self:
        self.element.multiline = multiline
        return self

    def min_length(self, min_length: int) -> Self:
        self.element.min_length = min_length
        return self

    def max_length(self, max_length: int) -> Self:
        self.element.max_length = max_length
        return self


class EmailInputBuilder(_TextInputBuilder[EmailInput], _InitialValueBuilder[EmailInput]):
    pass


class UrlInputBuilder(_TextInputBuilder[UrlInput], _InitialValueBuilder[UrlInput]):
    pass


class NumberInputBuilder(_TextInputBuilder[NumberInput]):
    def decimal_allowed(self, allowed: bool = True) -> Self:
        self.element.is_decimal_allowed = allowed
        return self

    def initial_value(self, value: int | float | str | None) -> Self:
        self.element.initial_value = None if value is None else str(value)
        return self

    def min_value(self, value: int | float | str | None) -> Self:
        self.element.min_value = None if value is None else str(value)
        return self

    def max_value(self, value: int | float | str | None) -> Self:
        self.element.max_value = None if value is None else str(value)
        return self


class RichTextInputBuilder(_TextInputBuilder[RichTextInput]):
    def initial_value(self, value: RichTextBlock | None) -> Self:
        self.element.initial_value = value
        return self
