"""button / overflowメニュー用のビルダー"""

from typing import Literal, Self

from slack_block_builder.builders.element import ConfirmableBuilder, IdentifiableBuilder, OptionsBuilder
from slack_block_builder.models.composition import Option, PlainText
from slack_block_builder.models.elements import Button, Overflow

ButtonStyle = Literal["primary", "danger"]


class ButtonBuilder(IdentifiableBuilder[Button], ConfirmableBuilder[Button]):
    def text(self, text: str | PlainText) -> Self:
        self.element.text = text
        return self

    def url(self, url: str | None) -> Self:
        self.element.url = url
        return self

    def value(self, value: str | None) -> Self:
        self.element.value = value
        return self

    def style(self, style: ButtonStyle | None) -> Self:
        """ボタンの見た目を設定する（Noneはデフォルトのスタイル）"""
        self.element.style = style
        return self

    def accessibility_label(self, label: str | None) -> Self:
        self.element.accessibility_label = label
        return self


class OverflowBuilder(IdentifiableBuilder[Overflow], ConfirmableBuilder[Overflow], OptionsBuilder[Overflow]):
    def add_option(
        self,
        value: str,
        text: str | PlainText,
        description: str | PlainText | None = None,
        url: str | None = None,
    ) -> Self:
        """メニュー項目を追加する（urlを指定すると選択時にそのURLを開く）"""
        return self.add_prepared_option(Option(value=value, text=text, description=description, url=url))
