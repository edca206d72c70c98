"""actionsブロック用のビルダー"""

from collections.abc import Callable
from typing import Any, Self, TypeVar

from slack_block_builder.builders.buttons import ButtonStyle
from slack_block_builder.builders.registry import builder_for
from slack_block_builder.limits import DEFAULT_LIMITS, BlockLimits
from slack_block_builder.models.blocks import ActionsBlock
from slack_block_builder.models.elements import (
    Button,
    ChannelsSelect,
    Checkboxes,
    ConversationsSelect,
    DatePicker,
    DateTimePicker,
    ExternalSelect,
    Identifiable,
    MultiChannelsSelect,
    MultiConversationsSelect,
    MultiExternalSelect,
    MultiStaticSelect,
    MultiUsersSelect,
    Overflow,
    RadioButtons,
    StaticSelect,
    TimePicker,
    UsersSelect,
)
from slack_block_builder.validation import require, validate_actions

ElementT = TypeVar("ElementT", bound=Identifiable)

Configure = Callable[[Any], Any] | None


class ActionsBlockBuilder:
    """actionsブロック（ボタンやメニューを横に並べたもの）を組み立てるビルダー

    要素の追加はadd_element()に集約しており、add_button()等はその薄いラッパー。
    要素数の上限はbuild()時に検証する。
    """

    def __init__(self, limits: BlockLimits | None = None) -> None:
        self.block = ActionsBlock()
        self._limits = limits or DEFAULT_LIMITS

    def block_id(self, block_id: str | None) -> Self:
        self.block.block_id = block_id
        return self

    def add_element(
        self,
        action_id: str | None,
        element: ElementT | type[ElementT],
        configure: Configure = None,
    ) -> Self:
        """要素を追加する

        Args:
            action_id: 要素のaction_id
            element: 要素インスタンス、または要素クラス（新しいインスタンスを作成する）
            configure: 要素のビルダー（ButtonBuilder等）を受け取り設定する関数

        Returns:
            同じビルダー（メソッドチェーン用）

        Raises:
            MissingArgumentError: elementがNoneの場合
        """
        require(element, "element")
        instance = element() if isinstance(element, type) else element
        instance.action_id = action_id
        if configure is not None:
            configure(builder_for(instance))
        self.block.elements.append(instance)
        return self

    def add_button(
        self,
        action_id: str,
        text: str | None = None,
        *,
        style: ButtonStyle | None = None,
        url: str | None = None,
        value: str | None = None,
        configure: Configure = None,
    ) -> Self:
        """ボタンを追加する

        Args:
            action_id: ボタンのaction_id
            text: ボタンのラベル
            style: primary / danger（Noneはデフォルト）
            url: クリック時に開くURL
            value: インタラクションのペイロードに含める値
            configure: ButtonBuilderを受け取り、さらに設定する関数
        """
        button = Button(text=text, style=style, url=url, value=value)
        return self.add_element(action_id, button, configure)

    def add_overflow(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, Overflow, configure)

    def add_checkboxes(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, Checkboxes, configure)

    def add_radio_buttons(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, RadioButtons, configure)

    def add_date_picker(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, DatePicker, configure)

    def add_time_picker(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, TimePicker, configure)

    def add_date_time_picker(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, DateTimePicker, configure)

    def add_static_select(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, StaticSelect, configure)

    def add_external_select(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, ExternalSelect, configure)

    def add_users_select(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, UsersSelect, configure)

    def add_conversations_select(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, ConversationsSelect, configure)

    def add_channels_select(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, ChannelsSelect, configure)

    def add_multi_static_select(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, MultiStaticSelect, configure)

    def add_multi_external_select(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, MultiExternalSelect, configure)

    def add_multi_users_select(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, MultiUsersSelect, configure)

    def add_multi_conversations_select(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, MultiConversationsSelect, configure)

    def add_multi_channels_select(self, action_id: str, configure: Configure = None) -> Self:
        return self.add_element(action_id, MultiChannelsSelect, configure)

    def build(self) -> ActionsBlock:
        """actionsブロックを検証して返す

        Raises:
            BlockValidationError: 要素数が上限を超える、またはblock_idが長すぎる場合
        """
        validate_actions(self.block, self._limits)
        return self.block
