"""セレクトメニュー用のビルダー"""

from collections.abc import Callable, Iterable
from typing import Any, Literal, Self, TypeVar

from slack_block_builder.builders.element import (
    ConfirmableBuilder,
    ElementBuilder,
    FocusableBuilder,
    IdentifiableBuilder,
    MaxSelectedItemsBuilder,
    MultiSelectionBuilder,
    OptionsBuilder,
    PlaceholderBuilder,
    SingleSelectionBuilder,
)
from slack_block_builder.builders.option_group import OptionGroupBuilder
from slack_block_builder.models.composition import ConversationFilter, Option, OptionGroup, PlainText
from slack_block_builder.models.elements import (
    ChannelsSelect,
    ConversationsSelect,
    ExternalSelect,
    MultiChannelsSelect,
    MultiConversationsSelect,
    MultiExternalSelect,
    MultiStaticSelect,
    MultiUsersSelect,
    StaticSelect,
    UsersSelect,
)
from slack_block_builder.validation import require

ConversationType = Literal["im", "mpim", "private", "public"]

S = TypeVar("S")


class OptionGroupsBuilder(ElementBuilder[S]):
    """option_groupsを持つ静的セレクトメニュー向け"""

    def add_option_group(
        self,
        label: str | PlainText,
        options: Iterable[Option] | Callable[[OptionGroupBuilder], Any],
    ) -> Self:
        """選択肢のグループを追加する

        Args:
            label: グループの見出し
            options: グループに含めるOptionの列、またはOptionGroupBuilderを受け取る設定関数
        """
        require(options, "options")
        group = OptionGroup(label=label)
        if callable(options):
            options(OptionGroupBuilder(group))
        else:
            group.options = list(options)
        if self.element.option_groups is None:  # type: ignore[attr-defined]
            self.element.option_groups = []  # type: ignore[attr-defined]
        self.element.option_groups.append(group)  # type: ignore[attr-defined]
        return self


class MinQueryLengthBuilder(ElementBuilder[S]):
    def min_query_length(self, min_query_length: int) -> Self:
        """外部データソースへ問い合わせるまでに必要な入力文字数を設定する"""
        self.element.min_query_length = min_query_length  # type: ignore[attr-defined]
        return self


class ConversationFilterBuilder(ElementBuilder[S]):
    """会話の種類で候補を絞り込めるメニュー向け"""

    def default_to_current_conversation(self, default: bool = True) -> Self:
        self.element.default_to_current_conversation = default  # type: ignore[attr-defined]
        return self

    def filter(self, configure: Callable[[ConversationFilter], Any]) -> Self:
        """絞り込み条件を設定する（未設定なら新規作成して渡す）"""
        require(configure, "configure")
        if self.element.filter is None:  # type: ignore[attr-defined]
            self.element.filter = ConversationFilter()  # type: ignore[attr-defined]
        configure(self.element.filter)  # type: ignore[attr-defined]
        return self

    def include(self, *types: ConversationType) -> Self:
        def _include(conversation_filter: ConversationFilter) -> None:
            conversation_filter.include = [*(conversation_filter.include or []), *types]

        return self.filter(_include)

    def exclude_external_shared_channels(self, exclude: bool = True) -> Self:
        return self.filter(lambda f: setattr(f, "exclude_external_shared_channels", exclude))

    def exclude_bot_users(self, exclude: bool = True) -> Self:
        return self.filter(lambda f: setattr(f, "exclude_bot_users", exclude))


class _SelectMenuBuilder(
    IdentifiableBuilder[S],
    ConfirmableBuilder[S],  # type: ignore[type-var]
    FocusableBuilder[S],  # type: ignore[type-var]
    PlaceholderBuilder[S],  # type: ignore[type-var]
):
    """全セレクトメニュー共通の操作"""


class StaticSelectBuilder(
    _SelectMenuBuilder[StaticSelect],
    OptionsBuilder[StaticSelect],
    OptionGroupsBuilder[StaticSelect],
    SingleSelectionBuilder[StaticSelect],
):
    pass


class MultiStaticSelectBuilder(
    _SelectMenuBuilder[MultiStaticSelect],
    OptionsBuilder[MultiStaticSelect],
    OptionGroupsBuilder[MultiStaticSelect],
    MultiSelectionBuilder[MultiStaticSelect],
    MaxSelectedItemsBuilder[MultiStaticSelect],
):
    pass


class ExternalSelectBuilder(_SelectMenuBuilder[ExternalSelect], MinQueryLengthBuilder[ExternalSelect]):
    def initial_option(self, option: Option | None) -> Self:
        """初期選択を設定する（選択肢は外部から取得するため、Optionをそのまま渡す）"""
        self.element.initial_option = option
        return self


class MultiExternalSelectBuilder(
    _SelectMenuBuilder[MultiExternalSelect],
    MinQueryLengthBuilder[MultiExternalSelect],
    MaxSelectedItemsBuilder[MultiExternalSelect],
):
    def initial_options(self, options: Iterable[Option] | None) -> Self:
        self.element.initial_options = list(options) if options is not None else None
        return self


class UsersSelectBuilder(_SelectMenuBuilder[UsersSelect]):
    def initial_user(self, user_id: str | None) -> Self:
        self.element.initial_user = user_id
        return self


class MultiUsersSelectBuilder(_SelectMenuBuilder[MultiUsersSelect], MaxSelectedItemsBuilder[MultiUsersSelect]):
    def initial_users(self, *user_ids: str) -> Self:
        self.element.initial_users = list(user_ids)
        return self


class ConversationsSelectBuilder(
    _SelectMenuBuilder[ConversationsSelect],
    ConversationFilterBuilder[ConversationsSelect],
):
    def initial_conversation(self, conversation_id: str | None) -> Self:
        self.element.initial_conversation = conversation_id
        return self

    def response_url_enabled(self, enabled: bool = True) -> Self:
        self.element.response_url_enabled = enabled
        return self


class MultiConversationsSelectBuilder(
    _SelectMenuBuilder[MultiConversationsSelect],
    ConversationFilterBuilder[MultiConversationsSelect],
    MaxSelectedItemsBuilder[MultiConversationsSelect],
):
    def initial_conversations(self, *conversation_ids: str) -> Self:
        self.element.initial_conversations = list(conversation_ids)
        return self


class ChannelsSelectBuilder(_SelectMenuBuilder[ChannelsSelect]):
    def initial_channel(self, channel_id: str | None) -> Self:
        self.element.initial_channel = channel_id
        return self

    def response_url_enabled(self, enabled: bool = True) -> Self:
        self.element.response_url_enabled = enabled
        return self


class MultiChannelsSelectBuilder(
    _SelectMenuBuilder[MultiChannelsSelect],
    MaxSelectedItemsBuilder[MultiChannelsSelect],
):
    def initial_channels(self, *channel_ids: str) -> Self:
        self.element.initial_channels = list(channel_ids)
        return self
