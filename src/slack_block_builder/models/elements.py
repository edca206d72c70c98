"""Block Kitのインタラクティブ要素

要素ごとに共通する性質（capability）はmixinとして定義し、
各要素クラスは持っているcapabilityだけを継承する。
"""

from typing import Annotated, Literal

from pydantic import Field

from slack_block_builder.models.composition import (
    BlockKitModel,
    ConfirmationDialog,
    ConversationFilter,
    DispatchActionConfig,
    Option,
    OptionGroup,
    PlainTextField,
    SlackFile,
)
from slack_block_builder.models.rich_text import RichTextBlock

# --- capabilities ---


class Identifiable(BlockKitModel):
    """action_idを持つ要素"""

    action_id: str | None = None


class Focusable(BlockKitModel):
    """表示時に入力フォーカスを要求できる要素"""

    focus_on_load: bool | None = None


class Confirmable(BlockKitModel):
    """確認ダイアログを付けられる要素"""

    confirm: ConfirmationDialog | None = None


class HasPlaceholder(BlockKitModel):
    """プレースホルダーを持つ要素"""

    placeholder: PlainTextField | None = None


class Optionable(BlockKitModel):
    """選択肢のリストを持つ要素"""

    options: list[Option] | None = None


# --- buttons / menus ---


class Button(Identifiable, Confirmable):
    type: Literal["button"] = "button"
    text: PlainTextField | None = None
    value: str | None = None
    url: str | None = None
    style: Literal["primary", "danger"] | None = None
    accessibility_label: str | None = None


class Overflow(Identifiable, Confirmable, Optionable):
    type: Literal["overflow"] = "overflow"


class Checkboxes(Identifiable, Confirmable, Focusable, Optionable):
    type: Literal["checkboxes"] = "checkboxes"
    initial_options: list[Option] | None = None


class RadioButtons(Identifiable, Confirmable, Focusable, Optionable):
    type: Literal["radio_buttons"] = "radio_buttons"
    initial_option: Option | None = None


# --- date / time ---


class DatePicker(Identifiable, Confirmable, Focusable, HasPlaceholder):
    type: Literal["datepicker"] = "datepicker"
    initial_date: str | None = None


class TimePicker(Identifiable, Confirmable, Focusable, HasPlaceholder):
    type: Literal["timepicker"] = "timepicker"
    initial_time: str | None = None
    timezone: str | None = None


class DateTimePicker(Identifiable, Confirmable, Focusable):
    type: Literal["datetimepicker"] = "datetimepicker"
    initial_date_time: int | None = None


# --- select menus ---


class StaticSelect(Identifiable, Confirmable, Focusable, HasPlaceholder, Optionable):
    type: Literal["static_select"] = "static_select"
    option_groups: list[OptionGroup] | None = None
    initial_option: Option | None = None


class MultiStaticSelect(Identifiable, Confirmable, Focusable, HasPlaceholder, Optionable):
    type: Literal["multi_static_select"] = "multi_static_select"
    option_groups: list[OptionGroup] | None = None
    initial_options: list[Option] | None = None
    max_selected_items: int | None = None


class ExternalSelect(Identifiable, Confirmable, Focusable, HasPlaceholder):
    type: Literal["external_select"] = "external_select"
    initial_option: Option | None = None
    min_query_length: int | None = None


class MultiExternalSelect(Identifiable, Confirmable, Focusable, HasPlaceholder):
    type: Literal["multi_external_select"] = "multi_external_select"
    initial_options: list[Option] | None = None
    min_query_length: int | None = None
    max_selected_items: int | None = None


class UsersSelect(Identifiable, Confirmable, Focusable, HasPlaceholder):
    type: Literal["users_select"] = "users_select"
    initial_user: str | None = None


class MultiUsersSelect(Identifiable, Confirmable, Focusable, HasPlaceholder):
    type: Literal["multi_users_select"] = "multi_users_select"
    initial_users: list[str] | None = None
    max_selected_items: int | None = None


class ConversationsSelect(Identifiable, Confirmable, Focusable, HasPlaceholder):
    type: Literal["conversations_select"] = "conversations_select"
    initial_conversation: str | None = None
    default_to_current_conversation: bool | None = None
    response_url_enabled: bool | None = None
    filter: ConversationFilter | None = None


class MultiConversationsSelect(Identifiable, Confirmable, Focusable, HasPlaceholder):
    type: Literal["multi_conversations_select"] = "multi_conversations_select"
    initial_conversations: list[str] | None = None
    default_to_current_conversation: bool | None = None
    max_selected_items: int | None = None
    filter: ConversationFilter | None = None


class ChannelsSelect(Identifiable, Confirmable, Focusable, HasPlaceholder):
    type: Literal["channels_select"] = "channels_select"
    initial_channel: str | None = None
    response_url_enabled: bool | None = None


class MultiChannelsSelect(Identifiable, Confirmable, Focusable, HasPlaceholder):
    type: Literal["multi_channels_select"] = "multi_channels_select"
    initial_channels: list[str] | None = None
    max_selected_items: int | None = None


# --- text inputs ---


class PlainTextInput(Identifiable, Focusable, HasPlaceholder):
    type: Literal["plain_text_input"] = "plain_text_input"
    initial_value: str | None = None
    multiline: bool | None = None
    min_length: int | None = None
    max_length: int | None = None
    dispatch_action_config: DispatchActionConfig | None = None


class EmailInput(Identifiable, Focusable, HasPlaceholder):
    type: Literal["email_text_input"] = "email_text_input"
    initial_value: str | None = None
    dispatch_action_config: DispatchActionConfig | None = None


class UrlInput(Identifiable, Focusable, HasPlaceholder):
    type: Literal["url_text_input"] = "url_text_input"
    initial_value: str | None = None
    dispatch_action_config: DispatchActionConfig | None = None


class NumberInput(Identifiable, Focusable, HasPlaceholder):
    type: Literal["number_input"] = "number_input"
    is_decimal_allowed: bool = False
    initial_value: str | None = None
    min_value: str | None = None
    max_value: str | None = None
    dispatch_action_config: DispatchActionConfig | None = None


class RichTextInput(Identifiable, Focusable, HasPlaceholder):
    type: Literal["rich_text_input"] = "rich_text_input"
    initial_value: RichTextBlock | None = None
    dispatch_action_config: DispatchActionConfig | None = None


# --- display ---


class ImageElement(BlockKitModel):
    """section/contextに置く画像要素（image_urlかslack_fileのどちらか）"""

    type: Literal["image"] = "image"
    alt_text: str | None = None
    image_url: str | None = None
    slack_file: SlackFile | None = None


ActionElement = Annotated[
    Button
    | Overflow
    | Checkboxes
    | RadioButtons
    | DatePicker
    | TimePicker
    | DateTimePicker
    | StaticSelect
    | MultiStaticSelect
    | ExternalSelect
    | MultiExternalSelect
    | UsersSelect
    | MultiUsersSelect
    | ConversationsSelect
    | MultiConversationsSelect
    | ChannelsSelect
    | MultiChannelsSelect
    | RichTextInput,
    Field(discriminator="type"),
]

InputElement = Annotated[
    Checkboxes
    | RadioButtons
    | DatePicker
    | TimePicker
    | DateTimePicker
    | StaticSelect
    | MultiStaticSelect
    | ExternalSelect
    | MultiExternalSelect
    | UsersSelect
    | MultiUsersSelect
    | ConversationsSelect
    | MultiConversationsSelect
    | ChannelsSelect
    | MultiChannelsSelect
    | PlainTextInput
    | EmailInput
    | UrlInput
    | NumberInput
    | RichTextInput,
    Field(discriminator="type"),
]

AccessoryElement = Annotated[
    Button
    | Overflow
    | Checkboxes
    | RadioButtons
    | DatePicker
    | TimePicker
    | DateTimePicker
    | StaticSelect
    | MultiStaticSelect
    | ExternalSelect
    | MultiExternalSelect
    | UsersSelect
    | MultiUsersSelect
    | ConversationsSelect
    | MultiConversationsSelect
    | ChannelsSelect
    | MultiChannelsSelect
    | ImageElement,
    Field(discriminator="type"),
]
