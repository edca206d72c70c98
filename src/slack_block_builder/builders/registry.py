"""要素の型から対応するビルダーを引く"""

from typing import Any

from slack_block_builder.builders.buttons import ButtonBuilder, OverflowBuilder
from slack_block_builder.builders.choices import CheckboxesBuilder, RadioButtonsBuilder
from slack_block_builder.builders.element import ElementBuilder
from slack_block_builder.builders.pickers import DatePickerBuilder, DateTimePickerBuilder, TimePickerBuilder
from slack_block_builder.builders.selects import (
    ChannelsSelectBuilder,
    ConversationsSelectBuilder,
    ExternalSelectBuilder,
    MultiChannelsSelectBuilder,
    MultiConversationsSelectBuilder,
    MultiExternalSelectBuilder,
    MultiStaticSelectBuilder,
    MultiUsersSelectBuilder,
    StaticSelectBuilder,
    UsersSelectBuilder,
)
from slack_block_builder.builders.text_inputs import (
    EmailInputBuilder,
    NumberInputBuilder,
    PlainTextInputBuilder,
    RichTextInputBuilder,
    UrlInputBuilder,
)
from slack_block_builder.models.elements import (
    Button,
    ChannelsSelect,
    Checkboxes,
    ConversationsSelect,
    DatePicker,
    DateTimePicker,
    EmailInput,
    ExternalSelect,
    MultiChannelsSelect,
    MultiConversationsSelect,
    MultiExternalSelect,
    MultiStaticSelect,
    MultiUsersSelect,
    NumberInput,
    Overflow,
    PlainTextInput,
    RadioButtons,
    RichTextInput,
    StaticSelect,
    TimePicker,
    UrlInput,
    UsersSelect,
)

ELEMENT_BUILDERS: dict[type, type[ElementBuilder[Any]]] = {
    Button: ButtonBuilder,
    Overflow: OverflowBuilder,
    Checkboxes: CheckboxesBuilder,
    RadioButtons: RadioButtonsBuilder,
    DatePicker: DatePickerBuilder,
    TimePicker: TimePickerBuilder,
    DateTimePicker: DateTimePickerBuilder,
    StaticSelect: StaticSelectBuilder,
    MultiStaticSelect: MultiStaticSelectBuilder,
    ExternalSelect: ExternalSelectBuilder,
    MultiExternalSelect: MultiExternalSelectBuilder,
    UsersSelect: UsersSelectBuilder,
    MultiUsersSelect: MultiUsersSelectBuilder,
    ConversationsSelect: ConversationsSelectBuilder,
    MultiConversationsSelect: MultiConversationsSelectBuilder,
    ChannelsSelect: ChannelsSelectBuilder,
    MultiChannelsSelect: MultiChannelsSelectBuilder,
    PlainTextInput: PlainTextInputBuilder,
    EmailInput: EmailInputBuilder,
    UrlInput: UrlInputBuilder,
    NumberInput: NumberInputBuilder,
    RichTextInput: RichTextInputBuilder,
}


def builder_class_for(element_type: type) -> type[ElementBuilder[Any]]:
    """要素の型に対応するビルダークラスを返す（専用ビルダーがなければElementBuilder）"""
    for cls in element_type.__mro__:
        if cls in ELEMENT_BUILDERS:
            return ELEMENT_BUILDERS[cls]
    return ElementBuilder


def builder_for(element: Any) -> ElementBuilder[Any]:
    """要素インスタンスを対応するビルダーで包んで返す"""
    return builder_class_for(type(element))(element)
