"""Block Kitビルダー"""

from slack_block_builder.builders.actions import ActionsBlockBuilder
from slack_block_builder.builders.block_builder import BlockBuilder
from slack_block_builder.builders.buttons import ButtonBuilder, OverflowBuilder
from slack_block_builder.builders.choices import CheckboxesBuilder, RadioButtonsBuilder
from slack_block_builder.builders.context import ContextBlockBuilder
from slack_block_builder.builders.element import ElementBuilder
from slack_block_builder.builders.input_block import InputBlockBuilder, create_input_block_builder
from slack_block_builder.builders.option_group import OptionGroupBuilder
from slack_block_builder.builders.pickers import DatePickerBuilder, DateTimePickerBuilder, TimePickerBuilder
from slack_block_builder.builders.registry import builder_class_for, builder_for
from slack_block_builder.builders.rich_text import RichTextBuilder, RichTextListBuilder, RichTextSectionBuilder
from slack_block_builder.builders.section import SectionBuilder
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

__all__ = [
    "ActionsBlockBuilder",
    "BlockBuilder",
    "ButtonBuilder",
    "ChannelsSelectBuilder",
    "CheckboxesBuilder",
    "ContextBlockBuilder",
    "ConversationsSelectBuilder",
    "DatePickerBuilder",
    "DateTimePickerBuilder",
    "ElementBuilder",
    "EmailInputBuilder",
    "ExternalSelectBuilder",
    "InputBlockBuilder",
    "MultiChannelsSelectBuilder",
    "MultiConversationsSelectBuilder",
    "MultiExternalSelectBuilder",
    "MultiStaticSelectBuilder",
    "MultiUsersSelectBuilder",
    "NumberInputBuilder",
    "OptionGroupBuilder",
    "OverflowBuilder",
    "PlainTextInputBuilder",
    "RadioButtonsBuilder",
    "RichTextBuilder",
    "RichTextInputBuilder",
    "RichTextListBuilder",
    "RichTextSectionBuilder",
    "SectionBuilder",
    "StaticSelectBuilder",
    "TimePickerBuilder",
    "UrlInputBuilder",
    "UsersSelectBuilder",
    "builder_class_for",
    "builder_for",
    "create_input_block_builder",
]
