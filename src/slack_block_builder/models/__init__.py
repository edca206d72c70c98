"""Block Kitのデータモデル"""

from slack_block_builder.models.blocks import (
    ActionsBlock,
    Block,
    CallBlock,
    ContextBlock,
    DividerBlock,
    FileBlock,
    HeaderBlock,
    ImageBlock,
    InputBlock,
    SectionBlock,
    VideoBlock,
    dump_blocks,
    parse_blocks,
)
from slack_block_builder.models.composition import (
    BlockKitModel,
    ConfirmationDialog,
    ConversationFilter,
    DispatchActionConfig,
    Markdown,
    Option,
    OptionGroup,
    PlainText,
    SlackFile,
)
from slack_block_builder.models.elements import (
    Button,
    ChannelsSelect,
    Checkboxes,
    Confirmable,
    ConversationsSelect,
    DatePicker,
    DateTimePicker,
    EmailInput,
    ExternalSelect,
    Focusable,
    HasPlaceholder,
    Identifiable,
    ImageElement,
    MultiChannelsSelect,
    MultiConversationsSelect,
    MultiExternalSelect,
    MultiStaticSelect,
    MultiUsersSelect,
    NumberInput,
    Optionable,
    Overflow,
    PlainTextInput,
    RadioButtons,
    RichTextInput,
    StaticSelect,
    TimePicker,
    UrlInput,
    UsersSelect,
)
from slack_block_builder.models.rich_text import (
    RichTextBlock,
    RichTextBroadcast,
    RichTextChannel,
    RichTextEmoji,
    RichTextLink,
    RichTextList,
    RichTextPreformatted,
    RichTextQuote,
    RichTextSection,
    RichTextStyle,
    RichTextText,
    RichTextUser,
    RichTextUserGroup,
)

__all__ = [
    "ActionsBlock",
    "Block",
    "BlockKitModel",
    "Button",
    "CallBlock",
    "ChannelsSelect",
    "Checkboxes",
    "Confirmable",
    "ConfirmationDialog",
    "ContextBlock",
    "ConversationFilter",
    "ConversationsSelect",
    "DatePicker",
    "DateTimePicker",
    "DispatchActionConfig",
    "DividerBlock",
    "EmailInput",
    "ExternalSelect",
    "FileBlock",
    "Focusable",
    "HasPlaceholder",
    "HeaderBlock",
    "Identifiable",
    "ImageBlock",
    "ImageElement",
    "InputBlock",
    "Markdown",
    "MultiChannelsSelect",
    "MultiConversationsSelect",
    "MultiExternalSelect",
    "MultiStaticSelect",
    "MultiUsersSelect",
    "NumberInput",
    "Option",
    "OptionGroup",
    "Optionable",
    "Overflow",
    "PlainText",
    "PlainTextInput",
    "RadioButtons",
    "RichTextBlock",
    "RichTextBroadcast",
    "RichTextChannel",
    "RichTextEmoji",
    "RichTextInput",
    "RichTextLink",
    "RichTextList",
    "RichTextPreformatted",
    "RichTextQuote",
    "RichTextSection",
    "RichTextStyle",
    "RichTextText",
    "RichTextUser",
    "RichTextUserGroup",
    "SectionBlock",
    "SlackFile",
    "StaticSelect",
    "TimePicker",
    "UrlInput",
    "UsersSelect",
    "VideoBlock",
    "dump_blocks",
    "parse_blocks",
]
