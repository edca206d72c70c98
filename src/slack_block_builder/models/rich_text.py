"""rich_textブロックを構成する要素"""

from typing import Annotated, Literal

from pydantic import Field

from slack_block_builder.models.composition import BlockKitModel


class RichTextStyle(BlockKitModel):
    bold: bool | None = None
    italic: bool | None = None
    strike: bool | None = None
    code: bool | None = None


class RichTextText(BlockKitModel):
    type: Literal["text"] = "text"
    text: str
    style: RichTextStyle | None = None


class RichTextLink(BlockKitModel):
    type: Literal["link"] = "link"
    url: str
    text: str | None = None
    style: RichTextStyle | None = None


class RichTextEmoji(BlockKitModel):
    type: Literal["emoji"] = "emoji"
    name: str


class RichTextUser(BlockKitModel):
    type: Literal["user"] = "user"
    user_id: str


class RichTextChannel(BlockKitModel):
    type: Literal["channel"] = "channel"
    channel_id: str


class RichTextUserGroup(BlockKitModel):
    type: Literal["usergroup"] = "usergroup"
    usergroup_id: str


class RichTextBroadcast(BlockKitModel):
    type: Literal["broadcast"] = "broadcast"
    range: Literal["here", "channel", "everyone"]


RichTextSectionElement = Annotated[
    RichTextText | RichTextLink | RichTextEmoji | RichTextUser | RichTextChannel | RichTextUserGroup | RichTextBroadcast,
    Field(discriminator="type"),
]


class RichTextSection(BlockKitModel):
    type: Literal["rich_text_section"] = "rich_text_section"
    elements: list[RichTextSectionElement] = Field(default_factory=list)


class RichTextList(BlockKitModel):
    type: Literal["rich_text_list"] = "rich_text_list"
    style: Literal["bullet", "ordered"]
    elements: list[RichTextSection] = Field(default_factory=list)
    indent: int | None = None
    offset: int | None = None
    border: int | None = None


class RichTextPreformatted(BlockKitModel):
    type: Literal["rich_text_preformatted"] = "rich_text_preformatted"
    elements: list[RichTextSectionElement] = Field(default_factory=list)
    border: int | None = None


class RichTextQuote(BlockKitModel):
    type: Literal["rich_text_quote"] = "rich_text_quote"
    elements: list[RichTextSectionElement] = Field(default_factory=list)
    border: int | None = None


RichTextObject = Annotated[
    RichTextSection | RichTextList | RichTextPreformatted | RichTextQuote,
    Field(discriminator="type"),
]


class RichTextBlock(BlockKitModel):
    type: Literal["rich_text"] = "rich_text"
    block_id: str | None = None
    elements: list[RichTextObject] = Field(default_factory=list)
