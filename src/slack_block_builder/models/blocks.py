"""Slack Block Kit型定義（トップレベルのブロック）"""

from typing import Annotated, Any, Literal

from pydantic import Field, TypeAdapter

from slack_block_builder.models.composition import (
    BlockKitModel,
    Markdown,
    PlainText,
    PlainTextField,
    SlackFile,
    TextObject,
)
from slack_block_builder.models.elements import AccessoryElement, ActionElement, ImageElement, InputElement
from slack_block_builder.models.rich_text import RichTextBlock


class HeaderBlock(BlockKitModel):
    type: Literal["header"] = "header"
    block_id: str | None = None
    text: PlainTextField | None = None


class DividerBlock(BlockKitModel):
    type: Literal["divider"] = "divider"
    block_id: str | None = None


class SectionBlock(BlockKitModel):
    type: Literal["section"] = "section"
    block_id: str | None = None
    text: TextObject | None = None
    fields: list[TextObject] | None = None
    accessory: AccessoryElement | None = None
    expand: bool | None = None


class ActionsBlock(BlockKitModel):
    type: Literal["actions"] = "actions"
    block_id: str | None = None
    elements: list[ActionElement] = Field(default_factory=list)


class ContextBlock(BlockKitModel):
    type: Literal["context"] = "context"
    block_id: str | None = None
    elements: list[Annotated[PlainText | Markdown | ImageElement, Field(discriminator="type")]] = Field(
        default_factory=list
    )


class InputBlock(BlockKitModel):
    type: Literal["input"] = "input"
    block_id: str | None = None
    label: PlainTextField | None = None
    element: InputElement | None = None
    hint: PlainTextField | None = None
    optional: bool | None = None
    dispatch_action: bool | None = None


class ImageBlock(BlockKitModel):
    type: Literal["image"] = "image"
    block_id: str | None = None
    alt_text: str | None = None
    image_url: str | None = None
    slack_file: SlackFile | None = None
    title: PlainTextField | None = None


class VideoBlock(BlockKitModel):
    type: Literal["video"] = "video"
    block_id: str | None = None
    video_url: str | None = None
    thumbnail_url: str | None = None
    alt_text: str | None = None
    title: PlainTextField | None = None
    title_url: str | None = None
    description: PlainTextField | None = None
    provider_icon_url: str | None = None
    provider_name: str | None = None
    author_name: str | None = None


class FileBlock(BlockKitModel):
    type: Literal["file"] = "file"
    block_id: str | None = None
    external_id: str | None = None
    source: str = "remote"


class CallBlock(BlockKitModel):
    type: Literal["call"] = "call"
    block_id: str | None = None
    call_id: str | None = None


Block = (
    HeaderBlock
    | DividerBlock
    | SectionBlock
    | ActionsBlock
    | ContextBlock
    | InputBlock
    | RichTextBlock
    | ImageBlock
    | VideoBlock
    | FileBlock
    | CallBlock
)

_BLOCK_LIST_ADAPTER: TypeAdapter[list[Block]] = TypeAdapter(list[Annotated[Block, Field(discriminator="type")]])


def parse_blocks(payload: list[dict[str, Any]]) -> list[Block]:
    """JSON形式のブロック配列をモデルのリストに変換する

    Args:
        payload: Slack APIで受け取ったblocks配列

    Returns:
        ブロックモデルのリスト

    Raises:
        pydantic.ValidationError: 未知のtypeや不正な値が含まれる場合
    """
    return _BLOCK_LIST_ADAPTER.validate_python(payload)


def dump_blocks(blocks: list[Block]) -> list[dict[str, Any]]:
    """ブロックのリストをSlack APIに渡せるdictの配列に変換する（Noneのフィールドは省く）"""
    return [block.model_dump(exclude_none=True) for block in blocks]
