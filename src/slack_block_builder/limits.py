"""Slackプラットフォームが定めるBlock Kitの上限値"""

from pydantic import BaseModel, Field


class BlockLimits(BaseModel):
    """ブロック構造の上限値

    https://api.slack.com/reference/block-kit/blocks の記載値をデフォルトとする。
    """

    max_block_id_length: int = Field(default=255, gt=0, description="block_idの最大文字数")
    max_context_elements: int = Field(default=10, gt=0, description="contextブロックの最大要素数")
    max_section_fields: int = Field(default=10, gt=0, description="sectionブロックの最大fields数")
    max_field_length: int = Field(default=2000, gt=0, description="sectionの各fieldの最大文字数")
    max_section_text_length: int = Field(default=3000, gt=0, description="sectionのtextの最大文字数")
    max_actions_elements: int = Field(default=25, gt=0, description="actionsブロックの最大要素数")
    max_input_label_length: int = Field(default=2000, gt=0, description="inputブロックのlabel/hintの最大文字数")
    max_call_id_length: int = Field(default=255, gt=0, description="callブロックのcall_idの最大文字数")

    model_config = {"extra": "forbid", "frozen": True}


DEFAULT_LIMITS = BlockLimits()
