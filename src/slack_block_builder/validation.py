"""ブロック構造の検証

引数チェック（呼び出し時に即座に失敗）と、build()時に行う構造全体の検証を提供する。
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from slack_block_builder.exceptions import (
    BlockArgumentError,
    BlockValidationError,
    FocusConflictError,
    MissingArgumentError,
)
from slack_block_builder.limits import DEFAULT_LIMITS, BlockLimits
from slack_block_builder.models.blocks import (
    ActionsBlock,
    Block,
    ContextBlock,
    InputBlock,
    SectionBlock,
)
from slack_block_builder.models.composition import text_length
from slack_block_builder.models.elements import Focusable

logger = logging.getLogger(__name__)


# --- 引数チェック ---


def require(value: Any, name: str) -> None:
    """値がNoneでないことを確認する

    Raises:
        MissingArgumentError: 値がNoneの場合
    """
    if value is None:
        raise MissingArgumentError(name)


def require_text(value: str | None, name: str) -> None:
    """文字列がNoneでも空文字でもないことを確認する

    Raises:
        MissingArgumentError: 値がNoneまたは空文字の場合
    """
    if not value:
        raise MissingArgumentError(name, f"{name} must not be None or empty")


def require_non_blank(value: str | None, name: str) -> None:
    """文字列が空白のみでないことを確認する

    Raises:
        MissingArgumentError: 値がNoneの場合
        BlockArgumentError: 値が空文字または空白のみの場合
    """
    require(value, name)
    if not value.strip():  # type: ignore[union-attr]
        msg = f"{name} must not be empty or whitespace"
        raise BlockArgumentError(msg)


# --- build()時の検証 ---


def validate_block_id(block_id: str | None, limits: BlockLimits = DEFAULT_LIMITS) -> None:
    if block_id is not None and len(block_id) > limits.max_block_id_length:
        msg = f"The block id can only be up to {limits.max_block_id_length} characters long"
        raise BlockValidationError(msg)


def validate_section(block: SectionBlock, limits: BlockLimits = DEFAULT_LIMITS) -> None:
    """sectionブロックの上限を検証する

    Raises:
        BlockValidationError: fields数・各fieldの文字数・textの文字数・block_idの長さが上限を超える場合
    """
    validate_block_id(block.block_id, limits)

    fields = block.fields or []
    if len(fields) > limits.max_section_fields:
        msg = f"Section block can have at most {limits.max_section_fields} fields"
        raise BlockValidationError(msg)

    if any(text_length(field) > limits.max_field_length for field in fields):
        msg = f"Each field's text in a section block can have at most {limits.max_field_length} characters"
        raise BlockValidationError(msg)

    if text_length(block.text) > limits.max_section_text_length:
        msg = f"Section text can have at most {limits.max_section_text_length} characters"
        raise BlockValidationError(msg)


def validate_context(block: ContextBlock, limits: BlockLimits = DEFAULT_LIMITS) -> None:
    """contextブロックの要素数（1以上、上限以下）を検証する"""
    if not block.elements:
        msg = "At least one element is required in a context block"
        raise BlockValidationError(msg)

    if len(block.elements) > limits.max_context_elements:
        msg = f"Context blocks can only contain up to {limits.max_context_elements} elements"
        raise BlockValidationError(msg)

    validate_block_id(block.block_id, limits)


def validate_actions(block: ActionsBlock, limits: BlockLimits = DEFAULT_LIMITS) -> None:
    if len(block.elements) > limits.max_actions_elements:
        msg = f"An actions block can only contain up to {limits.max_actions_elements} elements"
        raise BlockValidationError(msg)

    validate_block_id(block.block_id, limits)


def validate_input(block: InputBlock, limits: BlockLimits = DEFAULT_LIMITS) -> None:
    validate_block_id(block.block_id, limits)

    if text_length(block.label) > limits.max_input_label_length:
        msg = f"Input block label can have at most {limits.max_input_label_length} characters"
        raise BlockValidationError(msg)

    if text_length(block.hint) > limits.max_input_label_length:
        msg = f"Input block hint can have at most {limits.max_input_label_length} characters"
        raise BlockValidationError(msg)


def validate_block(block: Block, limits: BlockLimits = DEFAULT_LIMITS) -> None:
    """ブロックの種類ごとの制約を検証する

    Raises:
        BlockValidationError: 制約違反がある場合
    """
    match block:
        case SectionBlock():
            validate_section(block, limits)
        case ContextBlock():
            validate_context(block, limits)
        case ActionsBlock():
            validate_actions(block, limits)
        case InputBlock():
            validate_input(block, limits)
        case _:
            validate_block_id(block.block_id, limits)


# --- フォーカス検証 ---


def iter_interactive_elements(block: Block) -> Iterator[Any]:
    """ブロック内でフォーカスを持ちうる要素を列挙する

    inputブロックは単一の要素、actionsブロックは全要素を返す。
    それ以外のブロックはフォーカス対象の要素を持たない。
    """
    match block:
        case InputBlock(element=element) if element is not None:
            yield element
        case ActionsBlock(elements=elements):
            yield from elements
        case _:
            return


def is_focused(element: Any) -> bool:
    """要素がfocus_on_load=trueかどうか（Focusableでない要素は常にFalse）"""
    return isinstance(element, Focusable) and bool(element.focus_on_load)


def count_focused_elements(blocks: Iterable[Block]) -> int:
    return sum(1 for block in blocks for element in iter_interactive_elements(block) if is_focused(element))


def ensure_single_focus(blocks: Iterable[Block]) -> None:
    """focus_on_load=trueの要素がブロック全体で1つ以下であることを検証する

    Raises:
        FocusConflictError: focus_on_load=trueの要素が2つ以上ある場合
    """
    focused_count = count_focused_elements(blocks)
    if focused_count > 1:
        logger.warning("focus_on_load is set on %d elements", focused_count)
        raise FocusConflictError("Only one element can have focus_on_load set to true", focused_count)


def validate_blocks(blocks: list[Block], limits: BlockLimits = DEFAULT_LIMITS) -> None:
    """ブロックのリスト全体を検証する（各ブロックの制約 + フォーカスの一意性）"""
    for block in blocks:
        validate_block(block, limits)
    ensure_single_focus(blocks)
