"""トップレベルのブロック列を組み立てるビルダー"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar, overload

from slack_block_builder.builders.actions import ActionsBlockBuilder
from slack_block_builder.builders.context import ContextBlockBuilder
from slack_block_builder.builders.input_block import InputBlockBuilder, create_input_block_builder
from slack_block_builder.builders.rich_text import RichTextBuilder
from slack_block_builder.builders.section import SectionBuilder
from slack_block_builder.exceptions import BlockArgumentError
from slack_block_builder.limits import DEFAULT_LIMITS, BlockLimits
from slack_block_builder.models.blocks import (
    ActionsBlock,
    Block,
    CallBlock,
    DividerBlock,
    FileBlock,
    HeaderBlock,
    ImageBlock,
    VideoBlock,
    dump_blocks,
    parse_blocks,
)
from slack_block_builder.models.composition import PlainText, SlackFile
from slack_block_builder.validation import require, require_non_blank, require_text, validate_blocks

logger = logging.getLogger(__name__)

BlockT = TypeVar("BlockT", bound=Block)


class BlockBuilder:
    """Slackメッセージ・モーダル等のblocks配列を組み立てるビルダー

    新規に作る場合はcreate()、既存のメッセージを編集する場合はfrom_blocks()で作成し、
    add_*()やremove*()をチェーンして最後にbuild()を呼ぶ。

    例:
        blocks = (
            BlockBuilder.create()
            .add_header("My Header")
            .add_section("Markdown *text*")
            .add_actions(lambda actions: actions.add_button("button_1", "Button 1"))
            .build()
        )

        # ボタンが押されたメッセージを更新する
        blocks = (
            BlockBuilder.from_blocks(existing_blocks)
            .remove_action("button_1")
            .add_section("Thanks!")
            .build()
        )

    構造全体の制約（各ブロックの上限やfocus_on_loadの一意性）はbuild()でまとめて検証する。
    """

    def __init__(self, blocks: Iterable[Block] | None = None, limits: BlockLimits | None = None) -> None:
        self._blocks: list[Block] = list(blocks) if blocks is not None else []
        self._limits = limits or DEFAULT_LIMITS

    @classmethod
    def create(cls, limits: BlockLimits | None = None) -> BlockBuilder:
        """空のビルダーを作成する"""
        return cls(limits=limits)

    @classmethod
    def from_blocks(cls, blocks: Iterable[Block], limits: BlockLimits | None = None) -> BlockBuilder:
        """既存のブロック列からビルダーを作成する

        Args:
            blocks: 編集元のブロック列（ブロック自体はコピーせずにそのまま保持する）
            limits: 検証に使う上限値

        Raises:
            MissingArgumentError: blocksがNoneの場合
        """
        require(blocks, "blocks")
        return cls(blocks, limits)

    @classmethod
    def from_payload(cls, payload: list[dict[str, Any]], limits: BlockLimits | None = None) -> BlockBuilder:
        """Slack APIから受け取ったJSON形式のblocks配列からビルダーを作成する

        Raises:
            MissingArgumentError: payloadがNoneの場合
            pydantic.ValidationError: 未知のブロックや不正な値が含まれる場合
        """
        require(payload, "payload")
        return cls(parse_blocks(payload), limits)

    # --- 追加 ---

    def add_block(self, block: Block) -> BlockBuilder:
        require(block, "block")
        self._blocks.append(block)
        return self

    def add_blocks(self, blocks: Iterable[Block]) -> BlockBuilder:
        require(blocks, "blocks")
        self._blocks.extend(blocks)
        return self

    def add(self, kind: type[BlockT], configure: Callable[[BlockT], Any]) -> BlockBuilder:
        """指定した種類のブロックを新規作成し、configureで設定してから追加する

        Raises:
            MissingArgumentError: configureがNoneの場合
        """
        require(configure, "configure")
        block = kind()
        configure(block)
        self._blocks.append(block)
        return self

    def add_header(self, text: str | PlainText, block_id: str | None = None) -> BlockBuilder:
        """headerブロックを追加する

        Raises:
            MissingArgumentError: textがNoneまたは空文字の場合
        """
        require_text(text.text if isinstance(text, PlainText) else text, "text")
        return self.add_block(HeaderBlock(text=text, block_id=block_id))

    def add_divider(self, block_id: str | None = None) -> BlockBuilder:
        return self.add_block(DividerBlock(block_id=block_id))

    def add_section(self, content: str | Callable[[SectionBuilder], Any]) -> BlockBuilder:
        """sectionブロックを追加する

        Args:
            content: mrkdwnの本文、またはSectionBuilderを受け取り設定する関数

        Raises:
            MissingArgumentError: contentがNoneの場合
            BlockValidationError: sectionの制約に違反している場合
        """
        require(content, "content")
        section = SectionBuilder(self._limits)
        if isinstance(content, str):
            section.markdown(content)
        else:
            content(section)
        return self.add_block(section.build())

    def add_plain_text_section(self, text: str) -> BlockBuilder:
        require(text, "text")
        return self.add_section(lambda section: section.text(text))

    def add_context(self, configure: Callable[[ContextBlockBuilder], Any]) -> BlockBuilder:
        require(configure, "configure")
        context = ContextBlockBuilder(self._limits)
        configure(context)
        return self.add_block(context.build())

    def add_actions(self, configure: Callable[[ActionsBlockBuilder], Any]) -> BlockBuilder:
        require(configure, "configure")
        actions = ActionsBlockBuilder(self._limits)
        configure(actions)
        return self.add_block(actions.build())

    def add_input(
        self,
        element: Any,
        label: str,
        configure: Callable[[InputBlockBuilder[Any]], Any],
    ) -> BlockBuilder:
        """inputブロックを追加する

        Args:
            element: 入力要素のクラス（新しいインスタンスを作成する）またはインスタンス
            label: 入力欄の上に表示するラベル
            configure: 要素とブロックの両方を設定できるビルダーを受け取る関数

        Raises:
            MissingArgumentError: element・label・configureがNoneの場合
            BlockArgumentError: labelが空白のみの場合
        """
        require(element, "element")
        require_non_blank(label, "label")
        require(configure, "configure")
        instance = element() if isinstance(element, type) else element
        input_builder = create_input_block_builder(instance, label, self._limits)
        configure(input_builder)
        return self.add_block(input_builder.build())

    def add_rich_text(self, configure: Callable[[RichTextBuilder], Any]) -> BlockBuilder:
        require(configure, "configure")
        rich_text = RichTextBuilder(self._limits)
        configure(rich_text)
        return self.add_block(rich_text.build())

    def add_image_from_url(
        self,
        image_url: str,
        alt_text: str,
        title: str | PlainText | None = None,
        block_id: str | None = None,
    ) -> BlockBuilder:
        """URLで指定した画像のimageブロックを追加する

        Raises:
            MissingArgumentError: image_urlがNoneまたは空文字、alt_textがNoneの場合
            BlockArgumentError: alt_textが空白のみの場合
        """
        require_text(image_url, "image_url")
        require_non_blank(alt_text, "alt_text")
        return self.add_block(ImageBlock(image_url=image_url, alt_text=alt_text, title=title, block_id=block_id))

    def add_image_from_slack_file(
        self,
        slack_file: SlackFile,
        alt_text: str,
        title: str | PlainText | None = None,
        block_id: str | None = None,
    ) -> BlockBuilder:
        require(slack_file, "slack_file")
        require_non_blank(alt_text, "alt_text")
        return self.add_block(ImageBlock(slack_file=slack_file, alt_text=alt_text, title=title, block_id=block_id))

    def add_video(
        self,
        video_url: str,
        thumbnail_url: str,
        title: str,
        alt_text: str,
        *,
        block_id: str | None = None,
        description: str | None = None,
        provider_icon_url: str | None = None,
        provider_name: str | None = None,
        title_url: str | None = None,
        author_name: str | None = None,
    ) -> BlockBuilder:
        """videoブロックを追加する

        Raises:
            MissingArgumentError: 必須の引数がNoneの場合
            BlockArgumentError: 必須の引数が空白のみの場合
        """
        require_non_blank(video_url, "video_url")
        require_non_blank(thumbnail_url, "thumbnail_url")
        require_non_blank(title, "title")
        require_non_blank(alt_text, "alt_text")
        return self.add_block(
            VideoBlock(
                video_url=video_url,
                thumbnail_url=thumbnail_url,
                title=title,
                alt_text=alt_text,
                block_id=block_id,
                description=description,
                provider_icon_url=provider_icon_url,
                provider_name=provider_name,
                title_url=title_url,
                author_name=author_name,
            )
        )

    def add_file(self, external_id: str, source: str = "remote", block_id: str | None = None) -> BlockBuilder:
        """リモートファイルのfileブロックを追加する"""
        require_text(external_id, "external_id")
        return self.add_block(FileBlock(external_id=external_id, source=source, block_id=block_id))

    def add_call(self, call_id: str, block_id: str | None = None) -> BlockBuilder:
        """callブロックを追加する

        Raises:
            MissingArgumentError: call_idがNoneまたは空文字の場合
            BlockArgumentError: call_idが上限の文字数を超える場合
        """
        require_text(call_id, "call_id")
        if len(call_id) > self._limits.max_call_id_length:
            msg = f"Call ID must be {self._limits.max_call_id_length} characters or less"
            raise BlockArgumentError(msg)
        return self.add_block(CallBlock(call_id=call_id, block_id=block_id))

    # --- 変更・削除 ---

    def modify(self, predicate: Callable[[Block], bool], modifier: Callable[[Block], Any]) -> BlockBuilder:
        """条件に一致するすべてのブロックに変更を適用する"""
        require(predicate, "predicate")
        require(modifier, "modifier")
        for block in self._blocks:
            if predicate(block):
                modifier(block)
        return self

    @overload
    def remove(self, target: str) -> bool: ...

    @overload
    def remove(self, target: Callable[[Block], bool]) -> int: ...

    def remove(self, target: str | Callable[[Block], bool]) -> bool | int:
        """ブロックを削除する

        Args:
            target: block_id（一致する最初の1つを削除）、またはブロックを判定する関数（一致するすべてを削除）

        Returns:
            block_idを渡した場合は削除できたかどうか、関数を渡した場合は削除した数

        Raises:
            MissingArgumentError: targetがNoneまたは空文字の場合
        """
        if isinstance(target, str) or target is None:
            require_text(target, "block_id")
            return self._remove_first(target)

        before = len(self._blocks)
        self._blocks = [block for block in self._blocks if not target(block)]
        removed = before - len(self._blocks)
        logger.debug("Removed %d blocks", removed)
        return removed

    def _remove_first(self, block_id: str) -> bool:
        for index, block in enumerate(self._blocks):
            if block.block_id == block_id:
                del self._blocks[index]
                logger.debug("Removed block: block_id=%s", block_id)
                return True
        return False

    def remove_action(self, target: str | Callable[[Any], bool]) -> BlockBuilder:
        """すべてのactionsブロックから条件に一致する要素を削除する

        一致する要素やactionsブロックがなくても何もしない（エラーにはしない）。

        Args:
            target: action_id、または要素を判定する関数

        Raises:
            MissingArgumentError: targetがNoneの場合
        """
        require(target, "target")
        if isinstance(target, str):
            action_id = target

            def predicate(element: Any) -> bool:
                return getattr(element, "action_id", None) == action_id
        else:
            predicate = target

        removed = 0
        for block in self._blocks:
            if isinstance(block, ActionsBlock):
                before = len(block.elements)
                block.elements[:] = [element for element in block.elements if not predicate(element)]
                removed += before - len(block.elements)
        logger.debug("Removed %d action elements", removed)
        return self

    # --- 出力 ---

    def build(self) -> list[Block]:
        """ブロック列を検証して返す

        何度呼んでも同じブロックを同じ順序で返す（内部の状態は変更しない）。

        Returns:
            ブロックのリスト（呼び出しごとに新しいlist）

        Raises:
            BlockValidationError: いずれかのブロックが制約に違反している場合
            FocusConflictError: focus_on_load=trueの要素が2つ以上ある場合
        """
        validate_blocks(self._blocks, self._limits)
        logger.debug("Built %d blocks", len(self._blocks))
        return list(self._blocks)

    def build_payload(self) -> list[dict[str, Any]]:
        """build()の結果をSlack APIに渡せるdictの配列で返す"""
        return dump_blocks(self.build())
