"""BlockBuilderのテスト"""

import pytest

from slack_block_builder.builders.block_builder import BlockBuilder
from slack_block_builder.exceptions import (
    BlockArgumentError,
    BlockValidationError,
    FocusConflictError,
    MissingArgumentError,
)
from slack_block_builder.limits import BlockLimits
from slack_block_builder.models import (
    ActionsBlock,
    Button,
    CallBlock,
    ContextBlock,
    DividerBlock,
    FileBlock,
    HeaderBlock,
    ImageBlock,
    InputBlock,
    Markdown,
    PlainText,
    PlainTextInput,
    RichTextBlock,
    SectionBlock,
    SlackFile,
    StaticSelect,
    VideoBlock,
)


def _sample_blocks() -> list:
    return [
        HeaderBlock(text="Title", block_id="h1"),
        DividerBlock(block_id="d1"),
        ActionsBlock(block_id="a1", elements=[Button(action_id="btn1"), Button(action_id="btn2")]),
        SectionBlock(block_id="s1", text=Markdown(text="body")),
        ActionsBlock(block_id="a2", elements=[Button(action_id="btn1"), StaticSelect(action_id="sel")]),
    ]


class TestCreate:
    """ビルダー作成のテスト"""

    def test_create_empty(self) -> None:
        """空のビルダーはblocksが空になること"""
        assert BlockBuilder.create().build() == []

    def test_from_blocks_round_trip(self) -> None:
        """既存のブロックをそのまま同じ順序で返すこと"""
        blocks = _sample_blocks()
        built = BlockBuilder.from_blocks(blocks).build()
        assert built == blocks
        assert all(a is b for a, b in zip(built, blocks, strict=True))

    def test_from_blocks_none(self) -> None:
        """Noneを渡すとエラーになること"""
        with pytest.raises(MissingArgumentError):
            BlockBuilder.from_blocks(None)  # type: ignore[arg-type]

    def test_from_payload(self) -> None:
        """JSON形式のblocksから作成できること"""
        payload = [
            {"type": "header", "text": {"type": "plain_text", "text": "Title"}},
            {"type": "actions", "elements": [{"type": "button", "action_id": "btn1"}]},
        ]
        builder = BlockBuilder.from_payload(payload)
        assert builder.remove_action("btn1").build_payload() == [
            {"type": "header", "text": {"type": "plain_text", "text": "Title"}},
            {"type": "actions", "elements": []},
        ]


class TestAddBlocks:
    """ブロック追加のテスト"""

    def test_fluent_chain(self) -> None:
        """追加した順にブロックが並ぶこと"""
        blocks = (
            BlockBuilder.create()
            .add_header("My Header")
            .add_divider()
            .add_section("Markdown *text*")
            .add_plain_text_section("plain")
            .add_context(lambda context: context.add_markdown("context"))
            .add_actions(lambda actions: actions.add_button("button_1", "Button 1"))
            .add_input(PlainTextInput, "Name", lambda i: i.action_id("name"))
            .add_rich_text(lambda rich: rich.add_section(lambda s: s.add_text("rich")))
            .add_image_from_url("https://example.com/a.png", "image")
            .add_image_from_slack_file(SlackFile(url="https://files.slack.com/a.png"), "file image")
            .add_video("https://example.com/v", "https://example.com/t.png", "Video", "video")
            .add_file("ext-1")
            .add_call("R123")
            .add(DividerBlock, lambda divider: setattr(divider, "block_id", "custom"))
            .build()
        )
        assert [type(block) for block in blocks] == [
            HeaderBlock,
            DividerBlock,
            SectionBlock,
            SectionBlock,
            ContextBlock,
            ActionsBlock,
            InputBlock,
            RichTextBlock,
            ImageBlock,
            ImageBlock,
            VideoBlock,
            FileBlock,
            CallBlock,
            DividerBlock,
        ]
        assert isinstance(blocks[2].text, Markdown)
        assert isinstance(blocks[3].text, PlainText)
        assert blocks[-1].block_id == "custom"

    def test_add_header_empty(self) -> None:
        """空の見出しはエラーになること"""
        with pytest.raises(MissingArgumentError):
            BlockBuilder.create().add_header("")

    def test_add_input_blank_label(self) -> None:
        """空白のみのラベルはエラーになること"""
        with pytest.raises(BlockArgumentError):
            BlockBuilder.create().add_input(PlainTextInput, " ", lambda i: None)

    def test_add_input_configure_none(self) -> None:
        """configureがNoneの場合にエラーになること"""
        with pytest.raises(MissingArgumentError):
            BlockBuilder.create().add_input(PlainTextInput, "Name", None)  # type: ignore[arg-type]

    def test_add_call_id_limit(self) -> None:
        """255文字のcall_idは成功し、256文字ならエラーになること"""
        BlockBuilder.create().add_call("c" * 255)
        with pytest.raises(BlockArgumentError, match="Call ID must be 255 characters or less"):
            BlockBuilder.create().add_call("c" * 256)

    def test_add_video_blank_title(self) -> None:
        """空白のみのタイトルはエラーになること"""
        with pytest.raises(BlockArgumentError):
            BlockBuilder.create().add_video("https://example.com/v", "https://example.com/t.png", " ", "alt")

    def test_add_blocks_none(self) -> None:
        """Noneを渡すとエラーになること"""
        with pytest.raises(MissingArgumentError):
            BlockBuilder.create().add_blocks(None)  # type: ignore[arg-type]

    def test_kind_builder_errors_raise_when_adding(self) -> None:
        """種類ごとの制約違反はadd時に検出されること"""
        with pytest.raises(BlockValidationError, match="At least one element is required"):
            BlockBuilder.create().add_context(lambda context: None)

    def test_custom_limits(self) -> None:
        """指定した上限値が種類ごとのビルダーに渡されること"""
        builder = BlockBuilder.create(limits=BlockLimits(max_actions_elements=1))
        with pytest.raises(BlockValidationError, match="up to 1 elements"):
            builder.add_actions(lambda actions: actions.add_button("a", "A").add_button("b", "B"))


class TestModify:
    """ブロック変更のテスト"""

    def test_modify_matching_blocks(self) -> None:
        """条件に一致するブロックすべてに変更が適用されること"""
        blocks = _sample_blocks()
        BlockBuilder.from_blocks(blocks).modify(
            lambda block: isinstance(block, ActionsBlock),
            lambda block: setattr(block, "block_id", f"{block.block_id}-edited"),
        )
        assert [block.block_id for block in blocks] == ["h1", "d1", "a1-edited", "s1", "a2-edited"]


class TestRemove:
    """ブロック削除のテスト"""

    def test_remove_by_block_id(self) -> None:
        """block_idが一致する最初の1つだけが削除されること"""
        builder = BlockBuilder.from_blocks([DividerBlock(block_id="d1"), DividerBlock(block_id="d1")])
        assert builder.remove("d1") is True
        assert len(builder.build()) == 1

    def test_remove_keeps_order(self) -> None:
        """削除後も他のブロックの順序が保たれること"""
        builder = BlockBuilder.from_blocks(_sample_blocks())
        builder.remove("d1")
        assert [block.block_id for block in builder.build()] == ["h1", "a1", "s1", "a2"]

    def test_remove_missing_block_id(self) -> None:
        """一致しない場合はFalseを返すこと"""
        builder = BlockBuilder.from_blocks(_sample_blocks())
        assert builder.remove("missing") is False
        assert len(builder.build()) == 5

    @pytest.mark.parametrize("block_id", [None, ""])
    def test_remove_invalid_block_id(self, block_id: str | None) -> None:
        """Noneや空文字のblock_idはエラーになること"""
        with pytest.raises(BlockArgumentError):
            BlockBuilder.create().remove(block_id)  # type: ignore[call-overload]

    def test_remove_by_predicate(self) -> None:
        """条件に一致するブロックすべてが削除され、削除数を返すこと"""
        builder = BlockBuilder.from_blocks(_sample_blocks())
        assert builder.remove(lambda block: isinstance(block, ActionsBlock)) == 2
        assert [block.block_id for block in builder.build()] == ["h1", "d1", "s1"]


class TestRemoveAction:
    """actionsブロックの要素削除のテスト"""

    def test_remove_action_from_every_actions_block(self) -> None:
        """すべてのactionsブロックから一致する要素が削除されること"""
        blocks = _sample_blocks()
        result = BlockBuilder.from_blocks(blocks).remove_action("btn1").build()
        first_actions, second_actions = (block for block in result if isinstance(block, ActionsBlock))
        assert [element.action_id for element in first_actions.elements] == ["btn2"]
        assert [element.action_id for element in second_actions.elements] == ["sel"]

    def test_remove_action_by_predicate(self) -> None:
        """関数で削除する要素を指定できること"""
        builder = BlockBuilder.from_blocks(_sample_blocks())
        builder.remove_action(lambda element: isinstance(element, StaticSelect))
        actions = [block for block in builder.build() if isinstance(block, ActionsBlock)]
        assert [len(block.elements) for block in actions] == [2, 1]

    def test_remove_action_missing_is_silent(self) -> None:
        """一致する要素がなくてもエラーにならないこと"""
        builder = BlockBuilder.create().add_divider()
        assert builder.remove_action("missing") is builder

    def test_remove_action_none(self) -> None:
        """Noneを渡すとエラーになること"""
        with pytest.raises(MissingArgumentError):
            BlockBuilder.create().remove_action(None)  # type: ignore[arg-type]


class TestBuild:
    """build()のテスト"""

    def test_build_is_repeatable(self) -> None:
        """何度呼んでも同じブロックを返し、毎回新しいリストになること"""
        builder = BlockBuilder.create().add_header("Title").add_divider()
        first = builder.build()
        second = builder.build()
        assert first == second
        assert first is not second
        assert all(a is b for a, b in zip(first, second, strict=True))

    def test_single_focus_ok(self) -> None:
        """フォーカスが1つなら成功すること"""
        blocks = (
            BlockBuilder.create()
            .add_input(PlainTextInput, "Name", lambda i: i.focus_on_load())
            .add_actions(lambda actions: actions.add_static_select("s"))
            .build()
        )
        assert len(blocks) == 2

    def test_two_focused_inputs_fail(self) -> None:
        """2つのinputにフォーカスがあるとbuild()でエラーになること"""
        builder = (
            BlockBuilder.create()
            .add_input(PlainTextInput, "A", lambda i: i.focus_on_load())
            .add_input(PlainTextInput, "B", lambda i: i.focus_on_load())
        )
        with pytest.raises(FocusConflictError, match="Only one element can have focus_on_load set to true"):
            builder.build()

    def test_focused_input_and_action_fail(self) -> None:
        """inputとactionsにフォーカスがあるとbuild()でエラーになること"""
        builder = (
            BlockBuilder.create()
            .add_input(PlainTextInput, "A", lambda i: i.focus_on_load())
            .add_actions(lambda actions: actions.add_static_select("s", lambda select: select.focus_on_load()))
        )
        with pytest.raises(FocusConflictError):
            builder.build()

    def test_focused_actions_fail(self) -> None:
        """2つのactionsブロックにフォーカスがあるとbuild()でエラーになること"""
        builder = (
            BlockBuilder.create()
            .add_actions(lambda actions: actions.add_static_select("a", lambda select: select.focus_on_load()))
            .add_actions(lambda actions: actions.add_date_picker("b", lambda picker: picker.focus_on_load()))
        )
        with pytest.raises(FocusConflictError):
            builder.build()

    def test_focused_elements_in_one_actions_block_fail(self) -> None:
        """1つのactionsブロック内の2要素にフォーカスがあるとbuild()でエラーになること"""
        builder = BlockBuilder.create().add_actions(
            lambda actions: actions.add_checkboxes("a", lambda checkboxes: checkboxes.focus_on_load()).add_radio_buttons(
                "b", lambda radio: radio.focus_on_load()
            )
        )
        with pytest.raises(FocusConflictError) as exc:
            builder.build()
        assert exc.value.focused_count == 2

    def test_build_revalidates_existing_blocks(self) -> None:
        """from_blocks()で渡したブロックもbuild()で検証されること"""
        builder = BlockBuilder.from_blocks([ContextBlock()])
        with pytest.raises(BlockValidationError, match="At least one element is required"):
            builder.build()

    def test_build_validates_blocks_edited_after_adding(self) -> None:
        """追加後に変更したブロックもbuild()で検証されること"""
        builder = BlockBuilder.create().add_section(lambda section: section.add_text_field("f"))
        builder.modify(
            lambda block: isinstance(block, SectionBlock),
            lambda block: setattr(block, "fields", [f"f{i}" for i in range(11)]),
        )
        with pytest.raises(BlockValidationError, match="at most 10 fields"):
            builder.build()
