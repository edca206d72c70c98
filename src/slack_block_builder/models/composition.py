"""Block Kitのcomposition object（テキスト・選択肢・確認ダイアログ等）"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict


class BlockKitModel(BaseModel):
    """Block Kitレコードの基底クラス

    ビルダーがインスタンスをその場で書き換えるため、frozenにはしない。
    代入時にも検証を行い、文字列からPlainTextへの変換等を効かせる。
    """

    model_config = ConfigDict(validate_assignment=True)


class PlainText(BlockKitModel):
    type: Literal["plain_text"] = "plain_text"
    text: str
    emoji: bool | None = None


class Markdown(BlockKitModel):
    type: Literal["mrkdwn"] = "mrkdwn"
    text: str
    verbatim: bool | None = None


def _coerce_plain_text(value: Any) -> Any:
    """文字列をPlainTextに変換する（それ以外はそのまま返す）"""
    if isinstance(value, str):
        return PlainText(text=value)
    return value


PlainTextField = Annotated[PlainText, BeforeValidator(_coerce_plain_text)]
TextObject = Annotated[PlainText | Markdown, BeforeValidator(_coerce_plain_text)]


def text_length(text: PlainText | Markdown | None) -> int:
    """テキストオブジェクトの文字数を返す（Noneは0）"""
    if text is None:
        return 0
    return len(text.text)


class ConfirmationDialog(BlockKitModel):
    """要素の実行前に表示される確認ダイアログ"""

    title: PlainTextField | None = None
    text: TextObject | None = None
    confirm: PlainTextField | None = None
    deny: PlainTextField | None = None
    style: Literal["primary", "danger"] | None = None


class Option(BlockKitModel):
    text: TextObject
    value: str
    description: PlainTextField | None = None
    url: str | None = None


class OptionGroup(BlockKitModel):
    label: PlainTextField
    options: list[Option] | None = None


class SlackFile(BlockKitModel):
    """Slackにアップロード済みの画像ファイルへの参照（urlまたはidのどちらか）"""

    url: str | None = None
    id: str | None = None


class ConversationFilter(BlockKitModel):
    include: list[Literal["im", "mpim", "private", "public"]] | None = None
    exclude_external_shared_channels: bool | None = None
    exclude_bot_users: bool | None = None


class DispatchActionConfig(BlockKitModel):
    trigger_actions_on: list[Literal["on_enter_pressed", "on_character_entered"]] | None = None
