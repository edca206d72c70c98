"""option group用のビルダー"""

from typing import Self

from slack_block_builder.models.composition import Option, OptionGroup, PlainText
from slack_block_builder.validation import require


class OptionGroupBuilder:
    """OptionGroupに選択肢を追加していくビルダー

    セレクトメニューの選択肢をグループ分けする際に使う。
    """

    def __init__(self, group: OptionGroup) -> None:
        self.group = group

    def add_option(
        self,
        value: str | Option,
        text: str | PlainText | None = None,
        description: str | PlainText | None = None,
    ) -> Self:
        """選択肢を追加する

        Args:
            value: 選択時にアプリへ渡される値。作成済みのOptionを渡した場合はそのまま追加する
            text: メニューに表示するテキスト（valueが文字列の場合は必須）
            description: textの下に表示する補足テキスト

        Raises:
            MissingArgumentError: valueがNone、またはvalueが文字列でtextがNoneの場合
        """
        require(value, "value")
        if isinstance(value, Option):
            option = value
        else:
            require(text, "text")
            option = Option(value=value, text=text, description=description)

        if self.group.options is None:
            self.group.options = []
        self.group.options.append(option)
        return self

    def build(self) -> OptionGroup:
        return self.group
