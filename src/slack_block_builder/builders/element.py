"""要素ビルダー

ElementBuilderは要素インスタンスを1つ保持する薄いラッパー。
capabilityごとの操作はmixin（IdentifiableBuilder等）として定義し、
要素ごとのビルダーは対象要素が持つcapabilityのmixinだけを組み合わせる。
"""

from collections.abc import Callable
from typing import Any, Generic, Self, TypeVar

from slack_block_builder.models.composition import ConfirmationDialog, Option, PlainText
from slack_block_builder.models.elements import Confirmable, Focusable, HasPlaceholder, Identifiable, Optionable
from slack_block_builder.validation import require

E = TypeVar("E")
IdentifiableT = TypeVar("IdentifiableT", bound=Identifiable)
ConfirmableT = TypeVar("ConfirmableT", bound=Confirmable)
FocusableT = TypeVar("FocusableT", bound=Focusable)
PlaceholderT = TypeVar("PlaceholderT", bound=HasPlaceholder)
OptionableT = TypeVar("OptionableT", bound=Optionable)


class ElementBuilder(Generic[E]):
    """要素インスタンスに対する流れるようなAPIを提供する

    インスタンスはコピーせずに保持するため、呼び出し元と同じオブジェクトを書き換える。
    """

    def __init__(self, element: E) -> None:
        self.element = element

    def modify(self, modifier: Callable[[E], Any]) -> Self:
        """要素に任意の変更を適用する

        Args:
            modifier: 要素を受け取り、その場で書き換える関数

        Returns:
            同じビルダー（メソッドチェーン用）

        Raises:
            MissingArgumentError: modifierがNoneの場合
        """
        require(modifier, "modifier")
        modifier(self.element)
        return self


class IdentifiableBuilder(ElementBuilder[IdentifiableT]):
    def action_id(self, action_id: str | None) -> Self:
        """action_idを設定する（Noneや空文字も許容する）"""
        self.element.action_id = action_id
        return self


class ConfirmableBuilder(ElementBuilder[ConfirmableT]):
    def confirm(self, configure: Callable[[ConfirmationDialog], Any]) -> Self:
        """確認ダイアログを作成して要素に設定する（既存のダイアログは置き換える）

        Args:
            configure: 新しいConfirmationDialogを受け取り、内容を設定する関数

        Raises:
            MissingArgumentError: configureがNoneの場合
        """
        require(configure, "configure")
        dialog = ConfirmationDialog()
        configure(dialog)
        self.element.confirm = dialog
        return self


class FocusableBuilder(ElementBuilder[FocusableT]):
    def focus_on_load(self, focus: bool = True) -> Self:
        """表示時にこの要素へフォーカスするかを設定する

        フォーカスできる要素は画面全体で1つまで（BlockBuilder.build()で検証）。
        """
        self.element.focus_on_load = focus
        return self


class PlaceholderBuilder(ElementBuilder[PlaceholderT]):
    def placeholder(self, text: str | PlainText | None) -> Self:
        self.element.placeholder = text
        return self


class OptionsBuilder(ElementBuilder[OptionableT]):
    def add_option(self, value: str, text: str | PlainText, description: str | PlainText | None = None) -> Self:
        """選択肢を追加する"""
        return self.add_prepared_option(Option(value=value, text=text, description=description))

    def add_prepared_option(self, option: Option) -> Self:
        """作成済みのOptionを追加する"""
        require(option, "option")
        if self.element.options is None:
            self.element.options = []
        self.element.options.append(option)
        return self


def all_options(element: Any) -> list[Option]:
    """要素に追加済みの選択肢をoptions、option_groupsの順に並べて返す"""
    candidates: list[Option] = list(getattr(element, "options", None) or [])
    for group in getattr(element, "option_groups", None) or []:
        candidates.extend(group.options or [])
    return candidates


def find_options(element: Any, values: tuple[str, ...] | list[str]) -> list[Option]:
    """要素に追加済みの選択肢（option_groups内を含む）からvalueが一致するものを順に返す"""
    return [option for option in all_options(element) if option.value in values]


class SingleSelectionBuilder(ElementBuilder[E]):
    """initial_optionを持つ要素向け"""

    def initial_option(self, value: str) -> Self:
        """追加済みの選択肢からvalueが一致する最初の1つを初期選択にする

        一致するものがなければ初期選択を解除する（エラーにはしない）。
        """
        matches = find_options(self.element, (value,))
        self.element.initial_option = matches[0] if matches else None  # type: ignore[attr-defined]
        return self


class MultiSelectionBuilder(ElementBuilder[E]):
    """initial_optionsを持つ要素向け"""

    def initial_options(self, *values: str) -> Self:
        """追加済みの選択肢からvalueが一致するものすべてを初期選択にする

        一致するものがなければ初期選択を解除する（エラーにはしない）。
        """
        matches = find_options(self.element, values)
        self.element.initial_options = matches or None  # type: ignore[attr-defined]
        return self

    def initial_options_where(self, selector: Callable[[list[Option]], list[Option]]) -> Self:
        """追加済みの選択肢（option_groups内を含む）を受け取り、初期選択にするものを返す関数で初期選択を設定する"""
        require(selector, "selector")
        selected = selector(all_options(self.element))
        self.element.initial_options = selected or None  # type: ignore[attr-defined]
        return self


class MaxSelectedItemsBuilder(ElementBuilder[E]):
    def max_selected_items(self, max_items: int) -> Self:
        self.element.max_selected_items = max_items  # type: ignore[attr-defined]
        return self
