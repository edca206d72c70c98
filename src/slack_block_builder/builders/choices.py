"""checkboxes / radio_buttons用のビルダー"""

from slack_block_builder.builders.element import (
    ConfirmableBuilder,
    FocusableBuilder,
    IdentifiableBuilder,
    MultiSelectionBuilder,
    OptionsBuilder,
    SingleSelectionBuilder,
)
from slack_block_builder.models.elements import Checkboxes, RadioButtons


class CheckboxesBuilder(
    IdentifiableBuilder[Checkboxes],
    ConfirmableBuilder[Checkboxes],
    FocusableBuilder[Checkboxes],
    OptionsBuilder[Checkboxes],
    MultiSelectionBuilder[Checkboxes],
):
    pass


class RadioButtonsBuilder(
    IdentifiableBuilder[RadioButtons],
    ConfirmableBuilder[RadioButtons],
    FocusableBuilder[RadioButtons],
    OptionsBuilder[RadioButtons],
    SingleSelectionBuilder[RadioButtons],
):
    pass
