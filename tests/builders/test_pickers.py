"""日付・時刻ピッカーとテキスト入力用ビルダーのテスト"""

from datetime import date, datetime, time, timezone

import pytest

from slack_block_builder.builders.pickers import DatePickerBuilder, DateTimePickerBuilder, TimePickerBuilder
from slack_block_builder.builders.text_inputs import NumberInputBuilder, PlainTextInputBuilder, RichTextInputBuilder
from slack_block_builder.exceptions import MissingArgumentError
from slack_block_builder.models import (
    DatePicker,
    DateTimePicker,
    NumberInput,
    PlainTextInput,
    RichTextBlock,
    RichTextInput,
    TimePicker,
)


class TestDatePickerBuilder:
    """DatePickerBuilderのテスト"""

    def test_initial_date_from_date(self) -> None:
        """dateがYYYY-MM-DD形式の文字列になること"""
        picker = DatePicker()
        DatePickerBuilder(picker).initial_date(date(2024, 1, 5))
        assert picker.initial_date == "2024-01-05"

    def test_initial_date_from_string(self) -> None:
        """文字列はそのまま設定されること"""
        picker = DatePicker()
        DatePickerBuilder(picker).initial_date("2024-12-31")
        assert picker.initial_date == "2024-12-31"

    def test_placeholder_empty(self) -> None:
        """空のプレースホルダーはエラーになること"""
        with pytest.raises(MissingArgumentError):
            DatePickerBuilder(DatePicker()).placeholder("")


class TestTimePickerBuilder:
    """TimePickerBuilderのテスト"""

    def test_initial_time_and_timezone(self) -> None:
        """timeがHH:mm形式の文字列になること"""
        picker = TimePicker()
        TimePickerBuilder(picker).initial_time(time(9, 5)).timezone("Asia/Tokyo")
        assert picker.initial_time == "09:05"
        assert picker.timezone == "Asia/Tokyo"


class TestDateTimePickerBuilder:
    """DateTimePickerBuilderのテスト"""

    def test_initial_date_time_from_datetime(self) -> None:
        """datetimeがUNIXタイムスタンプになること"""
        picker = DateTimePicker()
        DateTimePickerBuilder(picker).initial_date_time(datetime(2024, 1, 1, tzinfo=timezone.utc))
        assert picker.initial_date_time == 1704067200

    def test_initial_date_time_from_int(self) -> None:
        """整数はそのまま設定されること"""
        picker = DateTimePicker()
        DateTimePickerBuilder(picker).initial_date_time(1704067200).focus_on_load()
        assert picker.initial_date_time == 1704067200
        assert picker.focus_on_load is True


class TestTextInputBuilders:
    """テキスト入力系ビルダーのテスト"""

    def test_plain_text_input(self) -> None:
        """各設定が要素に反映されること"""
        text_input = PlainTextInput()
        (
            PlainTextInputBuilder(text_input)
            .multiline()
            .min_length(1)
            .max_length(500)
            .initial_value("hello")
            .dispatch_on("on_enter_pressed")
        )
        assert text_input.multiline is True
        assert text_input.min_length == 1
        assert text_input.max_length == 500
        assert text_input.initial_value == "hello"
        assert text_input.dispatch_action_config is not None
        assert text_input.dispatch_action_config.trigger_actions_on == ["on_enter_pressed"]

    def test_number_input_values_are_strings(self) -> None:
        """数値入力の値が文字列で保持されること"""
        number_input = NumberInput()
        NumberInputBuilder(number_input).decimal_allowed().initial_value(1.5).min_value(0).max_value("10")
        assert number_input.is_decimal_allowed is True
        assert number_input.initial_value == "1.5"
        assert number_input.min_value == "0"
        assert number_input.max_value == "10"

    def test_rich_text_input(self) -> None:
        """rich_textブロックを初期値に設定できること"""
        rich_text_input = RichTextInput()
        initial = RichTextBlock()
        RichTextInputBuilder(rich_text_input).initial_value(initial)
        assert rich_text_input.initial_value is initial
