"""日付・時刻ピッカー用のビルダー"""

from datetime import date, datetime, time
from typing import Self

from slack_block_builder.builders.element import (
    ConfirmableBuilder,
    FocusableBuilder,
    IdentifiableBuilder,
    PlaceholderBuilder,
)
from slack_block_builder.models.composition import PlainText
from slack_block_builder.models.elements import DatePicker, DateTimePicker, TimePicker
from slack_block_builder.validation import require_text


class DatePickerBuilder(
    IdentifiableBuilder[DatePicker],
    ConfirmableBuilder[DatePicker],
    FocusableBuilder[DatePicker],
    PlaceholderBuilder[DatePicker],
):
    def initial_date(self, initial_date: date | str | None) -> Self:
        """初期表示する日付を設定する（文字列はYYYY-MM-DD形式）"""
        if isinstance(initial_date, date):
            initial_date = initial_date.strftime("%Y-%m-%d")
        self.element.initial_date = initial_date
        return self

    def placeholder(self, text: str | PlainText | None) -> Self:
        """プレースホルダーを設定する

        Raises:
            MissingArgumentError: textがNoneまたは空文字の場合
        """
        require_text(text.text if isinstance(text, PlainText) else text, "placeholder")
        return super().placeholder(text)


class TimePickerBuilder(
    IdentifiableBuilder[TimePicker],
    ConfirmableBuilder[TimePicker],
    FocusableBuilder[TimePicker],
    PlaceholderBuilder[TimePicker],
):
    def initial_time(self, initial_time: time | str | None) -> Self:
        """初期表示する時刻を設定する（文字列はHH:mm形式）"""
        if isinstance(initial_time, time):
            initial_time = initial_time.strftime("%H:%M")
        self.element.initial_time = initial_time
        return self

    def timezone(self, timezone: str | None) -> Self:
        """IANAタイムゾーン名（例: Asia/Tokyo）を設定する"""
        self.element.timezone = timezone
        return self


class DateTimePickerBuilder(
    IdentifiableBuilder[DateTimePicker],
    ConfirmableBuilder[DateTimePicker],
    FocusableBuilder[DateTimePicker],
):
    def initial_date_time(self, initial_date_time: datetime | int | None) -> Self:
        """初期表示する日時を設定する（UNIXタイムスタンプ秒に変換して保持する）"""
        if isinstance(initial_date_time, datetime):
            initial_date_time = int(initial_date_time.timestamp())
        self.element.initial_date_time = initial_date_time
        return self
