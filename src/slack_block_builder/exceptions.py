"""Block Kit構築に関する例外"""


class BlockKitError(Exception):
    """Block Kit構築関連のエラーの基底クラス"""


class BlockArgumentError(BlockKitError, ValueError):
    """呼び出し時の引数が不正な場合のエラー（呼び出し元のバグ）"""


class MissingArgumentError(BlockArgumentError):
    """必須の引数・コールバックが指定されていない場合のエラー"""

    def __init__(self, argument_name: str, message: str | None = None) -> None:
        """初期化

        Args:
            argument_name: 欠けている引数名
            message: エラーメッセージ（省略時は引数名から生成）
        """
        super().__init__(message or f"{argument_name} must not be None")
        self.argument_name = argument_name


class BlockValidationError(BlockKitError):
    """build()時に構造全体の制約違反が見つかった場合のエラー"""


class FocusConflictError(BlockValidationError):
    """focus_on_loadがtrueの要素が複数存在する場合のエラー"""

    def __init__(self, message: str, focused_count: int) -> None:
        """初期化

        Args:
            message: エラーメッセージ
            focused_count: focus_on_loadがtrueの要素数
        """
        super().__init__(message)
        self.focused_count = focused_count
