"""統合Config クラス"""

import logging
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from slack_block_builder.config.app import load_app_config
from slack_block_builder.config.env import load_env_config
from slack_block_builder.limits import BlockLimits

logger = logging.getLogger(__name__)


class Config(BaseModel):
    """統合設定クラス（環境変数 + アプリケーション設定）"""

    # 環境変数由来
    config_path: Path | None = Field(default=None, description="読み込んだYAMLファイルのパス")

    # config.yaml由来
    limits: BlockLimits = Field(default_factory=BlockLimits, description="ブロック構造の上限値")

    model_config = {"extra": "forbid"}


def load_config(config_path: Path | None = None) -> Config:
    """環境変数とYAMLファイルから統合設定を読み込む

    config_pathを省略した場合は環境変数BLOCK_BUILDER_CONFIGのパスを使う。
    どちらもなければデフォルトの上限値になる。

    Args:
        config_path: YAMLファイルのパス

    Returns:
        Config: 統合設定

    Raises:
        ValueError: 環境変数やYAMLファイルの内容が不正な場合
        FileNotFoundError: YAMLファイルが存在しない場合
    """
    # .envファイルを読み込み
    load_dotenv()

    env_config = load_env_config()
    path = config_path or env_config.config_path
    if path is None:
        logger.debug("No config file specified, using default limits")
        return Config()

    app_config = load_app_config(path)
    logger.info("Config loaded: %s", path)
    return Config(config_path=path, limits=app_config.limits)
