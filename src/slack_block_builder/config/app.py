"""アプリケーション設定（YAMLファイル）"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from slack_block_builder.limits import BlockLimits


class AppConfig(BaseModel):
    """アプリケーション設定"""

    limits: BlockLimits = Field(default_factory=BlockLimits, description="ブロック構造の上限値")

    model_config = {"extra": "forbid"}


def load_app_config(config_path: Path) -> AppConfig:
    """YAMLファイルからAppConfigを読み込む

    Args:
        config_path: 設定ファイルのパス

    Returns:
        AppConfig: アプリケーション設定

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合
        ValueError: 設定ファイルが空、または不正な場合
    """
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML file: {e}"
        raise ValueError(msg) from e

    if data is None:
        msg = f"Config file is empty: {config_path}"
        raise ValueError(msg)

    try:
        return AppConfig(**data)
    except (TypeError, ValidationError) as e:
        msg = f"Invalid configuration: {e}"
        raise ValueError(msg) from e
