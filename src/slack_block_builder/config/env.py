"""環境変数設定"""

import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

CONFIG_PATH_ENV = "BLOCK_BUILDER_CONFIG"


class EnvConfig(BaseModel):
    """環境変数設定"""

    config_path: Path | None = Field(default=None, description="上限値を上書きするYAMLファイルのパス")

    model_config = {"extra": "forbid"}


def load_env_config() -> EnvConfig:
    """環境変数からEnvConfigを読み込む

    Returns:
        EnvConfig: 環境変数設定

    Raises:
        ValueError: 環境変数の値が不正な場合
    """
    try:
        return EnvConfig(config_path=os.environ.get(CONFIG_PATH_ENV) or None)
    except ValidationError as e:
        msg = f"Invalid environment variable: {e}"
        raise ValueError(msg) from e
