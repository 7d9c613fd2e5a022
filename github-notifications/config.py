"""
環境変数からの設定読み込み
"""

import math
import os
from collections import namedtuple
from typing import Mapping, Optional

from errors import ConfigurationError


TOKEN_VARIABLE = "GITHUB_TOKEN"
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30


Settings = namedtuple('Settings', [
    'token',
    'api_url',
    'timeout'
])


def load_token(environ: Optional[Mapping[str, str]] = None, name: str = TOKEN_VARIABLE) -> str:
    """
    アクセストークンを環境変数から取得

    Args:
        environ: 参照する環境変数（デフォルト: os.environ）
        name: 環境変数名

    Returns:
        トークン文字列（値はそのまま返す）
    """
    if environ is None:
        environ = os.environ

    token = environ.get(name)
    if not token:
        raise ConfigurationError(
            f"{name} environment variable is not set. "
            f"Generate a token with the `notifications` and `repo` scopes "
            f"at https://github.com/settings/tokens and export it as {name}."
        )
    return token


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    実行時設定を環境変数から取得

    環境変数:
        GITHUB_TOKEN: GitHub Personal Access Token（必須）
        GITHUB_API_URL: APIのベースURL（GitHub Enterprise用、デフォルト: https://api.github.com）
        GITHUB_TIMEOUT: リクエストのタイムアウト秒数（デフォルト: 30）
    """
    if environ is None:
        environ = os.environ

    token = load_token(environ)
    api_url = (environ.get("GITHUB_API_URL") or DEFAULT_API_URL).rstrip("/")

    raw_timeout = environ.get("GITHUB_TIMEOUT")
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(f"GITHUB_TIMEOUT must be a number of seconds, got {raw_timeout!r}")
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigurationError(f"GITHUB_TIMEOUT must be a positive finite number, got {raw_timeout!r}")
    else:
        timeout = DEFAULT_TIMEOUT

    return Settings(token=token, api_url=api_url, timeout=timeout)
