"""
GitHub通知CLIの例外定義
"""

from typing import Optional


class GitHubNotificationsError(Exception):
    """全エラーの基底クラス"""

    pass


class ConfigurationError(GitHubNotificationsError):
    """設定不備（トークン未設定など）"""

    pass


class NetworkError(GitHubNotificationsError):
    """通信エラー（接続失敗、タイムアウトなど）"""

    pass


class ApiError(GitHubNotificationsError):
    """GitHub APIが2xx以外のステータスを返した"""

    def __init__(self, status_code: int, message: Optional[str] = None):
        """
        初期化

        Args:
            status_code: HTTPステータスコード
            message: GitHubが返したエラーメッセージ
        """
        self.status_code = status_code
        self.message = message
        detail = f"HTTP {status_code}"
        if message:
            detail = f"{detail}: {message}"
        super().__init__(detail)


class ParseError(GitHubNotificationsError):
    """レスポンスのJSONが不正、または想定外の形式"""

    pass
