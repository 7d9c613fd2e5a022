"""
GitHub Notifications API クライアント
"""

import logging
from typing import Any, List, Optional, Tuple

import requests

from classifier import REVIEW_REQUESTED, normalize_reason
from config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from errors import ApiError, NetworkError, ParseError
from models import (
    Notification,
    PullRequest,
    User,
    parse_notifications,
    parse_pull_request,
    parse_user,
)

logger = logging.getLogger(__name__)


class GitHubClient:
    """GitHub API操作クライアント（読み取り専用）"""

    def __init__(self, token: str, base_url: str = DEFAULT_API_URL, timeout: float = DEFAULT_TIMEOUT):
        """
        初期化

        Args:
            token: GitHub Personal Access Token
            base_url: APIのベースURL
            timeout: リクエストのタイムアウト秒数
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json"
        }

    def _get(self, url: str) -> Any:
        """
        GETリクエストを送りJSONを返す

        Args:
            url: リクエスト先のURL

        Returns:
            デコード済みのJSON
        """
        logger.debug(f"GET {url}")

        try:
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"GitHub API request failed: {e}")

        if not response.ok:
            raise ApiError(response.status_code, _error_message(response))

        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"GitHub API returned malformed JSON: {e}")

    def get_notifications(self) -> List[Notification]:
        """
        未読通知を取得（APIのデフォルトページのみ）

        Returns:
            通知のリスト（新しい順）
        """
        data = self._get(f"{self.base_url}/notifications")
        return parse_notifications(data)

    def get_current_user(self) -> User:
        """認証ユーザーを取得"""
        return parse_user(self._get(f"{self.base_url}/user"))

    def get_pull_request(self, url: str) -> PullRequest:
        """
        プルリクエスト詳細を取得

        Args:
            url: 通知のsubject.url（APIのURL）

        Returns:
            PullRequest
        """
        return parse_pull_request(self._get(url))

    def fetch_notifications(self) -> Tuple[List[Notification], Optional[User]]:
        """
        通知を取得し、レビュー依頼にはPR詳細を付与

        同じreason（review_requested）が個人宛とチーム宛の両方に使われるため、
        レビュー依頼のPRについてはrequested_reviewers/requested_teamsを取得する。
        失敗してよいのは /notifications のみで、ユーザーやPR詳細の取得に失敗しても
        該当の通知は詳細なしのまま表示する。

        Returns:
            (通知のリスト, 認証ユーザー) レビュー依頼がない、または取得失敗ならユーザーはNone
        """
        notifications = self.get_notifications()
        logger.info(f"Found {len(notifications)} notifications")

        review_requests = [n for n in notifications if _needs_pull_request(n)]
        if not review_requests:
            return notifications, None

        try:
            me = self.get_current_user()
        except (ApiError, NetworkError, ParseError) as e:
            logger.warning(f"Could not fetch the authenticated user, review requests shown without details: {e}")
            return notifications, None
        logger.info(f"Fetching reviewer details for {len(review_requests)} review requests as {me.login}")

        enriched = []
        for notification in notifications:
            if _needs_pull_request(notification):
                notification = notification._replace(
                    pull_request=self.get_pull_request_details(notification.subject_url)
                )
            enriched.append(notification)

        return enriched, me

    def get_pull_request_details(self, url: str) -> Optional[PullRequest]:
        """
        プルリクエスト詳細を取得（取得失敗時はNone）

        Args:
            url: 通知のsubject.url（APIのURL）

        Returns:
            PullRequest（削除済み・権限不足などで取得できなければNone）
        """
        try:
            return self.get_pull_request(url)
        except (ApiError, NetworkError, ParseError) as e:
            # 詳細の取得に失敗しても通知自体はスキップせず処理を継続
            logger.warning(f"Could not fetch pull request details from {url}: {e}")
            return None


def _needs_pull_request(notification: Notification) -> bool:
    return (
        normalize_reason(notification.reason) == REVIEW_REQUESTED
        and notification.subject_type == "PullRequest"
        and bool(notification.subject_url)
    )


def _error_message(response: requests.Response) -> Optional[str]:
    """GitHubのエラーレスポンスからmessageを取り出す"""
    try:
        body = response.json()
    except ValueError:
        return response.reason or None
    if isinstance(body, dict) and body.get("message"):
        return body["message"]
    return response.reason or None
