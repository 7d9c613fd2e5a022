"""
GitHub APIレスポンスを保持するデータ構造
"""

from collections import namedtuple
from typing import Any, Dict, List

from errors import ParseError


User = namedtuple('User', ['id', 'login'])

Team = namedtuple('Team', ['id', 'slug'])

PullRequest = namedtuple('PullRequest', [
    'number',
    'state',
    'html_url',
    'requested_reviewers',
    'requested_teams'
])

Notification = namedtuple('Notification', [
    'id',
    'title',
    'subject_type',
    'subject_url',
    'repository',
    'reason',
    'unread',
    'url',
    'updated_at',
    'pull_request'
])
# レビュー依頼以外ではPR詳細を取得しない
Notification.__new__.__defaults__ = (None,)


def parse_user(data: Dict[str, Any]) -> User:
    """ユーザー情報を抽出"""
    try:
        return User(id=data["id"], login=data["login"])
    except (KeyError, TypeError) as e:
        raise ParseError(f"Unexpected user payload: missing {e}")


def _parse_team(data: Dict[str, Any]) -> Team:
    try:
        return Team(id=data["id"], slug=data.get("slug") or data.get("name"))
    except (KeyError, TypeError, AttributeError) as e:
        raise ParseError(f"Unexpected team payload: missing {e}")


def parse_pull_request(data: Dict[str, Any]) -> PullRequest:
    """
    プルリクエスト詳細を抽出

    Args:
        data: /repos/{owner}/{repo}/pulls/{number} のレスポンス

    Returns:
        PullRequest
    """
    if not isinstance(data, dict):
        raise ParseError(f"Expected a pull request object, got {type(data).__name__}")

    try:
        return PullRequest(
            number=data["number"],
            state=data["state"],
            html_url=data.get("html_url"),
            requested_reviewers=tuple(parse_user(u) for u in data.get("requested_reviewers") or []),
            requested_teams=tuple(_parse_team(t) for t in data.get("requested_teams") or [])
        )
    except KeyError as e:
        raise ParseError(f"Unexpected pull request payload: missing {e}")


def parse_notification(data: Dict[str, Any]) -> Notification:
    """
    通知1件を抽出

    Args:
        data: /notifications レスポンスの要素

    Returns:
        Notification
    """
    try:
        subject = data["subject"]
        return Notification(
            id=data["id"],
            title=subject["title"],
            subject_type=subject["type"],
            subject_url=subject.get("url"),
            repository=data["repository"]["full_name"],
            reason=data["reason"],
            unread=data["unread"],
            url=data.get("url"),
            updated_at=data.get("updated_at")
        )
    except (KeyError, TypeError, AttributeError) as e:
        raise ParseError(f"Unexpected notification payload: {type(e).__name__} {e}")


def parse_notifications(data: Any) -> List[Notification]:
    """
    通知リストを抽出（APIの並び順を保持）

    Args:
        data: /notifications のレスポンス

    Returns:
        通知のリスト
    """
    if not isinstance(data, list):
        raise ParseError(f"Expected a JSON array of notifications, got {type(data).__name__}")

    return [parse_notification(item) for item in data]
