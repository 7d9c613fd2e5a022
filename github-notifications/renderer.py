"""
ターミナル出力の整形
"""

import re
from enum import IntEnum
from typing import Optional, Tuple

from classifier import DisplayCategory, classify
from models import Notification, User


class TerminalColor(IntEnum):
    """256色パレットのインデックス"""

    GREEN = 2
    YELLOW = 3
    GRAY = 8
    CYAN = 14
    DARK_YELLOW = 58
    FADED_PURPLE = 103
    GOLD = 136
    ORANGE = 208


# OTHERは端末のデフォルト色のまま
CATEGORY_COLORS = {
    DisplayCategory.OWNER: TerminalColor.CYAN,
    DisplayCategory.SUBSCRIBED: TerminalColor.GREEN,
    DisplayCategory.MENTIONED: TerminalColor.YELLOW,
    DisplayCategory.REVIEW_REQUESTED: TerminalColor.ORANGE,
    DisplayCategory.TEAM_REVIEW_REQUESTED: TerminalColor.GOLD,
    DisplayCategory.TEAM_MENTIONED: TerminalColor.DARK_YELLOW,
    DisplayCategory.OTHER: None,
}

WEB_URL = "https://github.com"

_API_SUBJECT_URL = re.compile(
    r"^(?P<scheme>https?)://(?P<host>[^/]+)/"
    r"(?:api/v3/)?repos/(?P<repo>[^/]+/[^/]+)/"
    r"(?P<kind>pulls|issues)/(?P<number>\d+)$"
)


def colorize(text: str, color: Optional[TerminalColor], enabled: bool = True) -> str:
    """
    ANSIエスケープで文字列に色を付ける

    Args:
        text: 対象の文字列
        color: 色（Noneならそのまま）
        enabled: Falseなら色を付けない

    Returns:
        色付きの文字列
    """
    if color is None or not enabled:
        return text
    return f"\x1b[38;5;{int(color)}m{text}\x1b[0m"


def web_url(notification: Notification) -> str:
    """
    通知対象のブラウザ用URLを返す

    PR詳細があればhtml_url、なければAPIのURLから変換、それも無理ならリポジトリのURL。
    """
    pull_request = notification.pull_request
    if pull_request is not None and pull_request.html_url:
        return pull_request.html_url

    match = _API_SUBJECT_URL.match(notification.subject_url or "")
    if match:
        host = match.group("host")
        base = WEB_URL if host == "api.github.com" else f"{match.group('scheme')}://{host}"
        kind = "pull" if match.group("kind") == "pulls" else "issues"
        return f"{base}/{match.group('repo')}/{kind}/{match.group('number')}"

    return f"{WEB_URL}/{notification.repository}"


def format_notification(notification: Notification, category: DisplayCategory, color: bool = True) -> str:
    """
    通知1件を2行の表示用文字列にする

    Args:
        notification: 通知
        category: 分類結果
        color: 色付けするか

    Returns:
        "[カテゴリ] タイトル" と "  リポジトリ  URL" の2行
    """
    label = colorize(category.label, CATEGORY_COLORS.get(category), color)

    title = notification.title
    pull_request = notification.pull_request
    if pull_request is not None and pull_request.state == "closed":
        title = colorize(title, TerminalColor.FADED_PURPLE, color)

    url = colorize(web_url(notification), TerminalColor.GRAY, color)
    return f"[{label}] {title}\n  {notification.repository}  {url}"


def render_notification(notification: Notification, me: Optional[User] = None, color: bool = True) -> Tuple[DisplayCategory, str]:
    """通知を分類し、カテゴリと表示用文字列を返す"""
    category = classify(notification, me)
    return category, format_notification(notification, category, color)
