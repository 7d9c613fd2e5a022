"""
通知の分類

reason（通知理由）とレビュー依頼先から表示カテゴリを決定する。
入力に関わらず必ずいずれかのカテゴリを返し、I/Oは行わない。
"""

import logging
from enum import Enum
from typing import Optional

from models import Notification, PullRequest, User

logger = logging.getLogger(__name__)


class DisplayCategory(Enum):
    """表示カテゴリ（定義順が優先順位）"""

    OWNER = "Owner"
    REVIEW_REQUESTED = "Review requested"
    TEAM_REVIEW_REQUESTED = "Team review requested"
    MENTIONED = "Mentioned"
    TEAM_MENTIONED = "Team mentioned"
    SUBSCRIBED = "Subscribed"
    OTHER = "Other"

    @property
    def label(self) -> str:
        return self.value


class ReviewTarget(Enum):
    """レビュー依頼の宛先"""

    INDIVIDUAL = "individual"
    TEAM = "team"
    UNKNOWN = "unknown"


# https://docs.github.com/en/rest/activity/notifications#about-notification-reasons
REASON_CATEGORIES = {
    "author": DisplayCategory.OWNER,
    "ci_activity": DisplayCategory.OWNER,
    "security_alert": DisplayCategory.OWNER,
    "comment": DisplayCategory.SUBSCRIBED,
    "manual": DisplayCategory.SUBSCRIBED,
    "subscribed": DisplayCategory.SUBSCRIBED,
    "assign": DisplayCategory.MENTIONED,
    "mention": DisplayCategory.MENTIONED,
    "team_mention": DisplayCategory.TEAM_MENTIONED,
    "invitation": DisplayCategory.OTHER,
    "state_change": DisplayCategory.OTHER,
}

REVIEW_REQUESTED = "review_requested"

REVIEW_TARGET_CATEGORIES = {
    ReviewTarget.INDIVIDUAL: DisplayCategory.REVIEW_REQUESTED,
    ReviewTarget.TEAM: DisplayCategory.TEAM_REVIEW_REQUESTED,
    ReviewTarget.UNKNOWN: DisplayCategory.OTHER,
}


def normalize_reason(reason) -> Optional[str]:
    """reasonを小文字・前後空白なしに揃える（文字列以外はNone）"""
    if not isinstance(reason, str):
        return None
    return reason.strip().lower()


def review_target(pull_request: Optional[PullRequest], me: Optional[User]) -> ReviewTarget:
    """
    レビュー依頼が個人宛かチーム宛かを判定

    本人がrequested_reviewersに含まれていれば個人宛（チーム経由でも依頼されていても優先）。
    含まれておらずrequested_teamsがあればチーム宛。

    Args:
        pull_request: PR詳細（未取得ならNone）
        me: 認証ユーザー（未取得ならNone）

    Returns:
        ReviewTarget
    """
    if pull_request is None or me is None:
        return ReviewTarget.UNKNOWN

    for reviewer in pull_request.requested_reviewers or ():
        if reviewer.id == me.id or (reviewer.login and reviewer.login == me.login):
            return ReviewTarget.INDIVIDUAL

    if pull_request.requested_teams:
        return ReviewTarget.TEAM

    return ReviewTarget.UNKNOWN


def classify(notification: Notification, me: Optional[User] = None) -> DisplayCategory:
    """
    通知を表示カテゴリに分類

    Args:
        notification: 通知
        me: 認証ユーザー（レビュー依頼の判定に使用）

    Returns:
        DisplayCategory（未知のreasonはOTHER）
    """
    reason = normalize_reason(notification.reason)

    if reason == REVIEW_REQUESTED:
        # Issueへのレビュー依頼は本人への直接の依頼として扱う
        if notification.subject_type != "PullRequest":
            return DisplayCategory.MENTIONED
        target = review_target(notification.pull_request, me)
        logger.debug(f"Review request {notification.id} targets {target.value}")
        return REVIEW_TARGET_CATEGORIES[target]

    return REASON_CATEGORIES.get(reason, DisplayCategory.OTHER)
