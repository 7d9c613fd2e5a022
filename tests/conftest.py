"""Shared payload builders for the GitHub API responses used across tests."""

from unittest.mock import MagicMock

import pytest

from models import PullRequest, Team, User, parse_notification

ME = User(id=1001, login='octocat')


def notification_payload(
    reason='mention',
    subject_type='PullRequest',
    title='Fix the flux capacitor',
    repository='octo-org/hello-world',
    number=42,
    notification_id='1',
):
    kind = 'pulls' if subject_type == 'PullRequest' else 'issues'
    return {
        'id': notification_id,
        'unread': True,
        'reason': reason,
        'updated_at': '2024-05-01T12:00:00Z',
        'subject': {
            'title': title,
            'type': subject_type,
            'url': f'https://api.github.com/repos/{repository}/{kind}/{number}',
            'latest_comment_url': None,
        },
        'repository': {'full_name': repository},
        'url': f'https://api.github.com/notifications/threads/{notification_id}',
    }


def pull_request_payload(reviewers=(), teams=(), state='open', number=42, repository='octo-org/hello-world'):
    return {
        'number': number,
        'state': state,
        'html_url': f'https://github.com/{repository}/pull/{number}',
        'requested_reviewers': [{'id': user.id, 'login': user.login} for user in reviewers],
        'requested_teams': [{'id': team.id, 'slug': team.slug, 'name': team.slug} for team in teams],
    }


def make_notification(reason='mention', subject_type='PullRequest', pull_request=None, **kwargs):
    record = parse_notification(notification_payload(reason=reason, subject_type=subject_type, **kwargs))
    return record._replace(pull_request=pull_request)


def make_pull_request(reviewers=(), teams=(), state='open'):
    return PullRequest(
        number=42,
        state=state,
        html_url='https://github.com/octo-org/hello-world/pull/42',
        requested_reviewers=tuple(reviewers),
        requested_teams=tuple(teams),
    )


def mock_response(json_data=None, status_code=200, reason='OK', json_error=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = reason
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def me():
    return ME


@pytest.fixture
def backend_team():
    return Team(id=77, slug='backend')
