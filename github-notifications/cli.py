#!/usr/bin/env python3
"""
GitHub通知をターミナルに色分け表示するCLI
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from config import load_settings
from errors import ApiError, ConfigurationError, NetworkError, ParseError
from github_client import GitHubClient
from renderer import render_notification

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """ログをstderrに出力する設定"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
        force=True
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def use_color(no_color: bool = False) -> bool:
    """色付けするか判定（--no-color、NO_COLOR、非TTYでは無効）"""
    if no_color or os.getenv("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def main(argv: Optional[List[str]] = None) -> int:
    """メイン処理"""
    parser = argparse.ArgumentParser(
        prog="github-notifications",
        description="Show pending GitHub notifications, colored by why you were notified"
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging on stderr')
    parser.add_argument('--no-color', action='store_true', help='Disable ANSI colors')
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        settings = load_settings()
        github_client = GitHubClient(settings.token, base_url=settings.api_url, timeout=settings.timeout)
        notifications, me = github_client.fetch_notifications()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except NetworkError as e:
        print(f"Network error: {e}", file=sys.stderr)
        return 1
    except ApiError as e:
        print(f"GitHub API error: {e}", file=sys.stderr)
        return 1
    except ParseError as e:
        print(f"Could not parse GitHub response: {e}", file=sys.stderr)
        return 1

    color = use_color(args.no_color)
    for notification in notifications:
        category, line = render_notification(notification, me, color)
        logger.debug(f"{notification.id} {notification.reason} -> {category.name}")
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
