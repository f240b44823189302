"""groupbot command line — send one message to a group-chat robot.

Usage examples:
    # Text message to a generic webhook
    groupbot --token https://hooks.example.com/robot "build finished"

    # Markdown message to DingTalk, token from ROBOT_TOKEN
    ROBOT_PLATFORM=dingtalk groupbot --title "Deploy" "**api** is live"

    # Message body from stdin
    git log -1 --format=%s | groupbot --platform wechatwork --token $KEY -
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from groupbot.config import settings
from groupbot.errors import RobotError
from groupbot.registry import platforms
from groupbot.robot import new

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="groupbot",
        description="Send a text or markdown message to a group-chat webhook robot.",
    )
    parser.add_argument(
        "message",
        nargs="?",
        default="-",
        help="Message content; '-' or omitted reads stdin",
    )
    parser.add_argument(
        "--platform",
        default=settings.robot_platform,
        help=f"Robot platform (default: {settings.robot_platform})",
    )
    parser.add_argument(
        "--token",
        default=settings.robot_token,
        help="Robot token, or the full webhook URL for the default platform",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.robot_timeout,
        help=f"Request timeout in seconds (default: {settings.robot_timeout})",
    )
    parser.add_argument("--title", help="Send as markdown with this title")
    parser.add_argument(
        "--list-platforms",
        action="store_true",
        help="List supported platforms and exit",
    )
    return parser


async def send(args: argparse.Namespace, message: str) -> None:
    """Build the robot for *args* and send *message* with it."""
    robot = new(args.platform, args.token, timeout=args.timeout)
    if args.title is not None:
        await robot.send_markdown_message(args.title, message)
    else:
        await robot.send_text_message(message)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )

    if args.list_platforms:
        for name in platforms.names:
            print(name)
        return 0

    message = sys.stdin.read() if args.message == "-" else args.message

    try:
        asyncio.run(send(args, message))
    except RobotError as e:
        logger.error("%s", e)
        return 1

    logger.info("Message sent via %s robot", args.platform)
    return 0


if __name__ == "__main__":
    sys.exit(main())
