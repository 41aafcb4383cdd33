"""
Command Line Entry Points

`rc-generate-notes` and `rc-post-notes` run one pipeline stage each and
exit non-zero on any fatal error.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_config, setup_logging
from .pipeline.note_generator import NoteGenerator
from .pipeline.approval_poster import ApprovalPoster


logger = logging.getLogger(__name__)


def _parse_args(description: str, argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--config",
        default=None,
        help="YAML configuration file (defaults to environment variables)",
    )
    return parser.parse_args(argv)


def generate_main(argv: Optional[List[str]] = None) -> int:
    """Generate release candidate notes from git history."""
    args = _parse_args("Generate release candidate notes from git history.", argv)

    try:
        config = load_config(args.config)
        config.validate()
        setup_logging(config.logging)

        NoteGenerator(config).run()
    except Exception as e:
        logger.error(f"Error generating release notes: {e}")
        return 1

    return 0


def post_main(argv: Optional[List[str]] = None) -> int:
    """Post release notes to Slack for approval."""
    args = _parse_args("Post release notes to Slack for approval.", argv)

    try:
        config = load_config(args.config)
        config.validate(require_slack=True)
        setup_logging(config.logging)

        ApprovalPoster(config).run()
    except Exception as e:
        logger.error(f"Error posting to Slack: {e}")
        return 1

    return 0


COMMANDS = {
    "generate": generate_main,
    "post": post_main,
}


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] not in COMMANDS:
        print(f"usage: python -m rc_release_notifier {{{','.join(COMMANDS)}}} [--config PATH]", file=sys.stderr)
        return 2

    return COMMANDS[argv[0]](argv[1:])
