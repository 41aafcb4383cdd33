"""
Slack Message Formatter

Wraps release notes in a Block Kit approval request with approve,
reject and request-changes buttons.
"""

import logging
from typing import Optional

from ..models.message import ActionButton, ApprovalMessage, MessageContext


logger = logging.getLogger(__name__)

APPROVAL_PROMPT = "*Please review and approve this release:*"

APPROVAL_BUTTONS = (
    ActionButton(label="✅ Approve", value="approve", action_id="release_approve", style="primary"),
    ActionButton(label="❌ Reject", value="reject", action_id="release_reject", style="danger"),
    ActionButton(label="🤔 Request Changes", value="changes", action_id="release_changes"),
)


class SlackMessageFormatter:
    """
    Formats approval requests for Slack.
    """

    def __init__(self, channel: str = "#releases"):
        """
        Initialize Slack message formatter.

        Args:
            channel: Channel name or ID the message is posted to
        """
        self.channel = channel

    def build_message(
        self,
        notes: str,
        version: str,
        context: Optional[MessageContext] = None,
    ) -> ApprovalMessage:
        """
        Build an approval request message.

        Args:
            notes: Release notes markdown
            version: Version label shown in the header
            context: Repository and run shown in the footer

        Returns:
            ApprovalMessage with exactly three buttons in fixed order
        """
        message = ApprovalMessage(
            channel=self.channel,
            version=version,
            header=f"🚀 Release Approval Request: {version}",
            notes=notes,
            prompt=APPROVAL_PROMPT,
            buttons=APPROVAL_BUTTONS,
            context=context or MessageContext(),
        )
        logger.debug(f"Built approval message for {version} in {self.channel}")
        return message
