"""
Approval Poster Stage

Posts release notes to Slack as an approval request and records where
the message landed.
"""

import logging
from typing import Mapping, Optional

from ..config import AppConfig
from ..formatting.slack import SlackMessageFormatter
from ..handoff import resolve_context, resolve_release_notes, resolve_version
from ..models.message import ApprovalMessage, MessageInfo
from ..slack.client import SlackClient
from ..status import persist_message_info


logger = logging.getLogger(__name__)


class ApprovalPoster:
    """
    Sends a release approval request to Slack.

    Steps run strictly in order: resolve notes, build the message, post it,
    then persist the message info. Any failure stops the run, and the status
    file is only written after a successful post.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        client: Optional[SlackClient] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.config = config or AppConfig()
        self.formatter = SlackMessageFormatter(channel=self.config.slack.channel)
        self._client = client
        self.environ = environ

    @property
    def client(self) -> SlackClient:
        if self._client is None:
            self._client = SlackClient(
                token=self.config.slack.token,
                base_url=self.config.slack.api_base_url,
                timeout=self.config.slack.timeout_seconds,
            )
        return self._client

    def build(self) -> ApprovalMessage:
        """Resolve hand-off inputs and build the message without sending it."""
        notes = resolve_release_notes(self.config.notes.output_path, self.environ)
        version = resolve_version(self.environ)
        context = resolve_context(self.environ)

        return self.formatter.build_message(notes, version, context)

    def run(self) -> MessageInfo:
        message = self.build()

        result = self.client.post_message(message)
        logger.info(f"Message posted successfully: {result.ts}")
        logger.info(f"Channel: {result.channel}")

        info = MessageInfo(
            channel=result.channel,
            timestamp=result.ts,
            version=message.version,
        )
        saved_path = persist_message_info(info, self.config.slack.message_info_path)
        logger.info(f"Message info saved to {saved_path}")

        return info
