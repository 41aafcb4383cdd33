"""
Slack Message Data Models

Approval request payload and the record of a successful post.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, field_validator


@dataclass(frozen=True)
class ActionButton:
    """Interactive button in an actions block"""
    label: str
    value: str
    action_id: str
    style: Optional[str] = None

    def __post_init__(self):
        valid_styles = {None, 'primary', 'danger'}
        if self.style not in valid_styles:
            raise ValueError(f"Invalid button style: {self.style}")
        if not self.action_id:
            raise ValueError("action_id cannot be empty")

    def to_block_element(self) -> Dict[str, Any]:
        element = {
            'type': 'button',
            'text': {
                'type': 'plain_text',
                'text': self.label,
                'emoji': True,
            },
            'value': self.value,
            'action_id': self.action_id,
        }
        if self.style:
            element['style'] = self.style
        return element


@dataclass(frozen=True)
class MessageContext:
    """CI run details shown in the message footer"""
    repository: str = "N/A"
    run_id: str = "N/A"


@dataclass(frozen=True)
class ApprovalMessage:
    """Release approval request ready for chat.postMessage"""
    channel: str
    version: str
    header: str
    notes: str
    prompt: str
    buttons: Tuple[ActionButton, ...]
    context: MessageContext = field(default_factory=MessageContext)

    def __post_init__(self):
        if not self.channel:
            raise ValueError("Channel cannot be empty")
        if not self.notes.strip():
            raise ValueError("Release notes cannot be empty")

    @property
    def fallback_text(self) -> str:
        """Plain text shown in notifications that cannot render blocks"""
        return f"Release Approval Request: {self.version}"

    @property
    def action_ids(self) -> List[str]:
        return [b.action_id for b in self.buttons]

    def to_blocks(self) -> List[Dict[str, Any]]:
        return [
            {
                'type': 'header',
                'text': {
                    'type': 'plain_text',
                    'text': self.header,
                    'emoji': True,
                },
            },
            {
                'type': 'section',
                'text': {'type': 'mrkdwn', 'text': self.notes},
            },
            {'type': 'divider'},
            {
                'type': 'section',
                'text': {'type': 'mrkdwn', 'text': self.prompt},
            },
            {
                'type': 'actions',
                'elements': [b.to_block_element() for b in self.buttons],
            },
            {
                'type': 'context',
                'elements': [
                    {
                        'type': 'mrkdwn',
                        'text': f"Repository: {self.context.repository} | Run: {self.context.run_id}",
                    }
                ],
            },
        ]

    def to_payload(self) -> Dict[str, Any]:
        """Request body for chat.postMessage"""
        return {
            'channel': self.channel,
            'text': self.fallback_text,
            'blocks': self.to_blocks(),
        }


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z"""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass
class MessageInfo:
    """Record of a posted approval request"""
    channel: str
    timestamp: str
    version: str
    posted_at: str = field(default_factory=utc_timestamp)

    def __post_init__(self):
        if not self.channel:
            raise ValueError("Channel cannot be empty")
        if not self.timestamp:
            raise ValueError("Message timestamp cannot be empty")

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


# Pydantic model for status file validation
class MessageInfoRecord(BaseModel):
    """Validated shape of slack-message-info.json"""
    channel: str
    timestamp: str
    version: str
    posted_at: str

    @field_validator('channel', 'timestamp')
    @classmethod
    def validate_not_empty(cls, v):
        if not v.strip():
            raise ValueError('Value cannot be empty')
        return v

    @field_validator('posted_at')
    @classmethod
    def validate_posted_at(cls, v):
        datetime.fromisoformat(v.replace('Z', '+00:00'))
        return v

    def to_message_info(self) -> MessageInfo:
        return MessageInfo(
            channel=self.channel,
            timestamp=self.timestamp,
            version=self.version,
            posted_at=self.posted_at,
        )
