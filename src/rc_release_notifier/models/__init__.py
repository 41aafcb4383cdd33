"""
Data Models

Core data models for release notes and Slack approval messages
"""

from .release import CommitLine, ReleaseNotes
from .message import (
    ActionButton,
    ApprovalMessage,
    MessageContext,
    MessageInfo,
    MessageInfoRecord,
)

__all__ = [
    "CommitLine",
    "ReleaseNotes",
    "ActionButton",
    "ApprovalMessage",
    "MessageContext",
    "MessageInfo",
    "MessageInfoRecord",
]
