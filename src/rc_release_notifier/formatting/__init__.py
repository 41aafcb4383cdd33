"""
Formatters

Markdown release notes and Slack approval messages.
"""

from .markdown import ReleaseNotesFormatter
from .slack import SlackMessageFormatter

__all__ = ['ReleaseNotesFormatter', 'SlackMessageFormatter']
