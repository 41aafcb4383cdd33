"""
RC Release Notifier

Release candidate notes from git history, posted to Slack for approval
"""

__version__ = "1.0.0"

from .pipeline import NoteGenerator, ApprovalPoster

__all__ = ["NoteGenerator", "ApprovalPoster"]
