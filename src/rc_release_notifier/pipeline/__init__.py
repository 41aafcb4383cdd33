"""
Pipeline Stages

The two CI steps: note generation and the Slack approval request.
"""

from .note_generator import NoteGenerator
from .approval_poster import ApprovalPoster

__all__ = ['NoteGenerator', 'ApprovalPoster']
