"""
Git Integration Layer

Reads tags and commit history from the local repository.
"""

from .repository import GitRepository, NO_TAG_SENTINEL

__all__ = ['GitRepository', 'NO_TAG_SENTINEL']
