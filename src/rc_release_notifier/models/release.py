"""
Release Data Models

Commit lines collected from git and the release notes composed from them.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class CommitLine:
    """A single `git log --oneline` entry"""
    hash: str
    message: str

    def __post_init__(self):
        if not self.hash:
            raise ValueError("Commit hash cannot be empty")

    @classmethod
    def parse(cls, line: str) -> "CommitLine":
        """Split `<hash> <message>` on the first space.

        A line without a space is treated as a bare hash with an empty message.
        """
        commit_hash, _, message = line.partition(' ')
        return cls(hash=commit_hash, message=message)

    def to_markdown(self) -> str:
        return f"- {self.message} ({self.hash})"


@dataclass(frozen=True)
class ReleaseNotes:
    """Release candidate notes"""
    version: str
    previous_tag: str
    commits: Tuple[CommitLine, ...] = field(default_factory=tuple)
    content: str = ""

    @property
    def has_commits(self) -> bool:
        return len(self.commits) > 0

    @property
    def commit_hashes(self) -> List[str]:
        return [c.hash for c in self.commits]

    def __str__(self) -> str:
        return self.content
