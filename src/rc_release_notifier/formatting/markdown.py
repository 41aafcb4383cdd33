"""
Release Notes Formatter

Renders release candidate notes as markdown.
"""

import logging
from typing import List, Sequence

from ..models.release import CommitLine, ReleaseNotes


logger = logging.getLogger(__name__)

NO_COMMITS_LINE = "- No new commits since last release"

RELEASE_CHECKLIST = (
    "- [ ] Code review completed",
    "- [ ] Tests passing",
    "- [ ] Documentation updated",
    "- [ ] Ready for deployment",
)


class ReleaseNotesFormatter:
    """
    Builds the release candidate markdown document.

    Layout is a title with the target version, a changes section listing
    every commit since the previous tag, and a fixed release checklist.
    """

    def compose_notes(self, tag: str, commits: Sequence[CommitLine], version: str) -> ReleaseNotes:
        """
        Compose release notes.

        Args:
            tag: Previous release tag
            commits: Commits since `tag`, newest first
            version: Target release version

        Returns:
            ReleaseNotes with the rendered markdown in `content`
        """
        lines: List[str] = [
            f"# Release Candidate: {version}",
            "",
            f"## Changes since {tag}",
            "",
        ]

        if commits:
            lines.extend(commit.to_markdown() for commit in commits)
        else:
            lines.append(NO_COMMITS_LINE)

        lines.append("")
        lines.append("## Release Checklist")
        lines.extend(RELEASE_CHECKLIST)

        content = "\n".join(lines) + "\n"
        logger.debug(f"Composed release notes for {version}: {len(commits)} commits since {tag}")

        return ReleaseNotes(
            version=version,
            previous_tag=tag,
            commits=tuple(commits),
            content=content,
        )
