"""
Note Generator Stage

Reads git history, composes release candidate notes and hands them to
the next CI step through the notes file and a step output.
"""

import logging
from typing import Mapping, Optional

from ..config import AppConfig
from ..git.repository import GitRepository
from ..formatting.markdown import ReleaseNotesFormatter
from ..handoff import publish_step_output, resolve_target_version, write_release_notes
from ..models.release import ReleaseNotes


logger = logging.getLogger(__name__)


class NoteGenerator:
    """
    Generates release candidate notes for the current checkout.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        repository: Optional[GitRepository] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.config = config or AppConfig()
        self.repository = repository or GitRepository(
            path=self.config.notes.repo_path,
            fallback_tag=self.config.notes.fallback_tag,
        )
        self.formatter = ReleaseNotesFormatter()
        self.environ = environ

    def generate(self) -> ReleaseNotes:
        """Compose notes from git state without writing anything."""
        latest_tag = self.repository.resolve_latest_tag()
        commits = self.repository.collect_commits_since(latest_tag)
        version = resolve_target_version(self.config.notes.default_version, self.environ)

        return self.formatter.compose_notes(latest_tag, commits, version)

    def run(self) -> ReleaseNotes:
        """
        Generate notes, write the notes file and publish the step output.

        Errors writing either artifact propagate to the caller.
        """
        notes = self.generate()

        logger.info("Generated release notes:")
        logger.info(notes.content)

        publish_step_output(self.config.notes.output_name, notes.content, self.environ)

        saved_path = write_release_notes(notes.content, self.config.notes.output_path)
        logger.info(f"Release notes saved to: {saved_path}")

        return notes
