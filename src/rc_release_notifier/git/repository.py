"""
Git Repository Reader

Read-only queries against the local git checkout: the most recent tag
and the commits made since it. Both queries are best-effort; missing
history degrades to defaults instead of raising.
"""

import logging
import subprocess
from typing import List, Optional

from ..models.release import CommitLine


logger = logging.getLogger(__name__)

NO_TAG_SENTINEL = "v0.0.0"


class GitRepository:
    """
    Wrapper around the `git` command line for a single working tree.
    """

    def __init__(self, path: str = ".", fallback_tag: str = NO_TAG_SENTINEL, git_binary: str = "git"):
        """
        Initialize repository reader.

        Args:
            path: Working tree to run git in
            fallback_tag: Tag reported when no tag can be resolved
            git_binary: git executable name or path
        """
        self.path = path
        self.fallback_tag = fallback_tag
        self.git_binary = git_binary

    def _run(self, *args: str) -> Optional[str]:
        """Run a git command, returning stdout or None on any failure."""
        command = [self.git_binary, *args]
        try:
            result = subprocess.run(
                command,
                cwd=self.path,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            logger.debug(f"git command failed ({e.returncode}): {' '.join(command)}: {(e.stderr or '').strip()}")
            return None
        except OSError as e:
            logger.warning(f"Unable to run git: {e}")
            return None
        return result.stdout

    def resolve_latest_tag(self) -> str:
        """
        Get the most recent tag reachable from HEAD.

        Returns:
            Tag name, or the fallback tag when there is none
        """
        output = self._run("describe", "--tags", "--abbrev=0")
        tag = output.strip() if output else ""
        if not tag:
            logger.info(f"No tags found, using {self.fallback_tag}")
            return self.fallback_tag

        logger.info(f"Latest tag: {tag}")
        return tag

    def collect_commits_since(self, tag: str) -> List[CommitLine]:
        """
        Get one-line commit summaries after `tag` up to HEAD, newest first.

        Args:
            tag: Exclusive lower bound of the range

        Returns:
            List of CommitLine objects, empty when the range cannot be read
        """
        output = self._run("log", f"{tag}..HEAD", "--oneline", "--no-decorate")
        if output is None:
            logger.info(f"Could not read commits since {tag}")
            return []

        commits = [CommitLine.parse(line.strip()) for line in output.strip().split("\n") if line.strip()]
        logger.info(f"Found {len(commits)} commits since {tag}")
        return commits
