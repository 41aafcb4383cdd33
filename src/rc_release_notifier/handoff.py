"""
Stage Hand-off

Passes release notes from the generator step to the poster step through
the release notes file, CI step outputs and environment variables.
"""

import logging
import os
import uuid
from pathlib import Path
from typing import Mapping, Optional

from .models.message import MessageContext


logger = logging.getLogger(__name__)

RELEASE_NOTES_ENV = "RELEASE_NOTES"
UNKNOWN_VERSION = "Unknown Version"
NOT_AVAILABLE = "N/A"


class MissingInputError(Exception):
    """Required input was not provided through any hand-off channel"""


def _env(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def resolve_release_notes(path: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Get release notes from RELEASE_NOTES, falling back to the notes file.

    The file is only read when the environment variable is unset or empty.

    Raises:
        MissingInputError: When neither source is available
    """
    notes = _env(environ).get(RELEASE_NOTES_ENV)
    if notes:
        logger.debug(f"Using release notes from {RELEASE_NOTES_ENV}")
        return notes

    notes_path = Path(path)
    if not notes_path.is_file():
        raise MissingInputError(
            f"No release notes found in {RELEASE_NOTES_ENV} or {notes_path}"
        )

    logger.debug(f"Reading release notes from {notes_path}")
    return notes_path.read_text(encoding='utf-8')


def resolve_version(environ: Optional[Mapping[str, str]] = None) -> str:
    """Version label: INPUT_VERSION, then GITHUB_REF_NAME, then a placeholder."""
    env = _env(environ)
    return env.get("INPUT_VERSION") or env.get("GITHUB_REF_NAME") or UNKNOWN_VERSION


def resolve_target_version(default: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Version the generator writes notes for: INPUT_VERSION or `default`."""
    return _env(environ).get("INPUT_VERSION") or default


def resolve_context(environ: Optional[Mapping[str, str]] = None) -> MessageContext:
    env = _env(environ)
    return MessageContext(
        repository=env.get("GITHUB_REPOSITORY") or NOT_AVAILABLE,
        run_id=env.get("GITHUB_RUN_ID") or NOT_AVAILABLE,
    )


def write_release_notes(content: str, path: str) -> Path:
    """Write release notes, replacing any previous file."""
    notes_path = Path(path)
    notes_path.write_text(content, encoding='utf-8')
    return notes_path.resolve()


def _escape_workflow_command(value: str) -> str:
    return value.replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')


def publish_step_output(name: str, value: str, environ: Optional[Mapping[str, str]] = None) -> None:
    """
    Expose a value as a CI step output.

    Appends a multiline block to the GITHUB_OUTPUT file when the runner
    provides one; otherwise prints the legacy set-output workflow command.
    """
    output_path = _env(environ).get("GITHUB_OUTPUT")
    if not output_path:
        print(f"::set-output name={name}::{_escape_workflow_command(value)}")
        return

    delimiter = f"EOF_{uuid.uuid4().hex}"
    while delimiter in value:
        delimiter = f"EOF_{uuid.uuid4().hex}"

    body = value if value.endswith("\n") else value + "\n"
    with open(output_path, "a", encoding="utf-8") as handle:
        handle.write(f"{name}<<{delimiter}\n{body}{delimiter}\n")
    logger.debug(f"Wrote step output '{name}' to {output_path}")
