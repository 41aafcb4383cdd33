"""
Message Status File

Persists the identifiers of a posted approval request so a later
process can find the message again.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .models.message import MessageInfo, MessageInfoRecord


logger = logging.getLogger(__name__)


class StatusFileError(Exception):
    """Status file is missing or malformed"""


def persist_message_info(info: MessageInfo, path: str) -> Path:
    """
    Write MessageInfo as pretty-printed JSON, replacing any previous file.

    Returns:
        Absolute path of the written file
    """
    record = MessageInfoRecord(**info.to_dict())
    status_path = Path(path)
    status_path.write_text(
        json.dumps(record.model_dump(), indent=2, ensure_ascii=False),
        encoding='utf-8',
    )
    logger.debug(f"Persisted message info for {info.version} to {status_path}")
    return status_path.resolve()


def load_message_info(path: str) -> MessageInfo:
    """
    Read MessageInfo back from a status file.

    Raises:
        StatusFileError: When the file is missing, not JSON, or has the wrong shape
    """
    status_path = Path(path)
    if not status_path.is_file():
        raise StatusFileError(f"Status file not found: {status_path}")

    try:
        data = json.loads(status_path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise StatusFileError(f"Status file is not valid JSON: {status_path}: {e}") from e

    if not isinstance(data, dict):
        raise StatusFileError(f"Status file must contain a JSON object: {status_path}")

    try:
        return MessageInfoRecord(**data).to_message_info()
    except ValidationError as e:
        raise StatusFileError(f"Invalid status file {status_path}: {e}") from e
