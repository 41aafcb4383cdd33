"""
Configuration Management

Settings for the release-note generator and the Slack approval poster,
loaded from environment variables or a YAML file.
"""

import os
import sys
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Tuple
from pathlib import Path
import logging
from logging.handlers import RotatingFileHandler


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class NotesConfig:
    """Release note generation settings"""
    output_path: str = "release-notes.md"
    default_version: str = "v1.0.0"
    fallback_tag: str = "v0.0.0"
    output_name: str = "notes"
    repo_path: str = "."


@dataclass
class SlackConfig:
    """Slack Web API settings"""
    token: Optional[str] = None
    channel: str = "#releases"
    api_base_url: str = "https://slack.com/api"
    timeout_seconds: float = 30.0
    message_info_path: str = "slack-message-info.json"


@dataclass
class LoggingConfig:
    """Logging settings"""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


# Environment variables recognised per section: field -> (variable, converter)
ENV_SETTINGS = {
    'notes': {
        'output_path': ("RELEASE_NOTES_PATH", str),
        'repo_path': ("GIT_REPO_PATH", str),
    },
    'slack': {
        'token': ("SLACK_BOT_TOKEN", str),
        'channel': ("SLACK_CHANNEL", str),
        'api_base_url': ("SLACK_API_URL", str),
        'timeout_seconds': ("SLACK_TIMEOUT", float),
        'message_info_path': ("SLACK_MESSAGE_INFO_PATH", str),
    },
    'logging': {
        'level': ("LOG_LEVEL", str),
        'format': ("LOG_FORMAT", str),
        'file_path': ("LOG_FILE", str),
        'max_file_size': ("LOG_MAX_SIZE", int),
        'backup_count': ("LOG_BACKUP_COUNT", int),
    },
}


def _read_env(errors: List[Tuple[str, str]]) -> Dict[str, Dict[str, Any]]:
    """
    Collect settings from the environment, grouped by section.

    Unset and empty variables are skipped. Values that fail conversion are
    reported in `errors` as (section, message) and left at their defaults.
    """
    overrides: Dict[str, Dict[str, Any]] = {}
    for section, fields in ENV_SETTINGS.items():
        values = {}
        for name, (env_name, convert) in fields.items():
            raw = os.getenv(env_name)
            if not raw:
                continue
            try:
                values[name] = convert(raw)
            except ValueError:
                errors.append((section, f"Invalid {env_name}: {raw!r}"))
        overrides[section] = values
    return overrides


@dataclass
class AppConfig:
    """Complete application settings"""
    notes: NotesConfig = field(default_factory=NotesConfig)
    slack: SlackConfig = field(default_factory=SlackConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    # (section, message) problems found while loading, reported by validate()
    load_errors: List[Tuple[str, str]] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load settings from environment variables"""
        errors: List[Tuple[str, str]] = []
        env = _read_env(errors)
        return cls(
            notes=NotesConfig(**env['notes']),
            slack=SlackConfig(**env['slack']),
            logging=LoggingConfig(**env['logging']),
            load_errors=errors,
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """Load settings from a YAML file.

        Environment variables take precedence over values in the file, so a
        checked-in config can still be overridden per CI run. The Slack token
        is expected to come from the environment.
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        errors: List[Tuple[str, str]] = []
        env = _read_env(errors)

        sections = {}
        for section in ENV_SETTINGS:
            section_data = config_data.get(section) or {}
            if not isinstance(section_data, dict):
                raise ValueError(f"Config section '{section}' must be a mapping: {config_path}")
            sections[section] = {**section_data, **env[section]}

        return cls(
            notes=NotesConfig(**sections['notes']),
            slack=SlackConfig(**sections['slack']),
            logging=LoggingConfig(**sections['logging']),
            load_errors=errors,
        )

    def validate(self, require_slack: bool = False) -> None:
        """
        Check settings, raising a single ValueError listing every problem.

        Slack settings are only checked when `require_slack` is set, so the
        note generator is not blocked by configuration it never uses.
        """
        errors = [
            message for section, message in self.load_errors
            if require_slack or section != 'slack'
        ]

        if require_slack:
            if not self.slack.token:
                errors.append("Slack bot token is required (set SLACK_BOT_TOKEN)")

            if not self.slack.channel:
                errors.append("Slack channel cannot be empty")

            if self.slack.timeout_seconds <= 0:
                errors.append("Slack timeout must be positive")

            if not self.slack.message_info_path:
                errors.append("Message info path cannot be empty")

        if not self.notes.output_path:
            errors.append("Release notes output path cannot be empty")

        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a dictionary"""
        return {
            'notes': {
                'output_path': self.notes.output_path,
                'default_version': self.notes.default_version,
                'fallback_tag': self.notes.fallback_tag,
                'output_name': self.notes.output_name,
                'repo_path': self.notes.repo_path,
            },
            'slack': {
                'channel': self.slack.channel,
                'api_base_url': self.slack.api_base_url,
                'timeout_seconds': self.slack.timeout_seconds,
                'message_info_path': self.slack.message_info_path,
                # token is left out on purpose
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
        }


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure the root logger for a CI step.

    INFO and DEBUG go to stdout so operators see them in the job log,
    WARNING and above go to stderr. A rotating file handler is added
    when a log file is configured.
    """
    formatter = logging.Formatter(config.format)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(_BelowWarning())
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(formatter)

    handlers = [stdout_handler, stderr_handler]

    if config.file_path:
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, config.level.upper()),
        handlers=handlers,
        force=True,
    )


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load settings from YAML when a path is given, otherwise from the environment"""
    if config_path:
        return AppConfig.from_yaml(config_path)
    return AppConfig.from_env()
