"""
Slack Web API Client

Posts messages through chat.postMessage. Each call is sent once: there
is no retry or backoff, and every request is bounded by a timeout.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..models.message import ApprovalMessage


logger = logging.getLogger(__name__)


class SlackAPIError(Exception):
    """Slack API related errors"""
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error: Optional[str] = None,
        response_data: Optional[Dict] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.response_data = response_data


@dataclass(frozen=True)
class PostResult:
    """Identifiers returned by chat.postMessage"""
    channel: str
    ts: str


class SlackClient:
    """
    Slack Web API client with bot token authentication.
    """

    def __init__(self, token: str, base_url: str = "https://slack.com/api", timeout: float = 30.0):
        """
        Initialize Slack client.

        Args:
            token: Bot user OAuth token (xoxb-...)
            base_url: Slack Web API base URL
            timeout: Seconds to wait for a response before failing
        """
        if not token:
            raise ValueError("Slack token is required")

        self.token = token
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create requests session with authentication and retries disabled."""
        session = requests.Session()

        adapter = HTTPAdapter(max_retries=Retry(total=0, redirect=0, raise_on_status=False))
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.headers.update({
            'Authorization': f'Bearer {self.token}',
            'Content-Type': 'application/json; charset=utf-8',
            'User-Agent': 'RC-Release-Notifier/1.0'
        })

        return session

    def _make_request(self, method: str, api_method: str, **kwargs) -> Dict:
        """
        Call a Slack Web API method.

        Args:
            method: HTTP method
            api_method: Slack method name, e.g. chat.postMessage
            **kwargs: Additional arguments for requests

        Returns:
            Decoded response body

        Raises:
            SlackAPIError: For transport errors, HTTP errors and `ok: false` responses
        """
        url = f"{self.base_url}/{api_method.lstrip('/')}"

        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Request to {api_method} failed: {e}")
            raise SlackAPIError(f"Request failed: {str(e)}") from e

        if not response.ok:
            raise SlackAPIError(
                f"Slack API error: HTTP {response.status_code} from {api_method}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise SlackAPIError(
                f"Slack API returned a non-JSON response from {api_method}",
                status_code=response.status_code,
            ) from e

        if not data.get('ok'):
            error = data.get('error', 'unknown_error')
            raise SlackAPIError(
                f"Slack API error: {error}",
                status_code=response.status_code,
                error=error,
                response_data=data,
            )

        return data

    def post_message(self, message: ApprovalMessage) -> PostResult:
        """
        Post a message to its channel.

        Args:
            message: ApprovalMessage to send

        Returns:
            PostResult with the resolved channel ID and message timestamp
        """
        logger.info(f"Posting release approval request to Slack channel: {message.channel}")

        data = self._make_request('POST', 'chat.postMessage', json=message.to_payload())

        channel = data.get('channel')
        ts = data.get('ts')
        if not channel or not ts:
            raise SlackAPIError(
                "Slack API response is missing channel or ts",
                response_data=data,
            )

        return PostResult(channel=channel, ts=ts)
