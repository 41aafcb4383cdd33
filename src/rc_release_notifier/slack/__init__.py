"""
Slack Integration Layer

Slack Web API client used to post approval requests.
"""

from .client import SlackClient, SlackAPIError, PostResult

__all__ = ['SlackClient', 'SlackAPIError', 'PostResult']
