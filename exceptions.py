"""
exceptions.py - Errors raised while syncing the short link.

Helpers raise these; only link_sync.main decides whether to notify and exit.
"""


class AutomationError(Exception):
    """Base class for every failure of a sync run."""


class ConfigError(AutomationError):
    """The env file could not be loaded. Raised before any network activity."""


class ServiceError(AutomationError):
    """Transport or decode failure talking to the short link or campaign service."""


class UpdateFailedError(AutomationError):
    """The short link service answered the update with a status other than 200."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"issue with UrlDay update, response status not 200 (got {status_code})")
