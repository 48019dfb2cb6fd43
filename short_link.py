"""
short_link.py - Reads and rewrites the destination of the UrlDay short link.
"""

import logging

import requests

from config import Config
from exceptions import ServiceError, UpdateFailedError
from models import ShortLinkState

logger = logging.getLogger(__name__)

URLDAY_LINKS_ENDPOINT = "https://www.urlday.com/api/v1/links/"
DEFAULT_TIMEOUT = 30


def _link_url(config: Config) -> str:
    return f"{URLDAY_LINKS_ENDPOINT}{config.URLDAY_LINK_ID}"


def _auth_headers(config: Config) -> dict:
    return {"Authorization": f"Bearer {config.URLDAY_API_KEY}"}


def get_current_destination(config: Config, *, timeout: int = DEFAULT_TIMEOUT) -> str:
    """
    Fetches the short link and returns the URL it currently redirects to.

    Raises:
        ServiceError: on transport failure, a non-2xx answer or an undecodable body.
    """
    headers = {"Accept": "application/json", **_auth_headers(config)}

    try:
        response = requests.get(_link_url(config), headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise ServiceError(f"UrlDay lookup failed: {exc}") from exc

    try:
        state = ShortLinkState.from_dict(response.json())
    except ValueError as exc:
        raise ServiceError(f"UrlDay returned an unreadable payload: {exc}") from exc

    logger.info("Short link %s currently points to %s", state.short_url or config.URLDAY_LINK_ID, state.url)
    return state.url


def update_destination(config: Config, new_url: str, *, timeout: int = DEFAULT_TIMEOUT) -> None:
    """
    Points the short link at new_url. Only HTTP 200 counts as success.

    Raises:
        ServiceError: on transport failure.
        UpdateFailedError: when the service answers with any other status.
    """
    try:
        response = requests.put(
            _link_url(config),
            data={"url": new_url},
            headers=_auth_headers(config),
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise ServiceError(f"UrlDay update failed: {exc}") from exc

    if response.status_code != 200:
        raise UpdateFailedError(response.status_code)

    logger.info("Short link %s updated to %s", config.URLDAY_LINK_ID, new_url)
