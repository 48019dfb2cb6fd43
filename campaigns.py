"""
campaigns.py - Looks up the most recently sent Mailchimp campaign.
"""

import logging

import requests

from config import Config
from exceptions import ServiceError
from models import CampaignList
from short_link import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

CAMPAIGNS_ENDPOINT = "https://{prefix}.api.mailchimp.com/3.0/campaigns"
LATEST_SENT_QUERY = {
    "status": "sent",
    "sort_field": "send_time",
    "sort_dir": "DESC",
    "count": 1,
}
# Mailchimp ignores the basic auth user name; only the API key matters.
BASIC_AUTH_USER = "anystring"


def get_latest_sent_campaign_url(config: Config, *, timeout: int = DEFAULT_TIMEOUT) -> str:
    """
    Returns the archive URL of the latest sent campaign, or "" unless the
    service returned exactly one campaign.
    """
    url = CAMPAIGNS_ENDPOINT.format(prefix=config.MAILCHIMP_SERVER_PREFIX)

    try:
        response = requests.get(
            url,
            params=LATEST_SENT_QUERY,
            headers={"Accept": "application/json"},
            auth=(BASIC_AUTH_USER, config.MAILCHIMP_API_KEY),
            timeout=timeout,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        raise ServiceError(f"MailChimp lookup failed: {exc}") from exc

    try:
        campaign_list = CampaignList.from_dict(response.json())
    except ValueError as exc:
        raise ServiceError(f"MailChimp returned an unreadable payload: {exc}") from exc

    archive_url = campaign_list.latest_archive_url()
    if not archive_url:
        logger.warning(
            "Expected exactly one sent campaign, got %d (total_items=%s)",
            len(campaign_list.campaigns),
            campaign_list.total_items,
        )
    else:
        logger.info("Latest sent campaign archive: %s", archive_url)
    return archive_url
