"""
link_sync.py - Main entry point: keeps the UrlDay short link pointed at the
latest sent Mailchimp campaign.
"""

import logging
import sys

from campaigns import get_latest_sent_campaign_url
from config import Config
from exceptions import AutomationError, ConfigError
from models import SyncResult
from notifier import SUCCESS_SUBJECT, notify, report_error
from short_link import get_current_destination, update_destination

logger = logging.getLogger(__name__)


def run_sync(config: Config) -> SyncResult:
    """
    Compares the short link destination with the latest campaign archive and
    updates the link when they differ. Errors propagate to the caller.
    """
    current_destination = get_current_destination(config)
    campaign_url = get_latest_sent_campaign_url(config)

    result = SyncResult(current_destination=current_destination, campaign_url=campaign_url)
    if result.update_required:
        logger.info("Destination differs from latest campaign; updating short link")
        update_destination(config, campaign_url)
        result.updated = True
    else:
        logger.info("Short link already points at the latest campaign")
    return result


def main() -> int:
    """Run one sync and report it. Returns the process exit code."""
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=logging.INFO
    )

    try:
        config = Config()
    except ConfigError as e:
        logger.error("Configuration failed: %s", e)
        return 1

    missing = config.missing_settings()
    if missing:
        logger.warning("Empty settings: %s", ", ".join(missing))

    try:
        result = run_sync(config)
    except AutomationError as e:
        if not report_error(config, e):
            logger.warning("Error notification could not be sent")
        logger.error("Sync failed: %s", e)
        return 1

    if not notify(config, SUCCESS_SUBJECT, result.summary()):
        logger.warning("Sync succeeded but the status email could not be sent")
    return 0


if __name__ == '__main__':
    sys.exit(main())
