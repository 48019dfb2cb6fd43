"""
notifier.py - Sends the plain-text status and error emails.

Reporting never raises and never exits: callers get back whether the email
went out and decide what happens next.
"""

import logging
import smtplib
from email.message import EmailMessage

from config import Config

logger = logging.getLogger(__name__)

SUCCESS_SUBJECT = "[ADMC][SUCCESS] MailChimp To Website Automation"
ERROR_SUBJECT = "[ADMC][ERROR] with MailChimp to Website Automation"
SMTP_TIMEOUT = 30


def build_message(config: Config, subject: str, body: str) -> EmailMessage:
    msg = EmailMessage()
    msg["Subject"] = subject
    msg["From"] = config.SMTP_FROM_EMAIL
    # TODO: split SendEmailTo on commas once more than one recipient is needed
    msg["To"] = config.SEND_EMAIL_TO
    msg.set_content(body)
    return msg


def notify(config: Config, subject: str, body: str) -> bool:
    """
    Sends one email to the configured recipient. Returns True when the server
    accepted it, False when anything on the way failed.
    """
    username = config.SMTP_USERNAME or config.SMTP_FROM_EMAIL

    try:
        msg = build_message(config, subject, body)
        with smtplib.SMTP(config.SMTP_HOST, int(config.SMTP_PORT or 0), timeout=SMTP_TIMEOUT) as server:
            server.ehlo()
            if server.has_extn("starttls"):
                server.starttls()
                server.ehlo()
            server.login(username, config.SMTP_PASSWORD)
            server.send_message(msg, from_addr=config.SMTP_FROM_EMAIL, to_addrs=[config.SEND_EMAIL_TO])
    except smtplib.SMTPAuthenticationError:
        logger.error("SMTP authentication failed for %s", username)
        return False
    except (smtplib.SMTPException, OSError, ValueError) as exc:
        logger.error("Failed to send '%s' email: %s", subject, exc)
        return False

    logger.info("Email '%s' sent to %s", subject, config.SEND_EMAIL_TO)
    return True


def report_error(config: Config, error: Exception) -> bool:
    """Emails the error message. Terminating the run is up to the caller."""
    return notify(config, ERROR_SUBJECT, f"Error Message: {error}")
