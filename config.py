# config.py - Configuration management

import os
from dotenv import load_dotenv

from exceptions import ConfigError

DEFAULT_ENV_FILE = ".env"

# Attribute name -> environment variable name
SETTINGS = {
    # Mail submission
    "SMTP_HOST": "SmtpHost",
    "SMTP_PORT": "SmtpPort",
    "SMTP_USERNAME": "SmtpUsername",
    "SMTP_PASSWORD": "SmtpPassword",
    "SMTP_FROM_EMAIL": "SmtpFromEmail",
    "SEND_EMAIL_TO": "SendEmailTo",  # single address
    # Campaign service
    "MAILCHIMP_SERVER_PREFIX": "MailChimpServerPrefix",
    "MAILCHIMP_API_KEY": "MailChimpApiKey",
    # Short link service
    "URLDAY_LINK_ID": "UrlDayLinkId",
    "URLDAY_API_KEY": "UrlDayApiKey",
}


class Config:
    """
    Configuration for one sync run.

    The env file is loaded into the process environment first; variables that
    are already set win. Every setting is a plain string and an unset variable
    becomes "". Values are not validated here.
    """

    def __init__(self, env_file: str = DEFAULT_ENV_FILE):
        self.ENV_FILE = env_file
        self._load_env_file()

        for attr, env_name in SETTINGS.items():
            setattr(self, attr, os.getenv(env_name, ""))

    def _load_env_file(self):
        """Populate os.environ from the env file, failing if it can't be read."""
        if not os.path.isfile(self.ENV_FILE):
            raise ConfigError(f"Error loading {self.ENV_FILE} file: not found")
        try:
            load_dotenv(self.ENV_FILE, override=False)
        except OSError as exc:
            raise ConfigError(f"Error loading {self.ENV_FILE} file: {exc}") from exc

    def missing_settings(self):
        """Environment variable names whose value is empty."""
        return [env_name for attr, env_name in SETTINGS.items() if not getattr(self, attr)]

    def __str__(self):
        """String representation for debugging (without exposing keys)"""
        return f"""
Config Status:
- SMTP Host: {self.SMTP_HOST or '❌'}:{self.SMTP_PORT or '❌'}
- SMTP Password: {'✅' if self.SMTP_PASSWORD else '❌'}
- Notify: {self.SEND_EMAIL_TO or '❌'}
- MailChimp Prefix: {self.MAILCHIMP_SERVER_PREFIX or '❌'}
- MailChimp API Key: {'✅' if self.MAILCHIMP_API_KEY else '❌'}
- UrlDay Link: {self.URLDAY_LINK_ID or '❌'}
- UrlDay API Key: {'✅' if self.URLDAY_API_KEY else '❌'}
        """
