import os

import pytest

from config import Config, SETTINGS

SAMPLE_ENV = {
    "SmtpHost": "smtp.example.com",
    "SmtpPort": "587",
    "SmtpUsername": "mailer",
    "SmtpPassword": "secret",
    "SmtpFromEmail": "robot@example.com",
    "SendEmailTo": "admin@example.com",
    "MailChimpServerPrefix": "us21",
    "MailChimpApiKey": "mc-key",
    "UrlDayLinkId": "4242",
    "UrlDayApiKey": "ud-key",
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep settings from the developer's shell out of the tests."""
    for env_name in SETTINGS.values():
        monkeypatch.delenv(env_name, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for env_name in SETTINGS.values():
        os.environ.pop(env_name, None)


@pytest.fixture
def env_file(tmp_path):
    path = tmp_path / ".env"
    path.write_text("\n".join(f"{key}={value}" for key, value in SAMPLE_ENV.items()) + "\n")
    return path


@pytest.fixture
def config(env_file):
    return Config(env_file=str(env_file))
