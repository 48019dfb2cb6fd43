import pytest

from config import Config, SETTINGS
from exceptions import ConfigError


def test_settings_are_read_from_env_file(config):
    assert config.SMTP_HOST == "smtp.example.com"
    assert config.SMTP_PORT == "587"
    assert config.SEND_EMAIL_TO == "admin@example.com"
    assert config.MAILCHIMP_SERVER_PREFIX == "us21"
    assert config.URLDAY_LINK_ID == "4242"
    assert config.URLDAY_API_KEY == "ud-key"
    assert config.missing_settings() == []


def test_missing_values_become_empty_strings(tmp_path):
    path = tmp_path / ".env"
    path.write_text("SmtpHost=smtp.example.com\n")

    config = Config(env_file=str(path))

    assert config.SMTP_HOST == "smtp.example.com"
    assert config.MAILCHIMP_API_KEY == ""
    assert config.URLDAY_LINK_ID == ""
    assert "MailChimpApiKey" in config.missing_settings()
    assert "SmtpHost" not in config.missing_settings()


def test_process_environment_wins_over_env_file(env_file, monkeypatch):
    monkeypatch.setenv("UrlDayLinkId", "from-shell")

    config = Config(env_file=str(env_file))

    assert config.URLDAY_LINK_ID == "from-shell"


def test_missing_env_file_is_fatal(tmp_path):
    with pytest.raises(ConfigError):
        Config(env_file=str(tmp_path / "nope.env"))


def test_str_does_not_expose_keys(config):
    text = str(config)
    assert "mc-key" not in text
    assert "ud-key" not in text
    assert "secret" not in text
    assert "us21" in text


def test_every_setting_maps_to_its_environment_variable(env_file, monkeypatch):
    for attr, env_name in SETTINGS.items():
        monkeypatch.setenv(env_name, f"value-of-{env_name}")

    config = Config(env_file=str(env_file))

    for attr, env_name in SETTINGS.items():
        assert getattr(config, attr) == f"value-of-{env_name}"
    assert len(SETTINGS) == 10
