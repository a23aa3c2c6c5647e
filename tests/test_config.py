import pytest

from app.core.config import validate_settings
from tests.helpers import TWILIO_CREDENTIALS, make_settings


def test_nothing_configured_degrades_both_dependencies():
    config = make_settings()

    assert config.composer_available is False
    assert config.gateway_available is False
    assert validate_settings(config) is True


def test_blank_credentials_count_as_unset():
    config = make_settings(OPENAI_API_KEY="   ", TWILIO_ACCOUNT_SID="", TWILIO_AUTH_TOKEN="x", TWILIO_PHONE_NUMBER="+1")

    assert config.OPENAI_API_KEY is None
    assert config.composer_available is False
    assert config.gateway_available is False


def test_full_twilio_credentials_enable_gateway():
    config = make_settings(**TWILIO_CREDENTIALS)

    assert config.gateway_available is True


def test_openai_key_enables_composer():
    assert make_settings(OPENAI_API_KEY="sk-test").composer_available is True


def test_base_urls_drop_trailing_slash():
    config = make_settings(TWILIO_API_BASE_URL="http://localhost:4010/")

    assert config.TWILIO_API_BASE_URL == "http://localhost:4010"


def test_defaults():
    config = make_settings(YOUR_NAME="the business owner", YOUR_BUSINESS="our business")

    assert config.OPENAI_MODEL == "gpt-4"
    assert config.OPENAI_MAX_TOKENS == 150
    assert config.YOUR_NAME == "the business owner"
    assert config.API_PREFIX == "/api"


def test_invalid_timeout_rejected():
    with pytest.raises(ValueError):
        validate_settings(make_settings(TWILIO_TIMEOUT=0))
