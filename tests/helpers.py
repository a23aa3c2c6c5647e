import json
import urllib.parse

import httpx

from app.core.config import Settings

TWILIO_CREDENTIALS = {
    "TWILIO_ACCOUNT_SID": "AC123",
    "TWILIO_AUTH_TOKEN": "token-xyz",
    "TWILIO_PHONE_NUMBER": "+15555550111",
}


def make_settings(**overrides) -> Settings:
    """Settings isolated from the process environment and any .env file."""
    values = {
        "OPENAI_API_KEY": None,
        "TWILIO_ACCOUNT_SID": None,
        "TWILIO_AUTH_TOKEN": None,
        "TWILIO_PHONE_NUMBER": None,
        "YOUR_NAME": "Sam",
        "YOUR_BUSINESS": "Sam's Bakery",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def form_data(request: httpx.Request) -> dict:
    parsed = urllib.parse.parse_qs(request.content.decode("utf-8"))
    return {key: value[0] for key, value in parsed.items()}


def json_body(request: httpx.Request) -> dict:
    return json.loads(request.content.decode("utf-8"))


def openai_reply(content: str) -> httpx.Response:
    return httpx.Response(
        200,
        json={"choices": [{"message": {"role": "assistant", "content": content}}]},
    )
