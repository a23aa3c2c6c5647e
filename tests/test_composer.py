import asyncio

import httpx

from app.services.composer_service import MessageComposer, render_template
from tests.helpers import json_body, make_settings, openai_reply


def compose(composer: MessageComposer, category, context):
    return asyncio.run(composer.compose(category, context))


def test_reminder_template_without_openai():
    composer = MessageComposer(make_settings())

    text = compose(composer, "reminder", "appointment at 2pm")

    assert text == (
        "Hey! Just a friendly reminder about appointment at 2pm. "
        "Looking forward to connecting! - Sam"
    )
    assert compose(composer, "reminder", "appointment at 2pm") == text


def test_every_known_category_has_template():
    expected = {
        "followup": "Hi! Following up on the quote. Let me know if you have any questions or if there's anything I can help with. - Sam",
        "reminder": "Hey! Just a friendly reminder about the quote. Looking forward to connecting! - Sam",
        "greeting": "Hi there! the quote Hope you're doing well! - Sam",
        "thankyou": "Thank you so much! the quote Really appreciate it! - Sam",
        "update": "Quick update: the quote Let me know if you need anything else. - Sam",
        "custom": "the quote",
    }
    for category, text in expected.items():
        assert render_template(category, "the quote", "Sam") == text


def test_unknown_category_returns_context_unchanged():
    composer = MessageComposer(make_settings())

    assert compose(composer, "bogus", "Call me back {today}") == "Call me back {today}"
    assert compose(composer, None, "plain text") == "plain text"


def test_default_sender_name_is_used_in_templates():
    composer = MessageComposer(make_settings(YOUR_NAME="the business owner"))

    text = compose(composer, "update", "Order shipped.")

    assert text.endswith("- the business owner")


def test_openai_completion_is_trimmed_and_used():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return openai_reply("  Hi Jo, see you at 2pm! - Sam \n")

    composer = MessageComposer(
        make_settings(OPENAI_API_KEY="sk-test"),
        transport=httpx.MockTransport(handler),
    )

    text = compose(composer, "reminder", "appointment at 2pm")

    assert text == "Hi Jo, see you at 2pm! - Sam"
    assert len(seen) == 1
    request = seen[0]
    assert str(request.url) == "https://api.openai.com/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test"

    body = json_body(request)
    assert body["model"] == "gpt-4"
    assert body["max_tokens"] == 150
    assert body["temperature"] == 0.7
    assert body["messages"][0]["role"] == "system"
    assert "You are Sam from Sam's Bakery." in body["messages"][0]["content"]
    assert body["messages"][1] == {
        "role": "user",
        "content": "Write a reminder message with this context: appointment at 2pm",
    }


def test_openai_http_error_falls_back_to_template():
    composer = MessageComposer(
        make_settings(OPENAI_API_KEY="sk-test"),
        transport=httpx.MockTransport(lambda request: httpx.Response(429, text="rate limited")),
    )

    text = compose(composer, "thankyou", "Great meeting today.")

    assert text == "Thank you so much! Great meeting today. Really appreciate it! - Sam"


def test_openai_network_error_falls_back_to_template():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    composer = MessageComposer(
        make_settings(OPENAI_API_KEY="sk-test"),
        transport=httpx.MockTransport(handler),
    )

    assert compose(composer, "custom", "Store closes early") == "Store closes early"


def test_openai_malformed_response_falls_back_to_template():
    composer = MessageComposer(
        make_settings(OPENAI_API_KEY="sk-test"),
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"choices": []})),
    )

    text = compose(composer, "greeting", "Welcome aboard!")

    assert text == "Hi there! Welcome aboard! Hope you're doing well! - Sam"


def test_openai_not_called_without_key():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("OpenAI must not be called without a key")

    composer = MessageComposer(make_settings(), transport=httpx.MockTransport(handler))

    assert compose(composer, "custom", "hello") == "hello"
