"""
app/services/composer_service.py

Purpose: Message text composition

- Asks OpenAI for a personal message when an API key is configured
- Falls back to fixed templates when OpenAI is unset or fails
- Never raises: callers always get text back
"""

import httpx
from typing import Any, Dict, Optional

from app.core.config import Settings, settings as default_settings
from app.core.exceptions import ExternalServiceError
from app.core.logging import get_logger
from utils.constants import (
    COMPOSER_SYSTEM_PROMPT,
    COMPOSER_USER_PROMPT,
    CUSTOM_TEMPLATE_KEY,
    MESSAGE_TEMPLATES,
)

logger = get_logger(__name__)


def render_template(category: Optional[str], context: str, sender_name: str) -> str:
    """
    Fills the fallback template for a category.

    Unknown (or missing) categories are treated as "custom",
    which returns the context unchanged.
    """
    template = MESSAGE_TEMPLATES.get(category or "", MESSAGE_TEMPLATES[CUSTOM_TEMPLATE_KEY])
    return template.format(context=context, name=sender_name)


class MessageComposer:
    """Produces SMS text for a category and free-text context."""

    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.config = config or default_settings
        self._transport = transport

    async def compose(self, category: Optional[str], context: str) -> str:
        """
        Composes message text.

        Args:
            category: Message category (followup, reminder, ...)
            context: Free-text context supplied by the operator

        Returns:
            Generated text if OpenAI answered, otherwise the template text
        """
        if self.config.composer_available:
            try:
                return await self._generate(category, context)
            except ExternalServiceError as e:
                logger.warning(f"OpenAI generation failed for {category}, using template: {e.message}")
            except Exception as e:
                logger.error(f"Unexpected OpenAI error, using template: {e}", exc_info=True)

        return render_template(category, context, self.config.YOUR_NAME)

    def build_payload(self, category: Optional[str], context: str) -> Dict[str, Any]:
        """Builds the chat completion request body."""
        system_prompt = COMPOSER_SYSTEM_PROMPT.format(
            name=self.config.YOUR_NAME,
            business=self.config.YOUR_BUSINESS
        )
        user_prompt = COMPOSER_USER_PROMPT.format(category=category, context=context)

        return {
            "model": self.config.OPENAI_MODEL,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_tokens": self.config.OPENAI_MAX_TOKENS,
            "temperature": self.config.OPENAI_TEMPERATURE,
        }

    async def _generate(self, category: Optional[str], context: str) -> str:
        """
        Requests one chat completion from OpenAI.

        Raises:
            ExternalServiceError: On any transport, HTTP or response-shape failure
        """
        url = f"{self.config.OPENAI_API_BASE_URL}/chat/completions"
        headers = {"Authorization": f"Bearer {self.config.OPENAI_API_KEY}"}

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self.config.OPENAI_TIMEOUT
            ) as client:
                response = await client.post(
                    url,
                    json=self.build_payload(category, context),
                    headers=headers
                )
        except httpx.TimeoutException as e:
            raise ExternalServiceError("OpenAI request timed out") from e
        except httpx.RequestError as e:
            raise ExternalServiceError(f"OpenAI request failed: {e}") from e

        if response.status_code != 200:
            logger.error(f"OpenAI API error: {response.status_code} - {response.text[:300]}")
            raise ExternalServiceError(f"OpenAI API error: {response.status_code}")

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ExternalServiceError("Malformed OpenAI response") from e

        if not isinstance(content, str) or not content.strip():
            raise ExternalServiceError("Empty OpenAI completion")

        logger.info(f"{category} message generated with OpenAI")
        return content.strip()
