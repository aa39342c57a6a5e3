"""OpenAI SDK wrapper used for code validation and website updates"""

import json
import logging
from typing import Any, Dict, Optional
from openai import AsyncOpenAI
from sitegen_api.core.config import settings
from sitegen_api.models.errors import ApplicationError, ErrorCode

logger = logging.getLogger(__name__)


class OpenAIClient:
    """
    Lazily created AsyncOpenAI client.

    The key is read from settings on first use, so a missing key only fails
    the routes that actually need OpenAI.
    """

    def __init__(self):
        self.client: Optional[AsyncOpenAI] = None

    @property
    def is_configured(self) -> bool:
        return bool(settings.openai_api_key)

    def get_client(self) -> AsyncOpenAI:
        if not self.is_configured:
            raise ApplicationError(
                code=ErrorCode.CONFIGURATION_ERROR,
                message="OPENAI_API_KEY is not configured",
                hint="Set OPENAI_API_KEY in the .env file",
            )
        if self.client is None:
            self.client = AsyncOpenAI(api_key=settings.openai_api_key, timeout=settings.request_timeout)
        return self.client

    async def chat(
        self,
        system_prompt: str,
        user_message: str,
        model: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        response_format: Optional[dict] = None,
    ):
        """
        Single chat completion.

        Returns:
            The SDK ChatCompletion object

        Raises:
            ApplicationError: If the key is missing or the API call fails
        """
        client = self.get_client()

        kwargs: Dict[str, Any] = {
            "model": model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            "temperature": temperature,
        }
        if max_tokens:
            kwargs["max_tokens"] = max_tokens
        if response_format:
            kwargs["response_format"] = response_format

        try:
            logger.info(f"[OpenAI] Calling {model} ({len(user_message)} chars)")
            response = await client.chat.completions.create(**kwargs)
        except Exception as e:
            logger.error(f"[OpenAI] Call to {model} failed: {e}")
            raise ApplicationError(
                code=ErrorCode.GENERATION_FAILED,
                message=f"OpenAI API call failed: {str(e)}",
                retryable=True,
                details=str(e),
            )

        usage = getattr(response, "usage", None)
        if usage is not None:
            logger.info(f"[OpenAI] Response received ({usage.total_tokens} tokens)")
        return response

    async def chat_json(
        self,
        system_prompt: str,
        user_message: str,
        model: str,
        temperature: float = 0.1,
        max_tokens: Optional[int] = None,
    ) -> dict:
        """
        Chat completion in JSON mode, parsed into a dict.

        Raises:
            ApplicationError: If the call fails or the reply has no content
            json.JSONDecodeError: If the reply is not valid JSON
        """
        response = await self.chat(
            system_prompt,
            user_message,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            response_format={"type": "json_object"},
        )

        if not response.choices or response.choices[0].message is None:
            raise ApplicationError(
                code=ErrorCode.GENERATION_FAILED,
                message="Unexpected response structure from OpenAI API",
            )

        content = response.choices[0].message.content or ""
        return json.loads(content)

    async def close(self):
        if self.client is not None:
            await self.client.close()
            self.client = None


# Global client instance
openai_client = OpenAIClient()
