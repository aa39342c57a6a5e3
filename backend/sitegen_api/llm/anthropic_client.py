"""Anthropic Messages API access - SDK for single calls, raw httpx for SSE relay"""

import logging
from typing import Any, Dict, Optional
import httpx
from anthropic import APIError, APIStatusError, AsyncAnthropic
from sitegen_api.core.config import settings
from sitegen_api.models.errors import ApplicationError, ErrorCode

logger = logging.getLogger(__name__)


def message_text(message) -> str:
    """Text of the first content block, or empty string for non-text replies"""
    if not message.content:
        return ""
    block = message.content[0]
    return getattr(block, "text", "") if getattr(block, "type", None) == "text" else ""


class AnthropicClient:
    """
    Wrapper around the Anthropic Messages API.

    create_message() goes through the SDK. open_stream() posts directly with
    httpx so the provider's SSE bytes can be relayed to the browser unchanged.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.client: Optional[AsyncAnthropic] = None
        self.http: Optional[httpx.AsyncClient] = None
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(settings.anthropic_api_key)

    def _require_key(self):
        if not self.is_configured:
            raise ApplicationError(
                code=ErrorCode.CONFIGURATION_ERROR,
                message="ANTHROPIC_API_KEY is not configured",
                hint="Set ANTHROPIC_API_KEY in the .env file",
            )

    def get_client(self) -> AsyncAnthropic:
        self._require_key()
        if self.client is None:
            self.client = AsyncAnthropic(
                api_key=settings.anthropic_api_key,
                base_url=settings.anthropic_base_url,
                timeout=settings.request_timeout,
            )
        return self.client

    def get_http(self) -> httpx.AsyncClient:
        if self.http is None:
            self.http = httpx.AsyncClient(
                base_url=settings.anthropic_base_url,
                timeout=settings.request_timeout,
                transport=self._transport,
            )
        return self.http

    async def create_message(
        self,
        prompt: str,
        model: str,
        max_tokens: int,
        system: Optional[str] = None,
        temperature: Optional[float] = None,
    ):
        """
        Non-streaming Messages call.

        Returns:
            The SDK Message object

        Raises:
            ApplicationError: Missing key, or the provider rejected the call.
                Provider status codes are carried in status_code.
        """
        client = self.get_client()

        kwargs: Dict[str, Any] = {
            "model": model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system
        if temperature is not None:
            kwargs["temperature"] = temperature

        try:
            logger.info(f"[Anthropic] Calling {model} (max_tokens={max_tokens}, prompt={len(prompt)} chars)")
            message = await client.messages.create(**kwargs)
        except APIStatusError as e:
            logger.error(f"[Anthropic] {model} returned {e.status_code}: {e.message}")
            raise ApplicationError(
                code=ErrorCode.GENERATION_FAILED,
                message=f"Claude API request failed: {e.message}",
                details=str(e.body) if e.body is not None else e.message,
                status_code=e.status_code,
                retryable=e.status_code >= 500 or e.status_code == 429,
            )
        except APIError as e:
            logger.error(f"[Anthropic] {model} call failed: {e}")
            raise ApplicationError(
                code=ErrorCode.GENERATION_FAILED,
                message=f"Claude API request failed: {str(e)}",
                details=str(e),
                retryable=True,
            )

        logger.info(
            f"[Anthropic] Response received (in={message.usage.input_tokens}, "
            f"out={message.usage.output_tokens}, stop={message.stop_reason})"
        )
        return message

    async def open_stream(
        self,
        prompt: str,
        model: str,
        max_tokens: int,
        system: Optional[str] = None,
    ) -> httpx.Response:
        """
        Start a streaming Messages request.

        The status is checked before anything is returned, so a provider
        error becomes an ApplicationError instead of a half-written stream.
        The caller must aclose() the returned response.
        """
        self._require_key()

        payload: Dict[str, Any] = {
            "model": model,
            "max_tokens": max_tokens,
            "stream": True,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            payload["system"] = system

        headers = {
            "Content-Type": "application/json",
            "x-api-key": settings.anthropic_api_key,
            "anthropic-version": settings.anthropic_version,
        }

        http = self.get_http()
        request = http.build_request("POST", "/v1/messages", json=payload, headers=headers)
        logger.info(f"[Anthropic] Opening stream on {model} (prompt={len(prompt)} chars)")

        try:
            response = await http.send(request, stream=True)
        except httpx.HTTPError as e:
            logger.error(f"[Anthropic] Stream request failed: {e}")
            raise ApplicationError(
                code=ErrorCode.GENERATION_FAILED,
                message=f"Error generating code with Claude: {str(e)}",
                retryable=True,
            )

        if response.status_code >= 400:
            body = (await response.aread()).decode("utf-8", errors="replace")
            await response.aclose()
            logger.error(f"[Anthropic] Stream rejected ({response.status_code}): {body[:500]}")
            raise ApplicationError(
                code=ErrorCode.GENERATION_FAILED,
                message=f"Error generating code with Claude: Claude API request failed: {body}",
                details=body,
            )

        return response

    async def close(self):
        if self.client is not None:
            await self.client.close()
            self.client = None
        if self.http is not None:
            await self.http.aclose()
            self.http = None


# Global client instance
anthropic_client = AnthropicClient()
