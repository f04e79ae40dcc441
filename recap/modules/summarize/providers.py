import asyncio
from typing import Optional, Protocol

import aiohttp

from recap import http_client
from recap.constants import OPENAI_MAX_TOKENS, OPENAI_MODEL, OPENAI_TEMPERATURE
from recap.env import openai_api_base_url
from recap.logs import get_logger

from .prompts import system_message

log = get_logger(__name__)


class UpstreamError(Exception):
    """Raised when the chat completion API cannot be reached or answers with an error."""


class CompletionProvider(Protocol):
    async def complete(self, prompt: str, api_key: str) -> Optional[str]:
        """
        Sends the prompt to the model and returns the text content of the first choice, if any.
        """


class OpenAIProvider:
    def __init__(self, base_url: str = openai_api_base_url):
        self.url = f'{base_url}/chat/completions'

    def get_request_body(self, prompt: str) -> dict:
        return {
            'model': OPENAI_MODEL,
            'messages': [
                {'role': 'system', 'content': system_message},
                {'role': 'user', 'content': prompt},
            ],
            'temperature': OPENAI_TEMPERATURE,
            'max_tokens': OPENAI_MAX_TOKENS,
        }

    async def complete(self, prompt: str, api_key: str) -> Optional[str]:
        try:
            status, data = await http_client.post(
                self.url,
                headers={'Authorization': f'Bearer {api_key}', 'Content-Type': 'application/json'},
                json=self.get_request_body(prompt),
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log.error(f'OpenAI API request failed: {e}')
            raise UpstreamError(str(e)) from e

        if not 200 <= status < 300:
            log.error(f'OpenAI API error: {status} {data}')
            raise UpstreamError(f'OpenAI API responded with status {status}')

        return get_content(data)


def get_content(data) -> Optional[str]:
    if not isinstance(data, dict):
        return None

    choices = data.get('choices') or []
    if not choices:
        return None

    message = choices[0].get('message') or {}

    return message.get('content')


__all__ = ['CompletionProvider', 'OpenAIProvider', 'UpstreamError', 'get_content']
