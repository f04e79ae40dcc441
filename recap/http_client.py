"""
Simple async HTTP client with a shared session. We only talk to the
summarize endpoint and the chat completion API so using a single
session is OK.
"""

from typing import Any

import aiohttp


_session = None


def _get_session():
    global _session

    if _session is None:
        _session = aiohttp.ClientSession()
    return _session


async def post(url, **kwargs) -> tuple[int, Any]:
    """
    Returns the status code along with the decoded JSON body, or None if the body is not JSON.
    """

    session = _get_session()
    async with session.post(url, **kwargs) as response:
        try:
            body = await response.json(content_type=None)
        except ValueError:
            body = None

        return response.status, body


async def close():
    global _session

    if _session is not None:
        await _session.close()

        _session = None


__all__ = ['close', 'post']
