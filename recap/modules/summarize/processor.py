import json
import time
from typing import Any, Optional

from recap.constants import FALLBACK_ELLIPSIS, FALLBACK_KEY_POINT, FALLBACK_SENTIMENT, FALLBACK_SUMMARY_MAX_LENGTH
from recap.env import summary_include_sentiment
from recap.logs import get_logger
from recap.modules.monitoring import SUMMARY_DURATION_METRIC, SUMMARY_FALLBACK_COUNTER, SUMMARY_INPUT_LENGTH_METRIC

from .prompts import summary_prompt, summary_with_sentiment_prompt
from .providers import CompletionProvider, OpenAIProvider

log = get_logger(__name__)

default_provider = OpenAIProvider()


class EmptyCompletionError(Exception):
    """Raised when the model answered successfully but without any content."""


def build_prompt(text: str, include_sentiment: bool = False) -> str:
    template = summary_with_sentiment_prompt if include_sentiment else summary_prompt

    # the transcript is embedded as is, quotes included
    return f'{template}\n\nTranscript: "{text}"'


def get_fallback(content: str) -> dict:
    summary = content[:FALLBACK_SUMMARY_MAX_LENGTH]
    if len(content) > FALLBACK_SUMMARY_MAX_LENGTH:
        summary += FALLBACK_ELLIPSIS

    return {
        'summary': summary,
        'keyPoints': [FALLBACK_KEY_POINT],
        'sentiment': FALLBACK_SENTIMENT,
    }


def reject_constant(name: str):
    raise ValueError(f'Invalid JSON constant: {name}')


def parse_content(content: str) -> Any:
    """
    Decodes the model output. Whatever JSON the model produced is returned untouched, there is
    no validation of its shape. Output that is not JSON is turned into a degraded summary.
    """

    try:
        return json.loads(content, parse_constant=reject_constant)
    except ValueError as e:
        log.warning(f'Failed to parse OpenAI response as JSON: {e}')
        SUMMARY_FALLBACK_COUNTER.inc()

        return get_fallback(content)


async def summarize(
    text: str,
    api_key: str,
    provider: Optional[CompletionProvider] = None,
    include_sentiment: Optional[bool] = None,
) -> Any:
    provider = provider or default_provider
    if include_sentiment is None:
        include_sentiment = summary_include_sentiment

    prompt = build_prompt(text, include_sentiment)
    SUMMARY_INPUT_LENGTH_METRIC.observe(len(text))

    start = time.perf_counter()
    content = await provider.complete(prompt, api_key)
    duration = time.perf_counter() - start

    SUMMARY_DURATION_METRIC.observe(duration)
    log.info(f'input length: {len(prompt)}, duration: {duration:.3f}s')

    if not content:
        raise EmptyCompletionError()

    log.info(f'output length: {len(content)}')

    return parse_content(content)


__all__ = ['EmptyCompletionError', 'build_prompt', 'get_fallback', 'parse_content', 'summarize']
