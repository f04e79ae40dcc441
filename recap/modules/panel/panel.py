import asyncio
from typing import Optional

from recap import http_client
from recap.constants import COPY_ACKNOWLEDGEMENT_SECONDS, ErrorMessage
from recap.env import summary_api_url
from recap.logs import get_logger
from recap.modules.summarize.v1.models import SummaryPayload, SummaryResult

from .clipboard import Clipboard, InMemoryClipboard
from .models import PanelAction, PanelRender, PanelState, PanelView

log = get_logger(__name__)

view_messages = {
    PanelView.NO_TRANSCRIPT: 'Transcribe audio to generate an AI summary',
    PanelView.IDLE: 'Generate AI Summary',
    PanelView.LOADING: 'Generating AI summary...',
}


class _RequestFailed(Exception):
    pass


def format_result(result: SummaryResult) -> str:
    key_points = '\n'.join(f'• {point}' for point in result.keyPoints or [])

    return f'Summary:\n{result.summary}\n\nKey Points:\n{key_points or "None"}\n\nSentiment:\n{result.sentiment or "None"}'


class SummaryPanel:
    """
    Local state of the AI summary panel for a single transcript.

    The panel asks the summarize endpoint for a summary on demand and keeps the last successful
    result until it is reset or replaced. Nothing prevents a second request from being started
    while one is in flight, the host is expected to only offer the actions listed by `render`.
    """

    def __init__(
        self,
        transcript: Optional[str] = None,
        clipboard: Optional[Clipboard] = None,
        endpoint: str = summary_api_url,
    ):
        self.transcript = transcript
        self.clipboard = clipboard or InMemoryClipboard()
        self.endpoint = endpoint

        self.is_loading = False
        self.result: Optional[SummaryResult] = None
        self.error: Optional[str] = None
        self.copied = False
        self._copied_timer: Optional[asyncio.TimerHandle] = None

    @property
    def has_transcript(self) -> bool:
        return bool(self.transcript and self.transcript.strip())

    @property
    def state(self) -> PanelState:
        if not self.has_transcript:
            return PanelState.NO_TRANSCRIPT
        if self.is_loading:
            return PanelState.LOADING
        if self.error:
            return PanelState.ERROR
        if self.result is not None:
            return PanelState.RESULT

        return PanelState.IDLE

    @property
    def view(self) -> PanelView:
        if not self.has_transcript:
            return PanelView.NO_TRANSCRIPT
        if self.is_loading:
            return PanelView.LOADING
        if self.result is not None:
            return PanelView.RESULT

        return PanelView.IDLE

    async def generate(self) -> None:
        if not self.has_transcript:
            self.error = ErrorMessage.NO_TRANSCRIPT.value
            return

        self.is_loading = True
        self.error = None

        try:
            status, data = await http_client.post(
                self.endpoint, json=SummaryPayload(text=self.transcript).model_dump()
            )

            if not 200 <= status < 300:
                raise _RequestFailed(ErrorMessage.GENERATE_FAILED.value)
            if not isinstance(data, dict):
                raise _RequestFailed(ErrorMessage.GENERATE_FAILED.value)

            self.result = SummaryResult.model_validate(data)
        except Exception as e:
            log.warning(f'Summary request failed: {e}')
            self.error = str(e) or ErrorMessage.GENERATE_FAILED.value
        finally:
            self.is_loading = False

    async def regenerate(self) -> None:
        await self.generate()

    def reset(self) -> None:
        self.result = None
        self.error = None

    async def copy_all(self) -> None:
        if self.result is None:
            return

        try:
            await self.clipboard.write_text(format_result(self.result))
        except Exception as e:
            log.error(f'Failed to copy text: {e}')
            return

        self.copied = True

        if self._copied_timer:
            self._copied_timer.cancel()
        self._copied_timer = asyncio.get_running_loop().call_later(COPY_ACKNOWLEDGEMENT_SECONDS, self._clear_copied)

    def _clear_copied(self) -> None:
        self.copied = False
        self._copied_timer = None

    def get_actions(self) -> list[PanelAction]:
        view = self.view

        if view == PanelView.IDLE:
            return [PanelAction.GENERATE]

        if self.has_transcript and self.result is not None:
            actions = [PanelAction.RESET, PanelAction.COPY]
            if not self.is_loading:
                actions.append(PanelAction.REGENERATE)

            return actions

        return []

    def render(self) -> PanelRender:
        view = self.view

        return PanelRender(
            view=view,
            message=view_messages.get(view),
            error=self.error if self.has_transcript else None,
            copied=self.copied,
            result=self.result if view == PanelView.RESULT else None,
            actions=self.get_actions(),
        )


__all__ = ['SummaryPanel', 'format_result']
