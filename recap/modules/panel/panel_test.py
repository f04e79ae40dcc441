import asyncio

import aiohttp
import pytest

from recap.constants import ErrorMessage
from recap.modules.panel.models import PanelAction, PanelState, PanelView

transcript = 'Andrew: Hello. Beatrix: Honey? It’s me. Andrew: Where are you? Beatrix: At the station. I missed my train.'
summary = {'summary': 'Beatrix missed her train.', 'keyPoints': ['Beatrix is at the station'], 'sentiment': 'Calm'}


@pytest.fixture()
def post(mocker):
    return mocker.patch('recap.http_client.post', return_value=(200, summary))


class TestGenerate:
    @pytest.mark.asyncio
    @pytest.mark.parametrize('text', [None, '', '   \n'])
    async def test_no_transcript(self, text, post):
        '''Test that nothing is requested without a transcript.'''

        from recap.modules.panel.panel import SummaryPanel

        panel = SummaryPanel(text)

        await panel.generate()

        post.assert_not_called()
        assert panel.error == ErrorMessage.NO_TRANSCRIPT.value
        assert panel.state == PanelState.NO_TRANSCRIPT
        assert panel.render().view == PanelView.NO_TRANSCRIPT

    @pytest.mark.asyncio
    async def test_success(self, post):
        '''Test that a successful request shows the result.'''

        from recap.modules.panel.panel import SummaryPanel

        panel = SummaryPanel(transcript, endpoint='http://localhost/api/summarize')
        assert panel.state == PanelState.IDLE
        assert panel.render().actions == [PanelAction.GENERATE]

        await panel.generate()

        post.assert_called_once_with('http://localhost/api/summarize', json={'text': transcript})
        assert panel.state == PanelState.RESULT

        rendered = panel.render()
        assert rendered.view == PanelView.RESULT
        assert rendered.error is None
        assert rendered.result.summary == 'Beatrix missed her train.'
        assert rendered.result.keyPoints == ['Beatrix is at the station']
        assert rendered.actions == [PanelAction.RESET, PanelAction.COPY, PanelAction.REGENERATE]

    @pytest.mark.asyncio
    async def test_error_status(self, post):
        '''Test that a failed request shows the error and keeps the call to action.'''

        from recap.modules.panel.panel import SummaryPanel

        post.return_value = (500, {'error': 'Internal server error'})
        panel = SummaryPanel(transcript)

        await panel.generate()

        assert panel.state == PanelState.ERROR
        assert panel.is_loading is False

        rendered = panel.render()
        assert rendered.view == PanelView.IDLE
        assert rendered.error == ErrorMessage.GENERATE_FAILED.value
        assert rendered.actions == [PanelAction.GENERATE]

    @pytest.mark.asyncio
    async def test_null_key_points(self, post):
        '''Test that a result without key points is still shown.'''

        from recap.modules.panel.panel import SummaryPanel

        post.return_value = (200, {'summary': 'S', 'keyPoints': None, 'sentiment': 'Positive'})
        panel = SummaryPanel(transcript)

        await panel.generate()

        assert panel.error is None
        assert panel.state == PanelState.RESULT
        assert panel.result.keyPoints == []
        assert panel.result.sentiment == 'Positive'

    @pytest.mark.asyncio
    async def test_loosely_typed_result(self, post):
        '''Test that non string fields from the model are shown as text.'''

        from recap.modules.panel.panel import SummaryPanel

        post.return_value = (200, {'summary': 'S', 'keyPoints': ['a', 2], 'sentiment': 0.8, 'topics': ['x']})
        panel = SummaryPanel(transcript)

        await panel.generate()

        assert panel.error is None
        assert panel.render().view == PanelView.RESULT
        assert panel.result.keyPoints == ['a', '2']
        assert panel.result.sentiment == '0.8'

    @pytest.mark.asyncio
    @pytest.mark.parametrize('data', [None, ['a', 'b'], 'plain text', 42])
    async def test_non_object_result(self, data, post):
        '''Test that a body that is not an object is reported as a failure.'''

        from recap.modules.panel.panel import SummaryPanel

        post.return_value = (200, data)
        panel = SummaryPanel(transcript)

        await panel.generate()

        assert panel.result is None
        assert panel.error == ErrorMessage.GENERATE_FAILED.value
        assert panel.state == PanelState.ERROR

    @pytest.mark.asyncio
    async def test_transport_error(self, post):
        '''Test that the exception message is shown when the request cannot be sent.'''

        from recap.modules.panel.panel import SummaryPanel

        post.side_effect = aiohttp.ClientConnectionError('Connection refused')
        panel = SummaryPanel(transcript)

        await panel.generate()

        assert panel.error == 'Connection refused'

    @pytest.mark.asyncio
    async def test_loading_view(self, post):
        '''Test that the loading view is shown while the request is in flight.'''

        from recap.modules.panel.panel import SummaryPanel

        release = asyncio.Event()

        async def slow_post(*args, **kwargs):
            await release.wait()
            return 200, summary

        post.side_effect = slow_post
        panel = SummaryPanel(transcript)

        task = asyncio.create_task(panel.generate())
        await asyncio.sleep(0)

        assert panel.state == PanelState.LOADING
        assert panel.render().view == PanelView.LOADING
        assert panel.render().actions == []

        release.set()
        await task

        assert panel.render().view == PanelView.RESULT

    @pytest.mark.asyncio
    async def test_regenerate_keeps_result_until_done(self, post):
        '''Test that the previous result stays until the new one arrives.'''

        from recap.modules.panel.panel import SummaryPanel

        panel = SummaryPanel(transcript)
        await panel.generate()
        first = panel.result

        release = asyncio.Event()

        async def slow_post(*args, **kwargs):
            await release.wait()
            return 200, {'summary': 'Second take', 'keyPoints': []}

        post.side_effect = slow_post

        task = asyncio.create_task(panel.regenerate())
        await asyncio.sleep(0)

        assert panel.result is first
        assert panel.render().view == PanelView.LOADING
        assert panel.render().actions == [PanelAction.RESET, PanelAction.COPY]

        release.set()
        await task

        assert panel.result.summary == 'Second take'
        assert panel.render().view == PanelView.RESULT

    @pytest.mark.asyncio
    async def test_failed_regenerate_keeps_result(self, post):
        '''Test that a failed regeneration keeps the previous result next to the error.'''

        from recap.modules.panel.panel import SummaryPanel

        panel = SummaryPanel(transcript)
        await panel.generate()

        post.return_value = (500, {'error': 'Failed to generate summary from OpenAI'})
        await panel.regenerate()

        rendered = panel.render()
        assert rendered.view == PanelView.RESULT
        assert rendered.result.summary == summary['summary']
        assert rendered.error == ErrorMessage.GENERATE_FAILED.value


class TestReset:
    @pytest.mark.asyncio
    async def test_reset_returns_to_idle(self, post):
        '''Test that resetting clears the result and the error.'''

        from recap.modules.panel.panel import SummaryPanel

        panel = SummaryPanel(transcript)
        await panel.generate()
        panel.error = 'stale error'

        panel.reset()

        assert panel.result is None
        assert panel.error is None
        assert panel.state == PanelState.IDLE
        assert panel.render().view == PanelView.IDLE


class TestCopyAll:
    def test_format_result(self):
        '''Test the plain text layout of a result.'''

        from recap.modules.panel.panel import format_result
        from recap.modules.summarize.v1.models import SummaryResult

        result = SummaryResult(summary='S', keyPoints=['a', 'b'], sentiment='Positive')

        assert format_result(result) == 'Summary:\nS\n\nKey Points:\n• a\n• b\n\nSentiment:\nPositive'

    def test_format_result_without_optional_fields(self):
        '''Test that missing key points and sentiment are written as None.'''

        from recap.modules.panel.panel import format_result
        from recap.modules.summarize.v1.models import SummaryResult

        result = SummaryResult(summary='S')

        assert format_result(result) == 'Summary:\nS\n\nKey Points:\nNone\n\nSentiment:\nNone'

    @pytest.mark.asyncio
    async def test_copy_acknowledgement_reverts(self, post, mocker):
        '''Test that the result is copied and the acknowledgement goes away after a while.'''

        from recap.modules.panel.clipboard import InMemoryClipboard
        from recap.modules.panel.panel import SummaryPanel

        mocker.patch('recap.modules.panel.panel.COPY_ACKNOWLEDGEMENT_SECONDS', 0.01)
        clipboard = InMemoryClipboard()
        panel = SummaryPanel(transcript, clipboard=clipboard)
        await panel.generate()

        await panel.copy_all()

        assert clipboard.text.startswith('Summary:\nBeatrix missed her train.')
        assert panel.render().copied is True

        await asyncio.sleep(0.05)

        assert panel.render().copied is False

    @pytest.mark.asyncio
    async def test_clipboard_failure_is_not_surfaced(self, post, mocker):
        '''Test that clipboard errors are only logged.'''

        from recap.modules.panel.panel import SummaryPanel

        clipboard = mocker.Mock()
        clipboard.write_text = mocker.AsyncMock(side_effect=RuntimeError('denied'))
        panel = SummaryPanel(transcript, clipboard=clipboard)
        await panel.generate()

        await panel.copy_all()

        assert panel.copied is False
        assert panel.error is None
