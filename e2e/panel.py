from recap import http_client
from recap.logs import get_logger
from recap.modules.panel.models import PanelView
from recap.modules.panel.panel import SummaryPanel

from .common import base_url
from .summarize import moby_dick_text

log = get_logger(__name__)


async def run():
    log.info('#### Running panel e2e tests')

    panel = SummaryPanel(moby_dick_text, endpoint=f'{base_url}/api/summarize')

    try:
        log.info('Generating a summary through the panel')
        await panel.generate()

        rendered = panel.render()
        assert rendered.view == PanelView.RESULT, log.error(f'Unexpected view: {rendered.view} ({rendered.error})')

        await panel.copy_all()
        assert panel.clipboard.text.startswith('Summary:'), log.error('Nothing was copied')
        log.info(f'Copied:\n{panel.clipboard.text}')

        panel.reset()
        assert panel.render().view == PanelView.IDLE, log.error('Reset did not return to idle')
    finally:
        await http_client.close()

    return True
