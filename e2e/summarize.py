from recap.logs import get_logger

from .common import post

log = get_logger(__name__)

# courtesy of https://www.gutenberg.org/files/2701/2701-h/2701-h.htm#link2HCH0001
moby_dick_text = 'Call me Ishmael. Some years ago—never mind how long precisely—having little or no money in my purse, and nothing particular to interest me on shore, I thought I would sail about a little and see the watery part of the world. It is a way I have of driving off the spleen and regulating the circulation.'


async def create_summary():
    resp = await post('api/summarize', {'text': moby_dick_text})
    assert resp.status == 200, log.error(f'Unexpected status code: {resp.status}')

    result = await resp.json()
    assert 'summary' in result, log.error(f'Unexpected response: {result}')
    log.info(f'Response: {result}')


async def reject_empty_text():
    resp = await post('api/summarize', {'text': ''})
    assert resp.status == 400, log.error(f'Unexpected status code: {resp.status}')

    result = await resp.json()
    assert result == {'error': 'Text is required'}, log.error(f'Unexpected response: {result}')


async def run():
    log.info('#### Running summarize e2e tests')

    log.info('POST api/summarize - reject an empty transcript')
    await reject_empty_text()

    log.info('POST api/summarize - summarize a transcript')
    await create_summary()

    return True
