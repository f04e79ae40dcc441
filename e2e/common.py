from argparse import ArgumentParser

import aiohttp


session = None
parser = ArgumentParser()
parser.add_argument('-u', '--url', dest='url', help='recap url', default='http://localhost:8000')
parser.add_argument(
    '-modules',
    '--modules',
    dest='modules',
    help='modules to run e2e on',
    default='summarize,panel',
)

args = parser.parse_args()
base_url = args.url
modules = args.modules.split(',')


def get_session():
    global session

    if session is None:
        session = aiohttp.ClientSession()

    return session


async def close_session():
    if session is not None:
        await session.close()


async def post(path, data):
    url = f'{base_url}/{path}'

    return await get_session().post(url, json=data)


__all__ = ['base_url', 'close_session', 'modules', 'post']
