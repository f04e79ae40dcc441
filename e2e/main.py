import asyncio

from .common import close_session, modules


async def main():
    success = True
    tasks = []

    if 'summarize' in modules:
        from .summarize import run as summarize_run

        tasks.append(summarize_run())

    if 'panel' in modules:
        from .panel import run as panel_run

        tasks.append(panel_run())

    try:
        success = all(await asyncio.gather(*tasks))
    except Exception:
        success = False
    finally:
        await close_session()

    if not success:
        raise Exception('E2E tests failed')


asyncio.run(main())
