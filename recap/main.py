import asyncio
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from recap import http_client
from recap.env import app_port, enable_metrics, metrics_port
from recap.logs import get_logger
from recap.utils import create_app, create_webserver

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(main_app: FastAPI):
    log.info('Recap is starting up')

    from recap.modules.summarize.app import app as summarize_app, app_startup as summarize_startup

    main_app.mount('/api', summarize_app)
    await summarize_startup()

    yield

    log.info('Recap is shutting down')

    await http_client.close()


app = create_app(lifespan=lifespan)


async def main():
    tasks = [asyncio.create_task(create_webserver('recap.main:app', port=app_port))]

    if enable_metrics:
        tasks.append(asyncio.create_task(create_webserver('recap.metrics:metrics', port=metrics_port)))

    await asyncio.wait(tasks, return_when=asyncio.ALL_COMPLETED)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except Exception as e:
        print(e)
        sys.exit(1)
    except KeyboardInterrupt:
        pass
