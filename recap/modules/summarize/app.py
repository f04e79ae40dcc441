from recap.env import enable_metrics, summary_include_sentiment
from recap.logs import get_logger
from recap.utils import create_app

from .v1.router import router as v1_router


log = get_logger(__name__)

app = create_app()
app.include_router(v1_router)

if enable_metrics:
    from recap.modules.monitoring import instrumentator, PROMETHEUS_NAMESPACE, PROMETHEUS_SUMMARIES_SUBSYSTEM

    instrumentator.instrument(app, metric_namespace=PROMETHEUS_NAMESPACE, metric_subsystem=PROMETHEUS_SUMMARIES_SUBSYSTEM)


async def app_startup():
    log.info(f'summarize module initialized (sentiment {"enabled" if summary_include_sentiment else "disabled"})')


__all__ = ['app', 'app_startup']
