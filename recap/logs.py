import logging
import sys
from logging import Filter, LogRecord

from uvicorn.logging import DefaultFormatter

from recap.env import log_level


# Suppress some logs from uvicorn
class AccessLogSuppressor(Filter):
    exclude_paths = ('/favicon.ico', '/metrics', '/healthz')

    def filter(self, record: LogRecord) -> bool:
        log_msg = record.getMessage()
        is_excluded = any(excluded in log_msg for excluded in self.exclude_paths)

        return not is_excluded


logging.getLogger('uvicorn.access').addFilter(AccessLogSuppressor())


sh = logging.StreamHandler(sys.stdout)
log_format = '%(asctime)s %(name)s %(levelprefix)s %(message)s'

sh.setFormatter(DefaultFormatter(log_format))

logging.basicConfig(level=log_level, handlers=[sh])


def get_logger(name):
    return logging.getLogger(name)


# uvicorn loggers share the root format, access lines also carry the request
uvicorn_log_config = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {'()': 'uvicorn.logging.DefaultFormatter', 'fmt': log_format},
        'access': {
            '()': 'uvicorn.logging.AccessFormatter',
            'fmt': '%(asctime)s %(name)s %(levelprefix)s %(client_addr)s - "%(request_line)s" %(status_code)s',
        },
    },
    'handlers': {
        'default': {'formatter': 'default', 'class': 'logging.StreamHandler', 'stream': 'ext://sys.stdout'},
        'access': {'formatter': 'access', 'class': 'logging.StreamHandler', 'stream': 'ext://sys.stdout'},
    },
    'loggers': {
        'uvicorn': {'handlers': ['default'], 'level': log_level, 'propagate': False},
        'uvicorn.access': {'handlers': ['access'], 'level': log_level, 'propagate': False},
    },
}
