from contextvars import ContextVar
from logging import LoggerAdapter, getLogger
from logging.config import dictConfig
from typing import Optional
from uuid import uuid4

from gas_oracle.config import Config, config

CORRELATION_ID = "cid"
ERR = "err"  # error object log argument
ERR_TYPE = "err_type"  # error type log argument

# This field is keyword argument from <https://github.com/python/cpython/blob/3.10/Lib/logging/__init__.py#L1600>
#   and never changed.
EXTRA = "extra"

FORMATTERS = {
    'simple': {
        'format': '%(asctime)s - %(filename)s:%(lineno)s:%(funcName)s - %(levelname)s - %(message)s'
    },
    'logstash': {
        '()': 'logstash_formatter.LogstashFormatterV1'
    },
}


def _handlers(config: Config) -> dict:
    handlers = {
        'console': {
            'class': 'logging.StreamHandler',
            'level': config.LOGGING_LEVEL,
            'formatter': 'simple',
            'stream': 'ext://sys.stdout'
        },
        'logstash': {
            'level': config.LOGSTASH_LOGGING_LEVEL,
            'class': 'logstash_async.handler.AsynchronousLogstashHandler',
            'transport': 'logstash_async.transport.TcpTransport',
            'formatter': 'logstash',
            'host': config.LOGSTASH,
            'port': config.PORT,
            'database_path': None,
            'event_ttl': 30  # sec
        },
    }
    # dictConfig instantiates every declared handler, so only the enabled ones are declared.
    return {name: handlers[name] for name in config.LOG_HANDLERS}


def build_logging_config(config: Config) -> dict:
    return dict(
        # See: <https://docs.python.org/3.7/library/logging.config.html#logging.config.fileConfig>
        # and find `disable_existing_loggers`, it's same configuration parameter as for dictConfig function.
        disable_existing_loggers=False,
        version=1,
        formatters=FORMATTERS,
        handlers=_handlers(config),
        root={
            'handlers': config.LOG_HANDLERS,
            'level': config.LOGGING_LEVEL,
        },
    )


def setup_logging(config: Config = config) -> None:
    """Install console/Logstash handlers on the root logger. Call once at application start."""
    dictConfig(build_logging_config(config))

correlation_id = ContextVar(CORRELATION_ID, default=uuid4().hex)


class CustomContextLogger(LoggerAdapter):

    def process(self, msg, kwargs):
        if EXTRA not in kwargs:
            kwargs[EXTRA] = dict(self.extra)
        else:
            kwargs[EXTRA].update(self.extra)

        # assigning a correlation key to all log messages
        kwargs[EXTRA][CORRELATION_ID] = self.get_correlation_id()

        if ERR in kwargs[EXTRA] and ERR_TYPE not in kwargs[EXTRA]:
            kwargs[EXTRA][ERR_TYPE] = type(kwargs[EXTRA][ERR]).__name__

        return msg, kwargs

    @staticmethod
    def get_correlation_id():
        return correlation_id.get()


class LogArgs:
    gas_oracle = "gas_oracle"  # gas oracle backend name
    gas_category = "gas_category"
    url = "url"
    status = "status"  # HTTP status of provider response
    response = "response"  # raw provider response body
    web3_url = "web3_url"


def get_logger(name: str, extra: Optional[dict] = None, corr_id: Optional[str] = None) -> "CustomContextLogger":
    extra = extra or {}

    if corr_id:
        correlation_id.set(corr_id)

    logger = CustomContextLogger(getLogger(name), extra)
    return logger


def set_correlation_id(corr_id: str):
    correlation_id.set(corr_id)


def set_new_correlation_id():
    set_correlation_id(uuid4().hex)
