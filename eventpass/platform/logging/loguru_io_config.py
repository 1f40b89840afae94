from contextvars import ContextVar
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from eventpass.platform.config.core_setting import settings
from eventpass.platform.constant.path import LOG_DIR


LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)
SERVICE_NAME = os.getenv('SERVICE_NAME', 'eventpass')

DEPTH_LINE = '──'
SENSITIVE_KEYWORDS = {
    'password',
    'hashed_password',
    'token',
    'access_token',
    'secret_key',
}

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE = 'service'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


_default_extra = {
    ExtraField.SERVICE: f'{SERVICE_NAME}:{os.getpid()}',
    ExtraField.CHAIN_START_TIME: '',
    ExtraField.CALL_TARGET: '',
}


class InterceptHandler(logging.Handler):
    """Route stdlib logging records (uvicorn, sqlalchemy, aiosmtplib) into loguru."""

    _bound: 'LoguruLogger | None' = None

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        if record.levelno <= logging.DEBUG and 'Using selector:' in message:
            return

        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        if InterceptHandler._bound is None:
            InterceptHandler._bound = loguru_logger.bind(**_default_extra)
        InterceptHandler._bound.opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


loguru_logger.remove()
custom_logger = loguru_logger.bind(**_default_extra)

min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'

custom_logger.add(sys.stdout, format=io_log_format, level=min_log_level, enqueue=True)

# File sink only in DEBUG mode; production ships stdout
if settings.DEBUG:
    log_filename = 'test_{time:YYYY-MM-DD_HH}.log' if os.environ.get('TEST_LOG_DIR') else '{time:YYYY-MM-DD_HH}.log'
    custom_logger.add(
        f'{LOG_DIR}/{log_filename}',
        format=io_log_format,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        enqueue=True,
        level=min_log_level,
    )

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
