import logging
import sys
import threading

import structlog

from todo_api.utils import ColoredFormatter

_configure_lock = threading.Lock()
_configured = False


def configure_logging(level="INFO", fmt="console"):
    """Configure stdlib logging and structlog once per process"""
    global _configured
    with _configure_lock:
        if _configured:
            return
        formatter = ColoredFormatter(
            '[%(asctime)s.%(msecs)03d] %(levelname)s (%(name)s) %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
        )
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)

        logging.basicConfig(
            level=getattr(logging, str(level).upper(), logging.INFO),
            handlers=[handler]
        )

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.processors.JSONRenderer() if fmt == 'json' else structlog.dev.ConsoleRenderer()
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
        _configured = True
