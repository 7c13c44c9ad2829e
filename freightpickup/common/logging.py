"""Structured JSON logging with pickup correlation fields."""

import logging
import sys
from contextvars import ContextVar

from pythonjsonlogger.json import JsonFormatter

from freightpickup.common.config import settings


customer_context_ctx: ContextVar[str] = ContextVar("customer_context", default="")
pickup_state_ctx: ContextVar[str] = ContextVar("pickup_state", default="")


class ContextFilter(logging.Filter):
    """Inject service name and pickup correlation identifiers into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = settings.service_name
        record.customer_context = customer_context_ctx.get()
        record.pickup_state = pickup_state_ctx.get()
        return True


def configure_logging() -> None:
    """Configure root logger once per process."""

    handler = logging.StreamHandler(sys.stdout)
    context_filter = ContextFilter()
    handler.addFilter(context_filter)
    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(service_name)s %(customer_context)s %(pickup_state)s %(message)s"
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(settings.log_level)
    root.addFilter(context_filter)


logger = logging.getLogger("freightpickup")
