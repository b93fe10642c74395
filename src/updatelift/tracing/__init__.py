"""Tracing for debugging update composition.

Usage:
    from updatelift.tracing import traced

    @traced(name="page")
    def page_update(msg, page):
        ...

    # Enable with UPDATELIFT_TRACE_UPDATES=1 and UPDATELIFT_LOG_LEVEL=DEBUG
"""

from updatelift.tracing.decorator import describe_result, traced
from updatelift.tracing.logger import LOGGER_NAME, logger, setup_logger

__all__ = [
    "traced",
    "describe_result",
    "setup_logger",
    "logger",
    "LOGGER_NAME",
]
