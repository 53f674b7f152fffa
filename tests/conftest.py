from __future__ import annotations

import logging

import pytest

from chatstyle.syslog import SyslogFormatter, logger


@pytest.fixture(autouse=True)
def _detach_syslog_handlers():
    """Drop handlers installed by the CLI so later tests never write to a closed stream."""
    yield
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, SyslogFormatter):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
