import logging
import sys

import pytest
from loguru import logger

from login_client.core.logging import _FMT, setup_logging
from login_api.core.logging import _FMT as API_FMT


@pytest.fixture()
def restore_logging():
    std = logging.getLogger("urllib3")
    saved = (std.handlers[:], std.propagate, std.level)
    yield
    std.handlers, std.propagate = saved[0], saved[1]
    std.setLevel(saved[2])
    logger.remove()
    logger.add(sys.stderr)


def test_client_uses_api_log_format():
    assert _FMT == API_FMT


def test_urllib3_records_reach_loguru(restore_logging):
    setup_logging("debug")
    seen = []
    logger.add(lambda msg: seen.append(msg.record["message"]), level="WARNING")

    logging.getLogger("urllib3").warning("Retrying connection")

    assert seen == ["Retrying connection"]
    assert logging.getLogger("urllib3").propagate is False
