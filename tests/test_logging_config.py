import io
import json
import logging

import pytest
import structlog

from monorail_gateway.logging_config import setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_json_lines_to_given_stream(restore_logging):
    stream = io.StringIO()
    setup_logging("INFO", stream=stream)

    logging.getLogger("monorail_gateway.test").info("resolved token")

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["event"] == "resolved token"
    assert record["level"] == "info"
    assert record["logger"] == "monorail_gateway.test"


def test_level_filtering(restore_logging):
    stream = io.StringIO()
    setup_logging("WARNING", stream=stream)

    logging.getLogger("monorail_gateway.test").info("hidden")

    assert stream.getvalue() == ""
