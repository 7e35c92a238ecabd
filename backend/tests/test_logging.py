import json
import logging

import pytest
import structlog

from app.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    config = structlog.get_config()
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.configure(**config)


def test_json_output(capsys):
    configure_logging(json_output=True)

    structlog.get_logger("app.services.orders").info("Issued order identifier", order_id="ORD001")

    event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert event["event"] == "Issued order identifier"
    assert event["order_id"] == "ORD001"
    assert event["level"] == "info"
    assert "timestamp" in event


def test_console_output(capsys):
    configure_logging(json_output=False)

    structlog.get_logger("app.services.orders").info("Issued order identifier", order_id="ORD001")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    assert "Issued order identifier" in line
    assert "ORD001" in line
    with pytest.raises(json.JSONDecodeError):
        json.loads(line)
