"""
Tests for structured logging setup.
"""

import logging

import pytest
import structlog

from hotel_booking.core.config import Settings
from hotel_booking.core.logging import HANDLER_NAME, service_context, setup_logging


@pytest.fixture
def restore_logging():
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()


def test_setup_logging_twice_installs_one_handler(restore_logging):
    settings = Settings(ENVIRONMENT="test", LOG_LEVEL="debug")

    setup_logging(settings)
    setup_logging(settings)

    ours = [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]
    assert len(ours) == 1
    assert logging.getLogger().level == logging.DEBUG


def test_service_context_stamps_service_and_environment():
    add_service = service_context(Settings(APP_NAME="Hotel Booking API", ENVIRONMENT="staging"))

    event = add_service(None, "info", {"event": "booking_denied", "reason": "room_full"})

    assert event["service"] == "Hotel Booking API"
    assert event["environment"] == "staging"
    assert event["reason"] == "room_full"


def test_production_logs_render_as_json(restore_logging, capsys):
    setup_logging(Settings(APP_NAME="Hotel Booking API", ENVIRONMENT="production"))

    structlog.get_logger("hotel_booking.test").info("booking_created", booking_id=1)

    out = capsys.readouterr().out
    assert '"service": "Hotel Booking API"' in out
    assert '"environment": "production"' in out
    assert '"booking_id": 1' in out
