import logging

import pytest

from parkour import configure_logging, get_logger
from parkour.runtime.logging import _ParkourRichConsoleHandler
from parkour.testing import override_config


@pytest.fixture()
def clean_parkour_logger():
    logger = logging.getLogger("parkour")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_get_logger_namespaces_children() -> None:
    assert get_logger().name == "parkour"
    assert get_logger("access").name == "parkour.access"
    assert get_logger("parkour.access") is get_logger("access")


def test_package_logger_is_silent_by_default() -> None:
    handlers = logging.getLogger("parkour").handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


def test_configure_logging_installs_single_rich_handler(clean_parkour_logger) -> None:
    configure_logging("info")
    logger = configure_logging(logging.DEBUG)

    rich_handlers = [
        handler
        for handler in logger.handlers
        if isinstance(handler, _ParkourRichConsoleHandler)
    ]
    assert len(rich_handlers) == 1
    assert logger.level == logging.DEBUG


def test_configure_logging_uses_configured_level(
    clean_parkour_logger, parkour_config
) -> None:
    with override_config(log_level="ERROR"):
        logger = configure_logging()

    assert logger.level == logging.ERROR
