import io
import logging
import sys

from user_registry.core.logging_config import ROOT_LOGGER_NAME, configure_logging


def _cli_handlers(logger: logging.Logger):
    return [h for h in logger.handlers if getattr(h, "_is_user_registry_cli_handler", False)]


def test_configure_logging_is_idempotent():
    logger = configure_logging(logging.INFO, logger_name="user_registry.test_idempotent")
    configure_logging("DEBUG", logger_name="user_registry.test_idempotent")

    assert len(_cli_handlers(logger)) == 1
    assert logger.level == logging.DEBUG


def test_default_logger_is_package_logger():
    logger = configure_logging()

    assert logger.name == ROOT_LOGGER_NAME
    assert logger.level == logging.WARNING
    assert len(_cli_handlers(logger)) == 1


def test_handler_writes_to_current_stderr(capsys):
    logger = configure_logging(logging.INFO, logger_name="user_registry.test_stderr")
    logger.propagate = False
    try:
        logger.info("hello stderr")
    finally:
        logger.propagate = True

    captured = capsys.readouterr()
    assert "[INFO] user_registry.test_stderr: hello stderr" in captured.err
    assert captured.out == ""


def test_reconfigure_rebinds_a_plain_stream_handler(capsys):
    logger = configure_logging(logging.INFO, logger_name="user_registry.test_rebind")
    (first,) = _cli_handlers(logger)

    configure_logging(logging.INFO, logger_name="user_registry.test_rebind")
    (second,) = _cli_handlers(logger)

    assert second is not first
    assert type(second) is logging.StreamHandler
    assert second.stream is sys.stderr

    replacement = io.StringIO()
    assert second.setStream(replacement) is sys.stderr
    assert second.stream is replacement
