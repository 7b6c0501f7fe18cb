"""ロギング設定のテスト."""

import logging

import structlog

from ballot_ledger.common.logging import get_logger, is_configured, setup_logging


class TestSetupLogging:
    def test_configures_root_handler(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging(level="DEBUG", log_format="json")

            assert is_configured() is True
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert isinstance(
                root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter
            )
            assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            structlog.reset_defaults()

    def test_unknown_level_falls_back_to_info(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging(level="verbose")
            assert root.level == logging.INFO
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            structlog.reset_defaults()

    def test_get_logger_accepts_key_values(self) -> None:
        logger = get_logger("ballot_ledger.test")
        logger.info("event", election_id=1)
