import logging
import pytest
from catalog.config import Settings
from catalog.utils.logging_config import configure_logging


@pytest.fixture
def catalog_handlers():
    root_logger = logging.getLogger()
    level = root_logger.level
    yield lambda: [h for h in root_logger.handlers if getattr(h, "_catalog_handler", False)]
    for handler in [h for h in root_logger.handlers if getattr(h, "_catalog_handler", False)]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(level)


def test_debug_logs_to_console_only(tmp_path, catalog_handlers):
    configure_logging(Settings(DEBUG=True, LOG_DIR=str(tmp_path / "logs")))

    assert len(catalog_handlers()) == 1
    assert not (tmp_path / "logs").exists()
    assert logging.getLogger().level == logging.DEBUG


def test_production_writes_app_and_error_logs(tmp_path, catalog_handlers):
    configure_logging(Settings(DEBUG=False, LOG_DIR=str(tmp_path / "logs"), LOG_LEVEL="warning"))

    logging.getLogger("catalog.test").error("disk full")
    for handler in catalog_handlers():
        handler.flush()

    assert logging.getLogger().level == logging.WARNING
    assert "disk full" in (tmp_path / "logs" / "app.log").read_text()
    assert "disk full" in (tmp_path / "logs" / "error.log").read_text()


def test_reconfiguring_does_not_duplicate_handlers(tmp_path, catalog_handlers):
    settings = Settings(DEBUG=False, LOG_DIR=str(tmp_path))

    configure_logging(settings)
    configure_logging(settings)

    assert len(catalog_handlers()) == 3


def test_unknown_level_falls_back_to_info(tmp_path, catalog_handlers):
    configure_logging(Settings(DEBUG=False, LOG_DIR=str(tmp_path), LOG_LEVEL="chatty"))

    assert logging.getLogger().level == logging.INFO
