from loguru import logger

from althy.config.settings import Settings
from althy.core.logger import setup_logger


def test_setup_logger_writes_file_at_configured_level(tmp_path):
    log_file = tmp_path / "logs" / "althy.log"
    config = Settings(_env_file=None, LOG_LEVEL="warning", LOG_FILE=str(log_file))

    sink_ids = setup_logger(config)
    logger.info("plan normalized", weekly_items=3)
    logger.warning("model returned an invalid plan", kind="INVALID_DAY")
    logger.complete()

    content = log_file.read_text()
    assert len(sink_ids) == 2
    assert "model returned an invalid plan" in content
    assert "INVALID_DAY" in content
    assert "plan normalized" not in content

    setup_logger(Settings(_env_file=None))


def test_setup_logger_console_only():
    sink_ids = setup_logger(Settings(_env_file=None, LOG_FILE=None))

    assert len(sink_ids) == 1
