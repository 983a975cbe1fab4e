import logging
import pytest
from hyperdisk.logging_config import configure_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("hyperdisk")
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestConfigureLogging:
    def test_installs_console_handler(self, package_logger):
        logger = configure_logging(logging.DEBUG)

        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_repeated_calls_do_not_duplicate_handlers(self, package_logger):
        configure_logging()
        configure_logging(logging.WARNING)

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.WARNING

    def test_module_loggers_propagate_to_package_logger(self, package_logger, capsys):
        from hyperdisk.geometry.line import Line

        configure_logging(logging.DEBUG)
        # Parallel lines log at debug level
        Line(a=0.0, b=1.0, c=0.0).intersect_line(Line(a=0.0, b=1.0, c=0.5))

        assert "hyperdisk.geometry.line - DEBUG - No intersection between parallel lines" in capsys.readouterr().out
