"""Tests unitarios para la configuración de logging."""

import json
import logging

from shopify_rest.core.config import Settings
from shopify_rest.core.logging_config import (
    StructuredFormatter,
    get_logging_configuration,
    log_api_call,
    setup_logging,
)


class TestLoggingConfiguration:
    """Tests para get_logging_configuration."""

    def test_console_only_by_default(self):
        """Sin LOG_FILE_PATH solo hay handler de consola."""
        config = get_logging_configuration(Settings())

        assert list(config["handlers"]) == ["console"]
        assert config["handlers"]["console"]["formatter"] == "standard"

    def test_debug_uses_colored_formatter(self):
        """En DEBUG la consola usa colores."""
        config = get_logging_configuration(Settings(DEBUG=True))

        assert config["handlers"]["console"]["formatter"] == "colored"

    def test_json_formatter(self):
        """LOG_JSON activa el formato estructurado."""
        config = get_logging_configuration(Settings(LOG_JSON=True))

        assert config["handlers"]["console"]["formatter"] == "json"

    def test_file_handler(self, tmp_path):
        """Con LOG_FILE_PATH se agrega un handler rotativo."""
        log_path = str(tmp_path / "logs" / "shopify.log")
        config = get_logging_configuration(Settings(LOG_FILE_PATH=log_path))

        assert config["handlers"]["file"]["filename"] == log_path
        assert config["root"]["handlers"] == ["console", "file"]

    def test_setup_logging_creates_log_directory(self, tmp_path):
        """setup_logging crea el directorio del archivo de log."""
        log_path = tmp_path / "logs" / "shopify.log"
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level

        try:
            setup_logging(Settings(LOG_FILE_PATH=str(log_path), LOG_LEVEL="WARNING"))

            assert log_path.parent.is_dir()
            assert root.level == logging.WARNING
        finally:
            for handler in root.handlers:
                if handler not in saved_handlers:
                    handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)


class TestStructuredFormatter:
    """Tests para StructuredFormatter."""

    def test_formats_record_as_json_with_extra(self):
        """El record se serializa como JSON con los campos extra."""
        record = logging.LogRecord("shopify_rest.test", logging.INFO, __file__, 10, "hola %s", ("mundo",), None)
        record.endpoint = "inventory_levels.json"

        entry = json.loads(StructuredFormatter().format(record))

        assert entry["message"] == "hola mundo"
        assert entry["level"] == "INFO"
        assert entry["extra"]["endpoint"] == "inventory_levels.json"


class TestLogApiCall:
    """Tests para log_api_call."""

    def test_network_failure_logged_as_error(self, caplog):
        """Sin código de estado se loggea como error."""
        with caplog.at_level(logging.DEBUG, logger="shopify_rest.api.call"):
            log_api_call("GET", "https://x/inventory_levels.json", None, 0.25)

        assert caplog.records[-1].levelno == logging.ERROR
        assert caplog.records[-1].duration_ms == 250.0

    def test_client_error_logged_as_warning(self, caplog):
        """Un 4xx se loggea como warning."""
        with caplog.at_level(logging.DEBUG, logger="shopify_rest.api.call"):
            log_api_call("POST", "https://x/inventory_levels/set.json", 422, 0.1)

        assert caplog.records[-1].levelno == logging.WARNING
