"""
Tests for logging setup — levels, formats, and structured fields.
"""

import logging
from pathlib import Path

import pytest

from pkgmatrix.core.observability.logging_config import (
    FieldsFormatter,
    _parse_level,
    setup_logging,
)


class TestParseLevel:
    @pytest.mark.parametrize(
        "name, expected",
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), ("bogus", logging.WARNING), (None, logging.WARNING)],
    )
    def test_levels(self, name, expected):
        assert _parse_level(name) == expected


class TestFieldsFormatter:
    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord("t", logging.DEBUG, __file__, 1, "checked", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_appends_known_fields(self):
        fmt = FieldsFormatter("%(message)s%(fields)s")
        out = fmt.format(self._record(constraint=">=22.04", matched=True, unrelated="x"))
        assert out == "checked constraint='>=22.04' matched=True"

    def test_no_fields(self):
        fmt = FieldsFormatter("%(message)s%(fields)s")
        assert fmt.format(self._record()) == "checked"


class TestSetupLogging:
    def test_console_level(self):
        setup_logging(level="INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "pkgmatrix.log"
        setup_logging(level="WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        logging.getLogger("pkgmatrix.test").debug("hello", extra={"catalog": "base"})
        for handler in root.handlers:
            handler.flush()
        assert "hello catalog='base'" in log_file.read_text()
        for handler in root.handlers:
            handler.close()
