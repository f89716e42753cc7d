"""Tests for arroba.utils."""

import logging

from arroba.utils import get_logger


class TestGetLogger:
    """Loggers are namespaced under ``arroba``."""

    def test_prefix_added(self) -> None:
        assert get_logger("completion").name == "arroba.completion"

    def test_prefix_not_duplicated(self) -> None:
        assert get_logger("arroba.parser").name == "arroba.parser"
        assert get_logger("arroba").name == "arroba"

    def test_parser_logs_rejections(self, caplog) -> None:  # type: ignore[no-untyped-def]
        from arroba import MissingMarkerError, parse_first_line

        with caplog.at_level(logging.DEBUG, logger="arroba"):
            try:
                parse_first_line("option")
            except MissingMarkerError:
                pass
        assert any("no marker" in record.getMessage() for record in caplog.records)

