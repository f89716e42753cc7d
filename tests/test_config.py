"""Tests for ContextVar-based header configuration.

Validates defaults, the length cap, thread isolation and context manager
behavior.
"""

from threading import Thread

import pytest

from arroba import (
    Directive,
    HeaderConfig,
    LineTooLongError,
    get_header_config,
    header_config_context,
    parse_first_line,
    reset_header_config,
    set_header_config,
    tokenize_first_line,
)
from arroba.config import DEFAULT_MAX_LINE_LENGTH
from arroba.errors import ParseErrorKind


class TestHeaderConfigDataclass:
    """Test HeaderConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = HeaderConfig()
        assert config.max_line_length == DEFAULT_MAX_LINE_LENGTH
        assert config.directive_names is None

    def test_immutability(self) -> None:
        config = HeaderConfig()
        with pytest.raises(AttributeError):
            config.max_line_length = 1  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = HeaderConfig.from_dict({"max_line_length": 12, "unknown_key": True})
        assert config.max_line_length == 12

    def test_exceeds_limit(self) -> None:
        assert HeaderConfig(max_line_length=3).exceeds_limit(4)
        assert not HeaderConfig(max_line_length=3).exceeds_limit(3)
        assert not HeaderConfig(max_line_length=None).exceeds_limit(10**9)


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_header_config()

    def test_get_default(self) -> None:
        assert get_header_config() == HeaderConfig()

    def test_set_and_reset(self) -> None:
        config = HeaderConfig(max_line_length=5)
        set_header_config(config)
        assert get_header_config() is config
        reset_header_config()
        assert get_header_config().max_line_length == DEFAULT_MAX_LINE_LENGTH

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with header_config_context(HeaderConfig(max_line_length=5)):
                raise RuntimeError("boom")
        assert get_header_config().max_line_length == DEFAULT_MAX_LINE_LENGTH

    def test_thread_isolation(self) -> None:
        seen: dict[str, int | None] = {}

        def worker() -> None:
            seen["thread"] = get_header_config().max_line_length

        with header_config_context(HeaderConfig(max_line_length=7)):
            thread = Thread(target=worker)
            thread.start()
            thread.join()

        assert seen["thread"] == DEFAULT_MAX_LINE_LENGTH


class TestLineLengthCap:
    """Over-long candidate lines are rejected and not highlighted."""

    def test_parser_rejects_long_line(self) -> None:
        with header_config_context(HeaderConfig(max_line_length=10)):
            with pytest.raises(LineTooLongError) as exc_info:
                parse_first_line("\n@option key=value")
        err = exc_info.value
        assert err.kind is ParseErrorKind.TOO_LONG
        assert err.length == 17
        assert err.limit == 10
        assert err.lineno == 2

    def test_lexer_returns_nothing_for_long_line(self) -> None:
        with header_config_context(HeaderConfig(max_line_length=10)):
            assert tokenize_first_line("@option key=value") == ()

    def test_line_at_limit_is_accepted(self) -> None:
        with header_config_context(HeaderConfig(max_line_length=7)):
            assert parse_first_line("@option") == Directive("option")
            assert len(tokenize_first_line("@option")) == 2

    def test_cap_disabled(self) -> None:
        source = "@opt " + " ".join(f"k{i}=v" for i in range(2000))
        with header_config_context(HeaderConfig(max_line_length=None)):
            result = parse_first_line(source)
        assert isinstance(result, Directive)
        assert len(result.pairs) == 2000

    def test_default_cap_applies(self) -> None:
        source = "@opt k=" + "v" * DEFAULT_MAX_LINE_LENGTH
        with pytest.raises(LineTooLongError):
            parse_first_line(source)
        assert tokenize_first_line(source) == ()
