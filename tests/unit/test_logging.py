"""Unit tests for the femtologging helpers."""

from __future__ import annotations

import pytest

from harbor_analyst.logging import (
    configure_logging,
    format_log_message,
    log_debug,
    log_error,
    log_exception,
    log_info,
    log_warning,
    normalize_log_level,
)


class _RecordingLogger:
    """Stands in for a femtologging logger and keeps every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, object | None, bool]] = []

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str:
        self.calls.append((level, message, exc_info, stack_info))
        return message


class TestNormalizeLogLevel:
    """Level names from flags and environment variables."""

    @pytest.mark.parametrize(
        ("raw", "expected", "invalid"),
        [
            pytest.param("debug", "DEBUG", False, id="lowercase"),
            pytest.param("  Warn ", "WARN", False, id="padded-alias"),
            pytest.param("TRACE", "TRACE", False, id="trace"),
            pytest.param(None, "INFO", True, id="none"),
            pytest.param("   ", "INFO", True, id="blank"),
            pytest.param("verbose", "INFO", True, id="unknown"),
        ],
    )
    def test_normalize(
        self,
        raw: str | None,
        expected: str,
        invalid: bool,  # noqa: FBT001
    ) -> None:
        """Known names are upper-cased; anything else falls back to INFO."""
        assert normalize_log_level(raw) == (expected, invalid), (
            f"Unexpected normalisation of {raw!r}"
        )


class TestFormatLogMessage:
    """Percent-style interpolation."""

    def test_interpolates_arguments(self) -> None:
        """Arguments are applied with ``%``."""
        assert format_log_message("%d warning(s) in %s", 3, "raw") == (
            "3 warning(s) in raw"
        )

    def test_template_without_arguments_is_untouched(self) -> None:
        """Literal percent signs survive when no arguments are given."""
        assert format_log_message("100% of rows parsed") == "100% of rows parsed"


class TestEmitHelpers:
    """Level routing of the log_* helpers."""

    def test_debug_and_info_levels(self) -> None:
        """log_debug and log_info emit their own level names."""
        logger = _RecordingLogger()

        log_debug(logger, "reading %s", "user.csv")
        log_info(logger, "built %d project(s)", 2)

        assert logger.calls == [
            ("DEBUG", "reading user.csv", None, False),
            ("INFO", "built 2 project(s)", None, False),
        ]

    def test_warning_forwards_exc_info(self) -> None:
        """exc_info reaches the logger unchanged."""
        logger = _RecordingLogger()
        exc = KeyError("repo")

        log_warning(logger, "skipped row %d", 4, exc_info=exc)

        assert logger.calls == [("WARNING", "skipped row 4", exc, False)]

    def test_error_never_requests_stack_info(self) -> None:
        """Stack capture stays off for errors."""
        logger = _RecordingLogger()

        log_error(logger, "aborted: %s", "bad config")

        assert logger.calls == [("ERROR", "aborted: bad config", None, False)]

    def test_log_exception_attaches_exception(self) -> None:
        """log_exception logs a fixed message at ERROR with the exception."""
        logger = _RecordingLogger()
        exc = OSError("disk full")

        log_exception(logger, "could not write report.pdf", exc)

        assert logger.calls == [("ERROR", "could not write report.pdf", exc, False)]


@pytest.mark.parametrize(
    ("raw", "expected", "invalid"),
    [
        pytest.param("error", "ERROR", False, id="valid"),
        pytest.param("loud", "INFO", True, id="invalid"),
    ],
)
def test_configure_logging_installs_normalised_level(
    monkeypatch: pytest.MonkeyPatch,
    raw: str,
    expected: str,
    invalid: bool,  # noqa: FBT001
) -> None:
    """basicConfig receives the normalised level and keeps existing handlers."""
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr("harbor_analyst.logging.basicConfig", fake_basic_config)

    assert configure_logging(raw) == (expected, invalid)
    assert captured == {"level": expected, "force": False}
