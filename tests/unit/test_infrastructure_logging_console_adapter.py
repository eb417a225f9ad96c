"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error/critical
- Context binding
- Global structlog configuration only when requested

Architecture:
- Unit tests with mocked structlog
- NO real logging dependencies
"""

from unittest.mock import MagicMock, patch

import pytest

from resumable_sse.infrastructure.logging import ConsoleAdapter

STRUCTLOG = "resumable_sse.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning", "error", "critical"])
    def test_level_logs_message_with_context(self, level: str):
        """Test each level forwards message and structured context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("event_source_opened", attempts=2)

            getattr(mock_logger, level).assert_called_once_with(
                "event_source_opened",
                attempts=2,
            )

    def test_logs_with_no_context(self):
        """Test logging with no additional context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.info("event_source_closed")

            mock_logger.info.assert_called_once_with("event_source_closed")

    def test_error_with_exception_adds_details(self):
        """Test error() flattens an exception into context fields."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("event_source_fatal_error", error=ValueError("bad"), url="u")

            mock_logger.error.assert_called_once_with(
                "event_source_fatal_error",
                url="u",
                error_type="ValueError",
                error_message="bad",
            )

    def test_critical_with_exception_adds_details(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("crash", error=RuntimeError("boom"))

            mock_logger.critical.assert_called_once_with(
                "crash",
                error_type="RuntimeError",
                error_message="boom",
            )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter(self):
        """Test bind() returns a new adapter using the bound logger."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(url="https://example.com/events")
            bound.info("event_source_opened")

            assert bound is not adapter
            assert isinstance(bound, ConsoleAdapter)
            mock_logger.bind.assert_called_once_with(url="https://example.com/events")
            bound_logger.info.assert_called_once_with("event_source_opened")
            mock_logger.info.assert_not_called()


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_embedded_use_does_not_configure(self):
        """Test the default adapter leaves the host's structlog setup alone."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            mock_structlog.configure.assert_not_called()
            mock_structlog.get_logger.assert_called_once_with("resumable_sse")

    def test_configure_console_renderer(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(configure=True, level="DEBUG")

            mock_structlog.configure.assert_called_once()
            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
            mock_structlog.processors.JSONRenderer.assert_not_called()
            mock_structlog.make_filtering_bound_logger.assert_called_once_with(10)

    def test_configure_json_renderer(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(configure=True, use_json=True, level="warning")

            mock_structlog.processors.JSONRenderer.assert_called_once_with()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()
            mock_structlog.make_filtering_bound_logger.assert_called_once_with(30)
