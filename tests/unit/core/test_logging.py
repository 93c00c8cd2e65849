"""Tests for structured logging helpers."""

from __future__ import annotations

import pytest
import structlog

from questcore.core.logging import (
    add_app_context,
    bind_context,
    bound_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)


class TestLoggingContext:
    """Tests for context binding."""

    def test_bind_and_unbind(self) -> None:
        """Test context variables can be bound and removed."""
        clear_context()
        bind_context(battle_id="abc123", monster="goblin")

        assert structlog.contextvars.get_contextvars() == {"battle_id": "abc123", "monster": "goblin"}

        unbind_context("monster")
        assert structlog.contextvars.get_contextvars() == {"battle_id": "abc123"}

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}

    def test_bound_context_restores_previous_values(self) -> None:
        """Values bound inside the block are dropped or restored on exit."""
        clear_context()
        bind_context(monster="goblin")

        with bound_context(battle_id="abc123", monster="wraith"):
            assert structlog.contextvars.get_contextvars() == {"battle_id": "abc123", "monster": "wraith"}

        assert structlog.contextvars.get_contextvars() == {"monster": "goblin"}
        clear_context()

    def test_add_app_context(self) -> None:
        """Every event is tagged with the engine name."""
        event = add_app_context(None, "info", {"event": "x"})

        assert event["app"] == "questcore"


class TestConfigureLogging:
    """Tests for logging configuration."""

    def test_json_logging(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test JSON output carries the event and the app tag."""
        configure_logging(level="DEBUG", json_format=True)
        logger = get_logger("test")

        logger.info("Attack resolved", hit=True)

        out = capsys.readouterr().out
        assert '"event": "Attack resolved"' in out
        assert '"app": "questcore"' in out
        structlog.reset_defaults()

    def test_console_logging(self) -> None:
        """Test console logging configures without error."""
        configure_logging(level="WARNING")

        assert get_logger(__name__) is not None
        structlog.reset_defaults()
