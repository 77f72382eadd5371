"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog
from _pytest.logging import LogCaptureFixture

from aurrpc import AURClient
from aurrpc.logging import LogLevel, Profile, configure_logging
from aurrpc.testing import MockAURRPC

from .constants import AUR_URL


def test_log_level() -> None:
    assert LogLevel("debug") == LogLevel.DEBUG
    assert LogLevel("Warning") == LogLevel.WARNING
    with pytest.raises(ValueError, match="verbose"):
        LogLevel("verbose")


def test_configure_logging_production(caplog: LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)
    configure_logging(
        name="aurrpc", profile=Profile.production, log_level=LogLevel.INFO
    )

    logger = structlog.get_logger("aurrpc")
    logger = logger.bind(answer=42)
    logger.info("Hello world")
    logger.debug("Not shown")

    assert len(caplog.record_tuples) == 1
    app, level, line = caplog.record_tuples[0]
    assert app == "aurrpc"
    assert level == logging.INFO
    assert json.loads(line) == {
        "answer": 42,
        "event": "Hello world",
        "level": "info",
        "logger": "aurrpc",
    }


def test_configure_logging_development(caplog: LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)
    configure_logging(profile="development", log_level="info")

    logger = structlog.get_logger("aurrpc")
    logger.warning("Something odd", package="cower")

    app, level, line = caplog.record_tuples[0]
    assert app == "aurrpc"
    assert level == logging.WARNING
    assert "Something odd" in line
    assert "package" in line
    assert "cower" in line


def test_configure_logging_stderr(
    capsys: pytest.CaptureFixture[str],
) -> None:
    configure_logging(profile=Profile.production, log_level=LogLevel.INFO)

    logger = structlog.get_logger("aurrpc")
    logger.info("Looking up packages", count=2)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert json.loads(captured.err) == {
        "count": 2,
        "event": "Looking up packages",
        "level": "info",
        "logger": "aurrpc",
    }


@pytest.mark.asyncio
async def test_client_logging(
    caplog: LogCaptureFixture, mock_aur: MockAURRPC
) -> None:
    caplog.set_level(logging.DEBUG)
    configure_logging(profile=Profile.production, log_level=LogLevel.DEBUG)

    async with AURClient(base_url=AUR_URL) as client:
        await client.info(["cower"])

    messages = [
        json.loads(line)
        for name, _, line in caplog.record_tuples
        if name == "aurrpc"
    ]
    events = [m["event"] for m in messages]
    assert events == ["Sending AUR RPC request", "Received AUR RPC response"]
    assert messages[1]["status"] == 200
    assert messages[0]["url"].startswith(AUR_URL)
