"""
Unit tests for FastAPI application lifespan management.

Startup checks the database connection and turns on Logfire; a failing
database check is logged rather than stopping the server.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI

from rockmundo.server.main import lifespan

pytestmark = pytest.mark.asyncio


class TestLifespan:
    async def test_startup_checks_database_and_initializes_logfire(self):
        app = FastAPI()

        with (
            patch("rockmundo.server.main.check_connection", new_callable=AsyncMock) as mock_check,
            patch("rockmundo.server.main.initialize_logfire") as mock_logfire,
        ):
            async with lifespan(app):
                mock_check.assert_awaited_once()
                mock_logfire.assert_called_once_with(app)

    async def test_database_failure_does_not_abort_startup(self):
        app = FastAPI()

        with (
            patch("rockmundo.server.main.check_connection", new_callable=AsyncMock) as mock_check,
            patch("rockmundo.server.main.initialize_logfire"),
            patch("rockmundo.server.main.logger") as mock_logger,
        ):
            mock_check.side_effect = ConnectionRefusedError("db down")

            async with lifespan(app):
                pass

        mock_logger.error.assert_called_once()
        assert "Database connection check failed" in mock_logger.error.call_args[0][0]

    async def test_shutdown_is_logged(self):
        with (
            patch("rockmundo.server.main.check_connection", new_callable=AsyncMock),
            patch("rockmundo.server.main.initialize_logfire"),
            patch("rockmundo.server.main.logger") as mock_logger,
        ):
            async with lifespan(FastAPI()):
                pass

        messages = [call.args[0] for call in mock_logger.info.call_args_list]
        assert any("Shutting down" in message for message in messages)
