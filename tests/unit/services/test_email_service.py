"""
Unit tests for LogOnlyEmailService
"""
import logging

import pytest

from src.adapter.services.email_service import LogOnlyEmailService


@pytest.mark.asyncio
async def test_log_only_email_service_never_logs_reset_url(caplog):
    reset_url = "http://localhost:8000/reset-pw?token=secret-token-value"

    with caplog.at_level(logging.INFO, logger="src.adapter.services.email_service"):
        await LogOnlyEmailService().send_password_reset("user@example.com", reset_url)

    assert "user@example.com" in caplog.text
    assert "secret-token-value" not in caplog.text
