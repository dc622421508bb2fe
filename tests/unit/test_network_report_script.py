"""
Unit tests for the network report script.

Tests cover:
- Depth argument handling
- Exit codes for missing members and invalid depth
- Settings passed to the rollup service
"""

import importlib.util
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from firefund.utils.exceptions import InvalidDepthError, MemberNotFoundError

SCRIPT_PATH = Path(__file__).parents[2] / "scripts" / "network_report.py"


@pytest.fixture
def script():
    """The report script loaded as a module."""
    spec = importlib.util.spec_from_file_location("network_report", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def rollup_service(script, monkeypatch):
    """Patch the script's settings, engine and service; return the service."""
    settings = MagicMock()
    settings.network_max_depth = 3
    settings.snapshot_fetch_timeout = 10.0
    settings.snapshot_fetch_concurrency = 7

    engine = MagicMock()
    engine.dispose = AsyncMock()

    service = MagicMock()
    service.run = AsyncMock()
    service_class = MagicMock(return_value=service)

    monkeypatch.setattr(script, "get_settings", lambda: settings)
    monkeypatch.setattr(script, "setup_logging", MagicMock())
    monkeypatch.setattr(script, "create_engine_from_settings", lambda _: engine)
    monkeypatch.setattr(script, "create_session_maker", MagicMock())
    monkeypatch.setattr(script, "SqlAlchemyNetworkDataSource", MagicMock())
    monkeypatch.setattr(script, "NetworkRollupService", service_class)

    service.engine = engine
    service.service_class = service_class
    return service


class TestReport:
    """Test the report coroutine."""

    @pytest.mark.asyncio
    async def test_depth_zero_is_not_replaced(self, script, rollup_service):
        """--depth 0 reaches the service and fails as invalid."""
        rollup_service.run.side_effect = InvalidDepthError(0)

        exit_code = await script.report("root", 0)

        assert exit_code == 2
        rollup_service.run.assert_awaited_once_with("root", 0)
        rollup_service.engine.dispose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_negative_depth_is_invalid(self, script, rollup_service):
        """Negative depth exits with the invalid depth code."""
        rollup_service.run.side_effect = InvalidDepthError(-2)

        assert await script.report("root", -2) == 2

    @pytest.mark.asyncio
    async def test_missing_depth_uses_setting(self, script, rollup_service):
        """No --depth falls back to NETWORK_MAX_DEPTH."""
        rollup_service.run.side_effect = MemberNotFoundError("root")

        await script.report("root", None)

        rollup_service.run.assert_awaited_once_with("root", 3)

    @pytest.mark.asyncio
    async def test_member_not_found(self, script, rollup_service):
        """Unknown member exits with 1."""
        rollup_service.run.side_effect = MemberNotFoundError("ghost")

        assert await script.report("ghost", 2) == 1
        rollup_service.engine.dispose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_fetch_settings_passed_to_service(self, script, rollup_service):
        """Timeout and concurrency come from settings."""
        rollup_service.run.side_effect = MemberNotFoundError("root")

        await script.report("root", None)

        kwargs = rollup_service.service_class.call_args.kwargs
        assert kwargs["fetch_timeout"] == 10.0
        assert kwargs["max_concurrency"] == 7
