r"""Unit tests for the hook manager."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import pytest

from aretrier.retry import Hook, HookManager

#########################################
#     Tests for HookManager (sync)      #
#########################################


def test_hook_manager_defaults() -> None:
    manager = HookManager()
    assert manager.success_hook is None
    assert manager.failure_hook is None


def test_on_success_without_hook() -> None:
    assert HookManager().on_success("res") == "res"


def test_on_success_without_override() -> None:
    callback = Mock(return_value="hooked")
    manager = HookManager(success_hook=Hook(callback, args=[1, 2]))
    assert manager.on_success("res") == "res"
    callback.assert_called_once_with("res", 1, 2)


def test_on_success_with_override() -> None:
    callback = Mock(return_value="hooked")
    manager = HookManager(success_hook=Hook(callback, override=True))
    assert manager.on_success("res") == "hooked"
    callback.assert_called_once_with("res")


def test_on_success_hook_error_propagates() -> None:
    manager = HookManager(success_hook=Hook(Mock(side_effect=KeyError("hook"))))
    with pytest.raises(KeyError, match=r"hook"):
        manager.on_success("res")


def test_on_failure_without_hook_reraises() -> None:
    error = RuntimeError("boom")
    with pytest.raises(RuntimeError) as exc_info:
        HookManager().on_failure(error)
    assert exc_info.value is error


def test_on_failure_without_override_reraises() -> None:
    error = RuntimeError("boom")
    callback = Mock(return_value="ignored")
    manager = HookManager(failure_hook=Hook(callback, args=["ctx"]))
    with pytest.raises(RuntimeError) as exc_info:
        manager.on_failure(error)
    assert exc_info.value is error
    callback.assert_called_once_with(error, "ctx")


def test_on_failure_with_override() -> None:
    error = RuntimeError("boom")
    manager = HookManager(
        failure_hook=Hook(lambda err, a, b: b - a, args=[5, 90], override=True)
    )
    assert manager.on_failure(error) == 85


def test_on_failure_hook_error_replaces_error() -> None:
    manager = HookManager(failure_hook=Hook(Mock(side_effect=ValueError("hook failed"))))
    with pytest.raises(ValueError, match=r"hook failed"):
        manager.on_failure(RuntimeError("boom"))


#########################################
#     Tests for HookManager (async)     #
#########################################


@pytest.mark.asyncio
async def test_on_success_async_without_hook() -> None:
    assert await HookManager().on_success_async(7) == 7


@pytest.mark.asyncio
async def test_on_success_async_with_override() -> None:
    callback = AsyncMock(return_value="hooked")
    manager = HookManager(success_hook=Hook(callback, args=["x"], override=True))
    assert await manager.on_success_async("res") == "hooked"
    callback.assert_awaited_once_with("res", "x")


@pytest.mark.asyncio
async def test_on_success_async_accepts_sync_hook() -> None:
    callback = Mock(return_value="hooked")
    manager = HookManager(success_hook=Hook(callback))
    assert await manager.on_success_async("res") == "res"
    callback.assert_called_once_with("res")


@pytest.mark.asyncio
async def test_on_failure_async_without_hook_reraises() -> None:
    error = RuntimeError("boom")
    with pytest.raises(RuntimeError) as exc_info:
        await HookManager().on_failure_async(error)
    assert exc_info.value is error


@pytest.mark.asyncio
async def test_on_failure_async_without_override_reraises() -> None:
    error = RuntimeError("boom")
    callback = AsyncMock(return_value="ignored")
    manager = HookManager(failure_hook=Hook(callback))
    with pytest.raises(RuntimeError) as exc_info:
        await manager.on_failure_async(error)
    assert exc_info.value is error
    callback.assert_awaited_once_with(error)


@pytest.mark.asyncio
async def test_on_failure_async_with_override() -> None:
    manager = HookManager(failure_hook=Hook(AsyncMock(return_value=None), override=True))
    assert await manager.on_failure_async(RuntimeError("boom")) is None


@pytest.mark.asyncio
async def test_on_failure_async_hook_error_replaces_error() -> None:
    manager = HookManager(failure_hook=Hook(AsyncMock(side_effect=ValueError("hook failed"))))
    with pytest.raises(ValueError, match=r"hook failed"):
        await manager.on_failure_async(RuntimeError("boom"))
