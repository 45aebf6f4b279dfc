import asyncio

import pytest
from paramconf.config.resolver import auto_resolve


@pytest.mark.asyncio
async def test_auto_resolves_nested_callables():
    async def bar() -> str:
        return ""

    async def baz() -> int:
        return 1

    result = await auto_resolve({"foo": 1, "bar": bar, "biz": {"baz": baz}})

    assert result == {"foo": 1, "bar": "", "biz": {"baz": 1}}


@pytest.mark.asyncio
async def test_auto_resolve_respects_lists():
    async def bar() -> str:
        return ""

    result = await auto_resolve({"arr": [1, 2], "bar": bar})

    assert result == {"arr": [1, 2], "bar": ""}


@pytest.mark.asyncio
async def test_auto_resolve_bounds_concurrency():
    running = 0
    peak = 0

    async def work() -> str:
        nonlocal running, peak
        running += 1
        peak = max(peak, running)
        await asyncio.sleep(0.01)
        running -= 1
        return "ok"

    result = await auto_resolve({f"k{i}": work for i in range(8)}, limit=3)

    assert set(result.values()) == {"ok"}
    assert peak == 3


@pytest.mark.asyncio
async def test_auto_resolve_rejects_bad_limit():
    with pytest.raises(ValueError):
        await auto_resolve({}, limit=0)
