"""Placeholder numbering must never leak between compilations."""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from filter_compiler import build_sql_fragment


def wide_filter(width: int) -> list[dict[str, object]]:
    return [
        {"field": f"f{i}", "operator": "eq", "value": i, "type": "int"}
        for i in range(width)
    ]


def check_fragment(width: int) -> None:
    fragment = build_sql_fragment(wide_filter(width))
    assert list(fragment.params) == [f"param{i}" for i in range(1, width + 1)]
    assert list(fragment.params.values()) == list(range(width))
    assert f":param{width}" in fragment.where
    assert f":param{width + 1}" not in fragment.where


def test_threads_do_not_share_counters():
    widths = [1 + (i % 25) for i in range(200)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        for future in [pool.submit(check_fragment, w) for w in widths]:
            future.result()


@pytest.mark.asyncio
async def test_interleaved_tasks_do_not_share_counters():
    widths = [3, 17, 1, 9, 30, 2]
    await asyncio.gather(*(asyncio.to_thread(check_fragment, w) for w in widths))
