import pytest

from config import settings
from store import conversions as conversion_store


@pytest.mark.asyncio
async def test_save_assigns_ids_and_timestamp():
    first = await conversion_store.save(100.0, "usd", "eur", 0.92, 92.0)
    second = await conversion_store.save(50.0, "GBP", "USD", 1.27, 63.5)
    assert (first.id, second.id) == (1, 2)
    assert first.from_currency == "USD"
    assert first.created_at.tzinfo is not None


@pytest.mark.asyncio
async def test_list_recent_newest_first_with_limit():
    for i in range(4):
        await conversion_store.save(float(i + 1), "USD", "EUR", 0.9, 0.9 * (i + 1))
    records = await conversion_store.list_recent()
    assert [r.amount for r in records] == [4.0, 3.0, 2.0, 1.0]
    limited = await conversion_store.list_recent(limit=2)
    assert [r.amount for r in limited] == [4.0, 3.0]


@pytest.mark.asyncio
async def test_history_is_capped(monkeypatch):
    monkeypatch.setattr(settings, "conversions_max_items", 2)
    for i in range(3):
        await conversion_store.save(float(i + 1), "USD", "EUR", 0.9, 0.9)
    records = await conversion_store.list_recent()
    assert [r.amount for r in records] == [3.0, 2.0]
