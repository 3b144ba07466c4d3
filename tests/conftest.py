import os
import sys

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import store.client as client


@pytest.fixture(autouse=True)
def clear_fallback(monkeypatch):
    """Wipe the in-memory redis fallback before and after each test and make
    the store skip the redis connection attempt entirely.
    """
    client.reset_fallback()

    async def no_redis():
        return None

    monkeypatch.setattr(client, "get_redis", no_redis)

    yield

    client.reset_fallback()


@pytest.fixture
def fresh_source(monkeypatch):
    """Reset the cached rate source so each test builds or injects its own."""
    import api.routes.common as common

    monkeypatch.setattr(common, "_source", None)
    return common
