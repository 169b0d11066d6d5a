"""Tests for the MongoDB index setup script."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo import ASCENDING
from pymongo.errors import ServerSelectionTimeoutError

from scripts.setup_mongodb import EXPECTED_INDEXES, create_indexes, main, run_setup


@pytest.fixture
def collection():
    collection = MagicMock()
    collection.create_index = AsyncMock()
    collection.index_information = AsyncMock(
        return_value={"_id_": {}, **{name: {} for name in EXPECTED_INDEXES.values()}}
    )
    return collection


@pytest.fixture
def client(collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=collection)
    client = MagicMock()
    client.__getitem__ = MagicMock(return_value=db)
    client.admin.command = AsyncMock(return_value={"ok": 1})
    return client


@pytest.mark.asyncio
async def test_creates_unique_planned_week_index(client, collection):
    await create_indexes(client)

    calls = {call.kwargs["name"]: call for call in collection.create_index.await_args_list}
    week_index = calls["tenant_starting_date_unique"]
    assert week_index.args[0] == [("tenant_id", ASCENDING), ("starting_date", ASCENDING)]
    assert week_index.kwargs["unique"] is True
    assert calls["tenant_id_unique"].kwargs["unique"] is True
    assert "tenant_name" in calls


@pytest.mark.asyncio
async def test_run_setup_succeeds(client):
    assert await run_setup(client) == 0
    client.admin.command.assert_awaited_once_with("ping")


@pytest.mark.asyncio
async def test_missing_index_fails(client, collection):
    collection.index_information.return_value = {"_id_": {}}

    assert await run_setup(client) == 1


@pytest.mark.asyncio
async def test_unreachable_server_fails(client, collection):
    client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")

    assert await run_setup(client) == 1
    collection.create_index.assert_not_awaited()


@pytest.mark.asyncio
async def test_main_requires_uri(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MONGODB_URI", raising=False)

    assert await main() == 1
