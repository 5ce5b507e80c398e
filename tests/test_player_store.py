import asyncio

import orjson
import pytest

from leaderboard.config.settings import Settings
from leaderboard.services.errors import DuplicateNameError, StoreError
from leaderboard.services.player_store import JsonPlayerStore, MemoryPlayerStore, build_store


@pytest.fixture(params=["memory", "json"])
def any_store(request, tmp_path):
    if request.param == "memory":
        return MemoryPlayerStore()
    return JsonPlayerStore(tmp_path / "players.json")


def test_store_gateway_operations(any_store):
    async def scenario():
        pierre = await any_store.insert("pierre")
        lea = await any_store.insert("lea")
        await any_store.update_score(lea, 80)
        await any_store.update_score(pierre, 10)
        return pierre, lea

    pierre, lea = asyncio.run(scenario())

    assert asyncio.run(any_store.exists_by_name("lea")) is True
    assert asyncio.run(any_store.exists_by_name("paul")) is False
    assert asyncio.run(any_store.find_by_id(lea)).score == 80
    assert asyncio.run(any_store.find_by_id("f" * 32)) is None
    assert asyncio.run(any_store.count_with_score_greater_than(10)) == 1
    assert asyncio.run(any_store.count_with_score_greater_than(80)) == 0
    assert {p.name for p in asyncio.run(any_store.find_all())} == {"pierre", "lea"}
    assert asyncio.run(any_store.update_score("f" * 32, 1)) is False
    assert asyncio.run(any_store.delete_all()) == 2
    assert asyncio.run(any_store.delete_all()) == 0


def test_store_refuses_duplicate_name_on_insert(any_store):
    asyncio.run(any_store.insert("freddy"))
    with pytest.raises(DuplicateNameError):
        asyncio.run(any_store.insert("freddy"))
    assert len(asyncio.run(any_store.find_all())) == 1


def test_json_store_survives_restart(tmp_path):
    path = tmp_path / "data" / "players.json"
    first = JsonPlayerStore(path)
    pid = asyncio.run(first.insert("alain"))
    asyncio.run(first.update_score(pid, 10))

    reopened = JsonPlayerStore(path)
    player = asyncio.run(reopened.find_by_id(pid))

    assert (player.name, player.score) == ("alain", 10)
    assert orjson.loads(path.read_bytes())[pid]["score"] == 10


def test_json_store_corrupt_file_raises_store_error(tmp_path):
    path = tmp_path / "players.json"
    path.write_bytes(b"{not json")

    with pytest.raises(StoreError):
        asyncio.run(JsonPlayerStore(path).find_all())


def test_json_store_write_failure_is_not_committed(tmp_path, monkeypatch):
    from leaderboard.services import player_store

    store = JsonPlayerStore(tmp_path / "players.json")
    asyncio.run(store.insert("paul"))

    def failing_write(path, data):
        raise OSError("read-only filesystem")

    monkeypatch.setattr(player_store, "write_json", failing_write)
    with pytest.raises(StoreError):
        asyncio.run(store.insert("lucie"))
    assert [p.name for p in asyncio.run(store.find_all())] == ["paul"]


def test_build_store_from_settings(tmp_path):
    assert isinstance(build_store(Settings(STORE_BACKEND="memory")), MemoryPlayerStore)

    json_store = build_store(Settings(STORE_BACKEND="JSON", DATA_DIR=str(tmp_path)))
    assert isinstance(json_store, JsonPlayerStore)
    assert json_store.path == tmp_path / "players.json"

    with pytest.raises(ValueError):
        build_store(Settings(STORE_BACKEND="mongo"))
