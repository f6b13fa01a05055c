"""Tests for RecordStore"""

import json

from foodbridge.services.record_store import (
    ADMIN_LOGINS_TABLE,
    VOLUNTEERS_TABLE,
    RecordStore,
)


def test_load_missing_table_is_empty(record_store):
    assert record_store.load(VOLUNTEERS_TABLE) == []


def test_save_then_load_preserves_order(record_store):
    records = [{"id": "b"}, {"id": "a"}, {"id": "c"}]

    assert record_store.save(VOLUNTEERS_TABLE, records) is True
    assert record_store.load(VOLUNTEERS_TABLE) == records


def test_tables_are_stored_under_literal_keys(record_store, redis_client):
    record_store.save(VOLUNTEERS_TABLE, [{"id": "1"}])
    record_store.save(ADMIN_LOGINS_TABLE, [{"email": "admin@ngo.org"}])

    assert json.loads(redis_client.get("volunteers")) == [{"id": "1"}]
    assert json.loads(redis_client.get("adminLogins")) == [{"email": "admin@ngo.org"}]


def test_save_overwrites_whole_table(record_store):
    record_store.save(VOLUNTEERS_TABLE, [{"id": "1"}, {"id": "2"}])
    record_store.save(VOLUNTEERS_TABLE, [{"id": "3"}])

    assert record_store.load(VOLUNTEERS_TABLE) == [{"id": "3"}]


def test_corrupt_json_loads_as_empty(record_store, redis_client, caplog):
    redis_client.set(VOLUNTEERS_TABLE, "{not json")

    assert record_store.load(VOLUNTEERS_TABLE) == []
    assert "Corrupted data in table volunteers" in caplog.text


def test_non_list_json_loads_as_empty(record_store, redis_client):
    redis_client.set(VOLUNTEERS_TABLE, json.dumps({"id": "1"}))

    assert record_store.load(VOLUNTEERS_TABLE) == []


def test_redis_failure_degrades_without_raising(broken_redis, caplog):
    store = RecordStore(broken_redis)

    assert store.load(VOLUNTEERS_TABLE) == []
    assert store.save(VOLUNTEERS_TABLE, [{"id": "1"}]) is False
    assert "Redis error saving table volunteers" in caplog.text


def test_unserializable_records_are_not_saved(record_store, redis_client):
    assert record_store.save(VOLUNTEERS_TABLE, [{"id": object()}]) is False
    assert redis_client.get(VOLUNTEERS_TABLE) is None
