import pytest

from hotel_backend.db.sample_data import SAMPLE_PROPERTIES, demo_properties
from hotel_backend.exceptions import StoreUnavailable
from hotel_backend.services.data_source import (
    DemoDataSource,
    LiveDataSource,
    Origin,
    resolve_properties,
)


def _failing(exc):
    def loader():
        raise exc

    return loader


def test_live_source_is_tagged_live(make_property):
    props = [make_property(0), make_property(1)]
    snapshot = resolve_properties(LiveDataSource(lambda: props))
    assert snapshot.origin is Origin.LIVE
    assert not snapshot.is_demo
    assert snapshot.properties == props
    assert snapshot.error is None


def test_store_failure_falls_back_to_demo_data():
    snapshot = resolve_properties(LiveDataSource(_failing(StoreUnavailable("Database connection failed"))))
    assert snapshot.origin is Origin.DEMO
    assert snapshot.is_demo
    assert len(snapshot.properties) == len(SAMPLE_PROPERTIES)
    assert "Database connection failed" in snapshot.error


def test_connection_error_falls_back_to_demo_data():
    snapshot = resolve_properties(LiveDataSource(_failing(ConnectionError("refused"))))
    assert snapshot.is_demo


def test_unexpected_errors_propagate():
    with pytest.raises(KeyError):
        resolve_properties(LiveDataSource(_failing(KeyError("boom"))))


def test_live_source_from_repository(repository, valid_fields):
    created = repository.create(valid_fields)
    snapshot = resolve_properties(LiveDataSource.from_repository(repository))
    assert snapshot.origin is Origin.LIVE
    assert [p.id for p in snapshot.properties] == [created.id]


def test_empty_live_store_is_not_replaced_by_demo(repository):
    snapshot = resolve_properties(LiveDataSource.from_repository(repository))
    assert snapshot.origin is Origin.LIVE
    assert snapshot.properties == []


def test_demo_dataset_is_stable_and_newest_first():
    first = DemoDataSource().fetch()
    assert first == demo_properties()
    assert [p.id for p in first][:2] == ["demo-1", "demo-2"]
    created = [p.created_at for p in first]
    assert created == sorted(created, reverse=True)
