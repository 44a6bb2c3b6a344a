"""Tests for the website store."""

import copy
import json
import sqlite3
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from sitekeeper.controllers import list_websites, summarize
from sitekeeper.db import Database
from sitekeeper.models import WebsiteFormData
from sitekeeper.schema import validate_website
from sitekeeper.seed import SEED_WEBSITES, seed_websites
from sitekeeper.store import (
    MemoryPersistence,
    PersistenceError,
    SlotPersistence,
    SubmissionInProgressError,
    WebsiteStore,
)


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class BrokenPersistence:
    """Persistence backend whose slot can't be read or written."""

    def load(self):
        raise PersistenceError("disk on fire")

    def save(self, value):
        raise PersistenceError("disk on fire")


@pytest.fixture
def acme_data(acme_values: dict) -> WebsiteFormData:
    return validate_website(acme_values).data


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 3, 1, 12, 0, 0, 123456, tzinfo=timezone.utc))


@pytest.fixture
def store(clock: FakeClock) -> WebsiteStore:
    return WebsiteStore(clock=clock)


class TestCreateWebsite:
    """Tests for creating websites."""

    def test_create_assigns_id_and_timestamps(self, store: WebsiteStore, acme_data, clock):
        """Test that a new website gets an id and equal timestamps."""
        website = store.create_website(acme_data)

        assert website.id.startswith("website-")
        assert website.created_at == clock.now
        assert website.updated_at == website.created_at

    def test_create_round_trip(self, store: WebsiteStore, acme_data):
        """Test that the stored website holds exactly the submitted data."""
        website = store.create_website(acme_data)

        fetched = store.get_website(website.id)

        assert fetched == website
        assert fetched.form_data() == acme_data

    def test_create_prepends(self, acme_data):
        """Test that the newest website comes first."""
        store = WebsiteStore(seed=seed_websites())

        website = store.create_website(acme_data)

        ids = [w.id for w in store.list_websites()]
        assert ids[0] == website.id
        assert ids[1:] == [record["id"] for record in SEED_WEBSITES]

    def test_ids_are_unique(self, store: WebsiteStore, acme_data):
        """Test that repeated creates never reuse an id."""
        ids = {store.create_website(acme_data).id for _ in range(20)}

        assert len(ids) == 20

    def test_colliding_id_is_regenerated(self, acme_data):
        """Test that an id already in use is never handed out again."""
        candidates = iter(["website-1", "website-1", "website-99"])
        store = WebsiteStore(seed=seed_websites(), id_factory=lambda: next(candidates))

        website = store.create_website(acme_data)

        assert website.id == "website-99"

    def test_later_changes_to_input_do_not_leak(self, store: WebsiteStore, acme_data):
        """Test that mutating the submitted data afterwards doesn't change the store."""
        website = store.create_website(acme_data)

        acme_data.offers.features.append("Sneaky")

        assert store.get_website(website.id).offers.features == ["X"]


class TestGetWebsite:
    """Tests for looking websites up."""

    def test_get_not_found(self, store: WebsiteStore):
        """Test that an unknown id returns None."""
        assert store.get_website("website-404") is None

    @pytest.mark.parametrize("website_id", ["", None, 42, ["website-1"]])
    def test_malformed_ids_are_not_found(self, website_id):
        """Test that malformed ids behave like absent ids."""
        store = WebsiteStore(seed=seed_websites())

        assert store.get_website(website_id) is None

    def test_get_is_idempotent(self, store: WebsiteStore, acme_data):
        """Test that two reads without a mutation return equal records."""
        website = store.create_website(acme_data)

        assert store.get_website(website.id) == store.get_website(website.id)

    def test_returned_records_are_copies(self, store: WebsiteStore, acme_data):
        """Test that editing a returned record doesn't change the store."""
        website = store.create_website(acme_data)

        fetched = store.get_website(website.id)
        fetched.name = "Changed"
        fetched.offers.features.clear()
        store.list_websites()[0].status = "inactive"

        stored = store.get_website(website.id)
        assert stored.name == "Acme"
        assert stored.offers.features == ["X"]
        assert stored.status == "active"


class TestUpdateWebsite:
    """Tests for updating websites."""

    def test_update_replaces_fields(self, store: WebsiteStore, acme_data, acme_values, clock):
        """Test that an update replaces every editable field."""
        website = store.create_website(acme_data)
        clock.advance(minutes=5)
        acme_values["name"] = "Acme Corp"
        acme_values["offers"]["pricing"] = {
            "type": "paid",
            "amount": 10,
            "currency": "EUR",
            "billingCycle": "yearly",
        }
        new_data = validate_website(acme_values).data

        updated = store.update_website(website.id, new_data)

        assert updated.id == website.id
        assert updated.created_at == website.created_at
        assert updated.updated_at == clock.now
        assert updated.form_data() == new_data
        assert store.get_website(website.id) == updated

    def test_update_keeps_position(self, acme_data):
        """Test that updating doesn't reorder the collection."""
        store = WebsiteStore(seed=seed_websites())
        before = [w.id for w in store.list_websites()]

        store.update_website("website-5", acme_data)

        assert [w.id for w in store.list_websites()] == before

    def test_update_not_found(self, acme_data):
        """Test that updating an unknown id changes nothing."""
        store = WebsiteStore(seed=seed_websites())
        before = store.list_websites()

        assert store.update_website("website-404", acme_data) is None
        assert store.list_websites() == before

    def test_update_never_precedes_creation(self, store: WebsiteStore, acme_data, clock):
        """Test that updatedAt stays >= createdAt even if the clock goes back."""
        website = store.create_website(acme_data)
        clock.advance(hours=-1)

        updated = store.update_website(website.id, acme_data)

        assert updated.updated_at == website.created_at


class TestDeleteWebsite:
    """Tests for deleting websites."""

    def test_delete_removes(self):
        """Test that a deleted website is gone."""
        store = WebsiteStore(seed=seed_websites())

        assert store.delete_website("website-3") is True

        assert store.get_website("website-3") is None
        assert len(store.list_websites()) == 7

    def test_delete_not_found_is_noop(self):
        """Test that deleting an unknown id is not an error."""
        store = WebsiteStore(seed=seed_websites())
        before = store.list_websites()

        assert store.delete_website("website-404") is False
        assert store.list_websites() == before

    def test_delete_only_record(self, store: WebsiteStore, acme_data):
        """Test that deleting the only website leaves an empty list and zero counters."""
        website = store.create_website(acme_data)

        store.delete_website(website.id)

        assert store.list_websites() == []
        summary = summarize(store.list_websites())
        assert (summary.total, summary.active, summary.paid) == (0, 0, 0)


class TestBusyFlag:
    """Tests for the submission busy flag."""

    def test_set_busy(self, store: WebsiteStore):
        """Test toggling the flag."""
        assert store.is_busy is False

        store.set_busy(True)
        assert store.is_busy is True

        store.set_busy(False)
        assert store.is_busy is False

    def test_busy_does_not_touch_collection(self):
        """Test that the flag has no effect on the websites."""
        store = WebsiteStore(seed=seed_websites())
        before = store.list_websites()

        store.set_busy(True)

        assert store.list_websites() == before

    def test_submitting_clears_flag(self, store: WebsiteStore):
        """Test that the flag is held only inside the block."""
        with store.submitting():
            assert store.is_busy is True

        assert store.is_busy is False

    def test_submitting_clears_flag_on_error(self, store: WebsiteStore):
        """Test that a failing submission still clears the flag."""
        with pytest.raises(RuntimeError):
            with store.submitting():
                raise RuntimeError("network down")

        assert store.is_busy is False

    def test_submitting_while_busy_raises(self, store: WebsiteStore):
        """Test that a second submission can't start while one is running."""
        with store.submitting():
            with pytest.raises(SubmissionInProgressError):
                with store.submitting():
                    pass
            assert store.is_busy is True

        assert store.is_busy is False


class TestPersistence:
    """Tests for loading and saving the collection."""

    def test_first_run_uses_seed(self):
        """Test that an empty slot loads the example websites."""
        store = WebsiteStore(MemoryPersistence(), seed=seed_websites())

        assert [w.name for w in store.list_websites()][:3] == ["TechCrunch", "Shopify", "Notion"]
        assert len(store.list_websites()) == 8

    def test_first_run_without_seed_is_empty(self):
        """Test that no seed means an empty collection."""
        assert WebsiteStore(MemoryPersistence()).list_websites() == []

    def test_mutations_write_through(self, acme_data):
        """Test that each mutation updates the persisted snapshot."""
        persistence = MemoryPersistence()
        store = WebsiteStore(persistence)

        website = store.create_website(acme_data)
        snapshot = json.loads(persistence.value)
        assert [w["id"] for w in snapshot["websites"]] == [website.id]
        assert snapshot["websites"][0]["offers"]["pricing"] == {"type": "free"}
        assert snapshot["websites"][0]["articleSpecs"]["wordCountRange"] == {"min": 500, "max": 1000}

        store.delete_website(website.id)
        assert json.loads(persistence.value) == {"websites": []}

    def test_snapshot_excludes_busy_flag(self, acme_data):
        """Test that only the websites are persisted."""
        persistence = MemoryPersistence()
        store = WebsiteStore(persistence)
        store.set_busy(True)

        store.create_website(acme_data)

        assert set(json.loads(persistence.value)) == {"websites"}

    def test_reload_restores_collection(self, acme_data, clock):
        """Test that a new store sees everything the previous one saved."""
        persistence = MemoryPersistence()
        first = WebsiteStore(persistence, seed=seed_websites(), clock=clock)
        first.create_website(acme_data)
        first.delete_website("website-2")

        second = WebsiteStore(persistence, seed=seed_websites())

        assert second.list_websites() == first.list_websites()

    def test_persisted_empty_collection_is_not_reseeded(self, acme_data):
        """Test that deleting everything survives a reload."""
        persistence = MemoryPersistence()
        store = WebsiteStore(persistence)
        website = store.create_website(acme_data)
        store.delete_website(website.id)

        assert WebsiteStore(persistence, seed=seed_websites()).list_websites() == []

    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            "null",
            "[]",
            '{"state": {}}',
            '{"websites": 5}',
            '{"websites": {"a": 1}}',
            '{"websites": [{"id": "website-1", "name": "Half a record"}]}',
        ],
    )
    def test_corrupt_slot_falls_back_to_seed(self, raw: str):
        """Test that unreadable snapshots are treated as no prior state."""
        store = WebsiteStore(MemoryPersistence(raw), seed=seed_websites())

        assert len(store.list_websites()) == 8

    def test_duplicate_ids_fall_back_to_seed(self):
        """Test that a snapshot breaking id uniqueness is discarded."""
        raw = json.dumps({"websites": [SEED_WEBSITES[0], SEED_WEBSITES[0]]})

        store = WebsiteStore(MemoryPersistence(raw), seed=seed_websites())

        assert len(store.list_websites()) == 8

    def test_timestamps_without_offset_load_as_utc(self, acme_data, clock):
        """Test that stored timestamps lacking a UTC offset can still be compared."""
        records = copy.deepcopy(SEED_WEBSITES)
        records[0]["createdAt"] = "2024-01-15T10:30:00"
        records[0]["updatedAt"] = "2024-01-15T10:30:00"
        raw = json.dumps({"websites": records})

        store = WebsiteStore(MemoryPersistence(raw), seed=[], clock=clock)

        loaded = store.get_website("website-1")
        assert loaded.created_at == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert [w.id for w in list_websites(store, sort_by="created")][-2:] == ["website-1", "website-7"]
        updated = store.update_website("website-1", acme_data)
        assert updated.updated_at == clock.now
        assert updated.created_at == loaded.created_at

    def test_broken_backend_fails_soft(self, acme_data):
        """Test that read and write failures never reach the caller."""
        store = WebsiteStore(BrokenPersistence(), seed=seed_websites())
        assert len(store.list_websites()) == 8

        website = store.create_website(acme_data)

        assert store.get_website(website.id) is not None

    def test_slot_persistence_round_trip(self, db: Database, acme_data):
        """Test that the SQLite slot keeps the collection between stores."""
        store = WebsiteStore(SlotPersistence(db), seed=seed_websites())
        website = store.create_website(acme_data)

        reopened = WebsiteStore(SlotPersistence(db), seed=[])

        assert reopened.get_website(website.id) == website
        assert len(reopened.list_websites()) == 9

    def test_slot_persistence_uses_named_slot(self, db: Database, acme_data):
        """Test that the snapshot lands in the configured slot."""
        store = WebsiteStore(SlotPersistence(db, "other-slot"))
        store.create_website(acme_data)

        assert db.read_slot("website-store") is None
        assert len(json.loads(db.read_slot("other-slot"))["websites"]) == 1

    def test_slot_persistence_wraps_sqlite_errors(self, db: Database):
        """Test that database failures surface as PersistenceError."""
        persistence = SlotPersistence(db)

        with patch.object(db, "read_slot", side_effect=sqlite3.OperationalError("database is locked")):
            with pytest.raises(PersistenceError):
                persistence.load()
        with patch.object(db, "write_slot", side_effect=sqlite3.OperationalError("disk I/O error")):
            with pytest.raises(PersistenceError):
                persistence.save("{}")
