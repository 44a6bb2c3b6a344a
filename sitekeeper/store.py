"""In-memory website collection with write-through persistence."""

import copy
import json
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator, Optional

import structlog

from .db import Database
from .models import Website, WebsiteFormData, website_to_dict
from .schema import RecordParseError, parse_website

log = structlog.get_logger()

DEFAULT_SLOT_NAME = "website-store"


class PersistenceError(Exception):
    """Raised by a persistence backend when its slot cannot be read or written."""

    pass


class SubmissionInProgressError(Exception):
    """Raised when a submission starts while another one is still running."""

    def __init__(self):
        super().__init__("Another submission is already in progress")


class MemoryPersistence:
    """Keeps the serialized snapshot in memory."""

    def __init__(self, value: Optional[str] = None):
        self.value = value

    def load(self) -> Optional[str]:
        return self.value

    def save(self, value: str) -> None:
        self.value = value


class SlotPersistence:
    """Keeps the serialized snapshot in a named slot of the SQLite database."""

    def __init__(self, db: Database, slot_name: str = DEFAULT_SLOT_NAME):
        self.db = db
        self.slot_name = slot_name

    def load(self) -> Optional[str]:
        try:
            return self.db.read_slot(self.slot_name)
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to read slot '{self.slot_name}': {e}") from e

    def save(self, value: str) -> None:
        try:
            self.db.write_slot(self.slot_name, value)
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to write slot '{self.slot_name}': {e}") from e


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_website_id() -> str:
    return f"website-{uuid.uuid4().hex[:12]}"


class WebsiteStore:
    """Owns the website collection.

    Records are kept newest-created first. Every mutation is written through to
    the persistence backend; callers only ever receive copies of stored records.
    """

    def __init__(
        self,
        persistence=None,
        seed: Optional[list[Website]] = None,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        """Initialize the store and load the persisted collection.

        Args:
            persistence: Backend with load()/save(). Defaults to MemoryPersistence
            seed: Websites used when nothing (or nothing readable) was persisted
            clock: Returns the current timezone-aware time. Defaults to UTC now
            id_factory: Returns candidate ids for new websites
        """
        self.persistence = persistence if persistence is not None else MemoryPersistence()
        self._seed = list(seed or [])
        self._clock = clock or _utcnow
        self._id_factory = id_factory or _new_website_id
        self._busy = False
        self._websites = self._load()

    # Queries

    def list_websites(self) -> list[Website]:
        """Return all websites in insertion order (newest created first)."""
        return copy.deepcopy(self._websites)

    def get_website(self, website_id: str) -> Optional[Website]:
        """Get a website by id.

        Returns:
            Website or None if not found
        """
        index = self._index_of(website_id)
        if index is None:
            return None
        return copy.deepcopy(self._websites[index])

    # Mutations

    def create_website(self, data: WebsiteFormData) -> Website:
        """Add a new website built from validated form data.

        Returns:
            The created Website with its id and timestamps
        """
        now = self._clock()
        website = Website.from_form_data(
            self._generate_id(), copy.deepcopy(data), created_at=now, updated_at=now
        )
        self._websites.insert(0, website)
        self._save()
        log.info("website_created", website_id=website.id, name=website.name)
        return copy.deepcopy(website)

    def update_website(self, website_id: str, data: WebsiteFormData) -> Optional[Website]:
        """Replace the editable fields of a website.

        Returns:
            The updated Website or None if not found
        """
        index = self._index_of(website_id)
        if index is None:
            log.debug("website_not_found", website_id=website_id, action="update")
            return None

        current = self._websites[index]
        website = Website.from_form_data(
            current.id,
            copy.deepcopy(data),
            created_at=current.created_at,
            updated_at=max(self._clock(), current.created_at),
        )
        self._websites[index] = website
        self._save()
        log.info("website_updated", website_id=website.id)
        return copy.deepcopy(website)

    def delete_website(self, website_id: str) -> bool:
        """Remove a website.

        Returns:
            True if the website was removed, False if not found
        """
        index = self._index_of(website_id)
        if index is None:
            return False

        del self._websites[index]
        self._save()
        log.info("website_deleted", website_id=website_id)
        return True

    # Busy flag

    @property
    def is_busy(self) -> bool:
        return self._busy

    def set_busy(self, flag: bool) -> None:
        self._busy = bool(flag)

    @contextmanager
    def submitting(self) -> Iterator[None]:
        """Hold the busy flag for the duration of a submission.

        Raises:
            SubmissionInProgressError: If the store is already busy
        """
        if self._busy:
            raise SubmissionInProgressError()
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    # Internals

    def _index_of(self, website_id: str) -> Optional[int]:
        if not isinstance(website_id, str) or not website_id:
            return None
        for index, website in enumerate(self._websites):
            if website.id == website_id:
                return index
        return None

    def _generate_id(self) -> str:
        existing = {website.id for website in self._websites}
        website_id = self._id_factory()
        while website_id in existing:
            website_id = self._id_factory()
        return website_id

    def _load(self) -> list[Website]:
        try:
            raw = self.persistence.load()
        except PersistenceError as e:
            log.warning("slot_unreadable", error=str(e))
            return copy.deepcopy(self._seed)

        if raw is None:
            return copy.deepcopy(self._seed)

        try:
            websites = [parse_website(item) for item in json.loads(raw)["websites"]]
        except (ValueError, TypeError, KeyError, RecordParseError) as e:
            log.warning("slot_corrupt", error=str(e))
            return copy.deepcopy(self._seed)

        ids = [website.id for website in websites]
        if len(set(ids)) != len(ids):
            log.warning("slot_corrupt", error="duplicate website ids")
            return copy.deepcopy(self._seed)

        return websites

    def _save(self) -> None:
        snapshot = {"websites": [website_to_dict(website) for website in self._websites]}
        try:
            self.persistence.save(json.dumps(snapshot))
        except PersistenceError as e:
            log.error("slot_write_failed", error=str(e))
