"""
Shared pytest fixtures for the learning hub catalog tests.

Unit tests run the catalog against in-memory stand-ins for the two backing
stores.  Both stand-ins append to one shared ``calls`` list so tests can
assert the order in which the stores were touched, and both can be told to
fail a given operation.

The ``live_conn`` fixture provides a module-scoped psycopg2 connection that:
  1. Drops the learning hub tables (clean slate).
  2. Applies the migration.
  3. Yields the connection to the test module.
  4. Closes the connection on teardown.
It skips the requesting tests when the database cannot be reached.
"""
import os
import random
import sys
from datetime import datetime, timedelta, timezone

import psycopg2
import pytest

# Ensure the project root is importable regardless of where pytest is invoked.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from learning_hub.components.models.video_entry import Actor, FeedItem
from learning_hub.components.services.catalog_service import CatalogService
from learning_hub.components.services.user_service import SessionIdentityProvider
from learning_hub.core.config.db_config import DBConfig
from learning_hub.core.config.gcs_config import GCSConfig
from learning_hub.core.errors import PersistFailed, RemoveFailed, UploadFailed

MIGRATION_SQL = os.path.join(
    os.path.dirname(__file__),
    "..",
    "..",
    "migrations",
    "0001_learning_videos.up.sql",
)

TEST_FEED = (
    FeedItem(url="https://www.youtube.com/watch?v=_snimIOTp9o", title="Introduction to Cardiology"),
    FeedItem(url="https://www.youtube.com/watch?v=tD5QlyV-CvQ", title="Emergency Medicine Basics"),
    FeedItem(url="https://www.youtube.com/watch?v=d2mlWUzA0B4", title="Soft Skills for Doctors"),
    FeedItem(url="https://www.youtube.com/watch?v=w9zISG3BFBs", title="Medical Ethics Overview"),
)


# ---------------------------------------------------------------------------
# In-memory backing stores
# ---------------------------------------------------------------------------


class FakeVideoRepository:
    """learning_videos table kept in a list; ids are ``v1``, ``v2``, ..."""

    def __init__(self, calls: list):
        self.rows: list[dict] = []
        self.fail_on: set[str] = set()
        self._calls = calls
        self._next_id = 1
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def seed(self, **fields) -> dict:
        """Insert a row directly, bypassing the call log."""
        row = self._new_row(fields)
        self.rows.append(row)
        return row

    def insert(self, row: dict) -> dict:
        self._calls.append(("repo.insert", row.get("title")))
        if "insert" in self.fail_on:
            raise PersistFailed("insert rejected")
        stored = self._new_row(row)
        self.rows.append(stored)
        return dict(stored)

    def list_all(self) -> list[dict]:
        self._calls.append(("repo.list_all", None))
        if "list_all" in self.fail_on:
            raise PersistFailed("select rejected")
        return [dict(r) for r in sorted(self.rows, key=lambda r: r["created_at"], reverse=True)]

    def delete_by_id(self, video_id: str) -> None:
        self._calls.append(("repo.delete_by_id", video_id))
        if "delete_by_id" in self.fail_on:
            raise PersistFailed("delete rejected")
        self.rows = [r for r in self.rows if r["id"] != video_id]

    def _new_row(self, fields: dict) -> dict:
        self._clock += timedelta(minutes=1)
        row = {
            "id": f"v{self._next_id}",
            "title": None,
            "description": None,
            "category": None,
            "views": 0,
            "video_url": None,
            "thumbnail_url": None,
            "uploaded_by": None,
            "created_at": self._clock,
            "updated_at": self._clock,
        }
        row.update(fields)
        self._next_id += 1
        return row


class FakeObjectStore:
    """Bucket kept in a dict of object name to bytes."""

    def __init__(self, calls: list, config: GCSConfig):
        self.objects: dict[str, bytes] = {}
        self.fail_on: set[str] = set()
        self._calls = calls
        self._config = config

    def upload(self, object_name, content, content_type=None) -> None:
        self._calls.append(("store.upload", object_name))
        if "upload" in self.fail_on:
            raise UploadFailed("upload rejected")
        data = content if isinstance(content, bytes) else content.read()
        self.objects[object_name] = data

    def remove(self, object_name) -> None:
        self._calls.append(("store.remove", object_name))
        if "remove" in self.fail_on:
            raise RemoveFailed("remove rejected")
        self.objects.pop(object_name, None)

    def public_url(self, object_name) -> str:
        return self._config.public_object_url(object_name)

    def object_path_from_url(self, url):
        return self._config.object_path_from_url(url)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def gcs_config(monkeypatch) -> GCSConfig:
    monkeypatch.delenv("VIDEO_BUCKET", raising=False)
    monkeypatch.delenv("GCS_PUBLIC_BASE_URL", raising=False)
    return GCSConfig()


@pytest.fixture
def calls() -> list:
    return []


@pytest.fixture
def repository(calls) -> FakeVideoRepository:
    return FakeVideoRepository(calls)


@pytest.fixture
def object_store(calls, gcs_config) -> FakeObjectStore:
    return FakeObjectStore(calls, gcs_config)


@pytest.fixture
def identity() -> SessionIdentityProvider:
    return SessionIdentityProvider(Actor(id="doctor-1"))


@pytest.fixture
def catalog(repository, object_store, identity) -> CatalogService:
    return CatalogService(
        repository=repository,
        object_store=object_store,
        identity=identity,
        feed=TEST_FEED,
        rng=random.Random(7),
    )


@pytest.fixture(scope="module")
def db_config() -> DBConfig:
    return DBConfig()


@pytest.fixture(scope="module")
def live_conn(db_config: DBConfig):
    """Open a connection, rebuild the schema from scratch, yield, then close."""
    try:
        connection = psycopg2.connect(db_config.dsn())
    except psycopg2.OperationalError as exc:
        pytest.skip(f"PostgreSQL not reachable at {db_config.host}:{db_config.port}: {exc}")
    connection.autocommit = True

    with connection.cursor() as cur:
        cur.execute("DROP TABLE IF EXISTS learning_videos CASCADE;")
        cur.execute("DROP TABLE IF EXISTS users CASCADE;")
        cur.execute("DROP FUNCTION IF EXISTS set_updated_at() CASCADE;")

    with open(MIGRATION_SQL, "r") as fh:
        migration_sql = fh.read()
    with connection.cursor() as cur:
        cur.execute(migration_sql)

    yield connection

    connection.close()
