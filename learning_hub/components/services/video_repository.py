"""Metadata store for uploaded videos: the ``learning_videos`` table."""
import logging

import psycopg2
import psycopg2.extras

from learning_hub.core.errors import PersistFailed

logger = logging.getLogger(__name__)

TABLE = "learning_videos"

INSERTABLE_COLUMNS = (
    "title",
    "description",
    "category",
    "views",
    "video_url",
    "thumbnail_url",
    "uploaded_by",
)


class LearningVideoRepository:
    """Provides learning_videos row operations against a PostgreSQL connection.

    The connection is expected to run in autocommit mode so each call is its
    own transaction.  Every ``psycopg2.Error`` is re-raised as
    :class:`PersistFailed`.
    """

    def __init__(self, conn):
        self._conn = conn

    def insert(self, row: dict) -> dict:
        """Insert a row and return it as stored, including generated columns."""
        columns = [c for c in INSERTABLE_COLUMNS if c in row]
        placeholders = ", ".join(["%s"] * len(columns))
        sql = (
            f"INSERT INTO {TABLE} ({', '.join(columns)}) "
            f"VALUES ({placeholders}) RETURNING *"
        )
        try:
            with self._conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                cur.execute(sql, tuple(row[c] for c in columns))
                inserted = cur.fetchone()
        except psycopg2.Error as exc:
            raise PersistFailed(f"Could not insert into {TABLE}: {exc}") from exc
        if inserted is None:
            raise PersistFailed(f"Insert into {TABLE} returned no row")
        return dict(inserted)

    def list_all(self) -> list[dict]:
        """Return every row, newest first."""
        try:
            with self._conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                cur.execute(f"SELECT * FROM {TABLE} ORDER BY created_at DESC")
                return [dict(row) for row in cur.fetchall()]
        except psycopg2.Error as exc:
            raise PersistFailed(f"Could not read {TABLE}: {exc}") from exc

    def delete_by_id(self, video_id: str) -> None:
        """Delete the row with the given id.  Deleting a missing id is not an error."""
        try:
            with self._conn.cursor() as cur:
                cur.execute(f"DELETE FROM {TABLE} WHERE id = %s", (video_id,))
                if cur.rowcount == 0:
                    logger.info(f"No {TABLE} row with id {video_id} to delete")
        except psycopg2.Error as exc:
            raise PersistFailed(f"Could not delete {video_id} from {TABLE}: {exc}") from exc
